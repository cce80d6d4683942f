#!/usr/bin/env python3
"""
Example usage of the convida package.
"""

from convida import Universe


def main():
    """Demonstrate programmatic usage of the convida package."""
    # Create an empty universe and stamp a glider and a pulsar
    universe = Universe(40, 20)
    universe.clear()
    universe.glider(1, 1)
    universe.pulsar(3, 20)

    print("Initial state:")
    print(universe.render())
    print(f"Population: {universe.population}")
    print()

    # Run simulation for 10 generations
    for _ in range(10):
        universe.tick()
        print(f"Generation {universe.generation}:")
        print(universe.render())
        print(f"Population: {universe.population}")
        print()

    # The host can also read the raw buffer directly
    alive = [int(idx) for idx in universe.cells.nonzero()[0]]
    print(f"Living cell indices: {alive}")


if __name__ == "__main__":
    main()

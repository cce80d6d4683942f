"""Host interfaces for driving a universe."""

from .cli import CLIConvida

__all__ = ["CLIConvida"]

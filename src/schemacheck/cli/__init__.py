"""Command line interface commands."""

from .example import example
from .rules import rules
from .validate import validate

__all__ = ["example", "rules", "validate"]

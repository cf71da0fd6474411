"""Output formatters."""

from poker_trainer.formatters.text import TextFormatter
from poker_trainer.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]

"""
Parsers sub-package for transfer-analytics.

Converts raw delimited text into an ordered tuple of ``TransferRecord``
objects. Parsers know nothing about transfer semantics; they only map
header columns to row values.

Design: Strategy Pattern
- base.py defines the BaseParser ABC and the ParseResult container.
- delimited.py implements DelimitedParser, the quote-aware comma parser,
  plus the module-level ``parse()`` shortcut.
"""

from transfer_analytics.parsers.base import BaseParser, ParseResult
from transfer_analytics.parsers.delimited import DelimitedParser, parse, tokenize_line

__all__ = ["BaseParser", "ParseResult", "DelimitedParser", "parse", "tokenize_line"]

"""
Transforms sub-package for transfer-analytics.

Shared building blocks used by every query:
  - numbers.py: the single try-parse helpers for prices and years.
  - frame.py: turns a record sequence into a DataFrame with the derived
    ``_price`` / ``_year`` columns, positionally aligned with the records.
  - grouping.py: group-by-then-reduce primitives with first-appearance
    tie order.

Queries never touch raw strings for numbers directly; they go through
these helpers so the exclusion policy for unparsable values is applied
the same way everywhere.
"""

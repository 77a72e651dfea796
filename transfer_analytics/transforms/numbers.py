"""
Numeric coercion for transfer-analytics.

Transfer tables keep every field as a raw string. Two fields need numbers:

- ``Price_numeric``: a fee amount. Empty, non-numeric, or non-finite
  values (``"nan"``, ``"inf"``) mean "unpriced" and are excluded from
  priced aggregates. They are never treated as zero.
- ``Year``: the transfer year. A blank or unparsable year excludes the
  record from per-year aggregates only.

Parsing is vectorised with ``pd.to_numeric``. The scalar helpers
(``parse_price``, ``parse_year``, ``record_price``) run the same Series
code on one value, return ``None`` on failure and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd

from transfer_analytics.records import FEE_TRANSFER, PRICE, TRANSFER_TYPE, value_of

# Largest magnitude that still fits the nullable Int64 year column
_INT64_LIMIT = float(2**63)


def coerce_prices(series: pd.Series) -> pd.Series:
    """Parse fee strings into float64; unparsable or non-finite cells become ``NaN``.

    Strings are stripped and coerced with ``pd.to_numeric(errors="coerce")``,
    so only plain decimal and exponent spellings are accepted (``"1_000"``
    and ``"50m"`` are unpriced).
    """
    numbers = pd.to_numeric(series.astype(str).str.strip(), errors="coerce").astype("float64")
    return numbers.where(np.isfinite(numbers))


def coerce_years(series: pd.Series) -> pd.Series:
    """Parse year strings into nullable Int64, truncating decimals such as ``"2019.0"``."""
    numbers = coerce_prices(series)
    numbers = numbers.where(numbers.abs() < _INT64_LIMIT)
    return np.trunc(numbers).astype("Int64")


def priced_prices(df: pd.DataFrame) -> pd.Series:
    """Fee of every priced transfer in ``df``, ``NaN`` for all other rows.

    A row is priced only when ``Transfer_type == "fee"`` and its
    ``Price_numeric`` parses to a finite number. This is the one place the
    rule is written; ``record_price`` and ``build_frame`` both go through it.
    """
    is_fee = df[TRANSFER_TYPE] == FEE_TRANSFER
    return coerce_prices(df[PRICE]).where(is_fee)


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------

def _first_or_none(series: pd.Series) -> object | None:
    value = series.iloc[0]
    return None if pd.isna(value) else value


def parse_price(value: object) -> float | None:
    """Parse a fee string into a finite float, or ``None``."""
    if value is None:
        return None
    number = _first_or_none(coerce_prices(pd.Series([value], dtype=object)))
    return None if number is None else float(number)


def parse_year(value: object) -> int | None:
    """Parse a year string into an int, or ``None``.

    Decimal strings such as ``"2019.0"`` are truncated to their integer part.
    """
    if value is None:
        return None
    number = _first_or_none(coerce_years(pd.Series([value], dtype=object)))
    return None if number is None else int(number)


def record_price(record: Mapping[str, str]) -> float | None:
    """Return the fee of a priced transfer, or ``None`` if it is not priced."""
    row = pd.DataFrame(
        {TRANSFER_TYPE: [value_of(record, TRANSFER_TYPE)], PRICE: [value_of(record, PRICE)]},
        dtype=object,
    )
    number = _first_or_none(priced_prices(row))
    return None if number is None else float(number)

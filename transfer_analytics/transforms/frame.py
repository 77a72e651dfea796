"""
Record-to-DataFrame conversion for transfer-analytics.

Every query starts from ``build_frame(records)``. The frame:

- has one row per record, in record order, with a fresh ``RangeIndex`` so
  that row label ``i`` always refers to ``records[i]``;
- contains every query column (missing ones are filled with ``""``) as
  strings;
- carries two derived columns, ``_price`` (float, ``NaN`` unless the
  record is a priced transfer) and ``_year`` (nullable Int64).

The frame is a private working copy; the records themselves are never
modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

import pandas as pd

from transfer_analytics.records import QUERY_COLUMNS, YEAR
from transfer_analytics.transforms.numbers import coerce_years, priced_prices

PRICE_VALUE = "_price"
YEAR_VALUE = "_year"

R = TypeVar("R", bound=Mapping[str, str])


def build_frame(records: Sequence[Mapping[str, str]]) -> pd.DataFrame:
    """Build the working DataFrame for a record sequence.

    Args:
        records: Parsed transfer records (any mappings of str -> str).

    Returns:
        DataFrame with string query columns plus ``_price`` and ``_year``.
    """
    df = pd.DataFrame([dict(r) for r in records], dtype=object)
    for col in QUERY_COLUMNS:
        if col not in df.columns:
            df[col] = pd.Series([""] * len(df), dtype=object)
    df = df.fillna("").reset_index(drop=True)

    df[PRICE_VALUE] = priced_prices(df)
    df[YEAR_VALUE] = coerce_years(df[YEAR])
    return df


def priced_mask(df: pd.DataFrame) -> pd.Series:
    """Boolean mask of priced transfers in a frame from ``build_frame``."""
    return df[PRICE_VALUE].notna()


def select(records: Sequence[R], positions: Iterable[int]) -> list[R]:
    """Pick records by frame row label, preserving the given order."""
    return [records[i] for i in positions]

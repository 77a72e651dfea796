"""
Group-by-then-reduce primitives for transfer-analytics.

Every aggregation in ``queries`` is a filter followed by one of these
reductions, so the conservation properties (e.g. league counts summing
to the number of records) can be checked against a single step.

Group order is first appearance in the input (``sort=False``), and all
ranking sorts are stable, so ties keep the order in which their keys were
first seen.
"""

from __future__ import annotations

import pandas as pd


def count_by(df: pd.DataFrame, keys: list[str], name: str = "count") -> pd.DataFrame:
    """Count rows per key, most frequent first.

    Args:
        df: Filtered frame.
        keys: Grouping columns.
        name: Name of the count column.

    Returns:
        DataFrame with ``keys + [name]`` columns, sorted by count
        descending. Empty (with those columns) when ``df`` is empty.
    """
    if df.empty:
        return pd.DataFrame(columns=[*keys, name])
    counts = df.groupby(keys, sort=False).size().reset_index(name=name)
    return rank(counts, name)


def aggregate_by(df: pd.DataFrame, keys: list[str], **aggregations: tuple[str, str]) -> pd.DataFrame:
    """Named aggregation per key, in first-appearance order.

    Example::

        aggregate_by(df, ["_year"], total=("_price", "sum"))

    Returns:
        DataFrame with ``keys`` plus one column per aggregation. Empty
        (with those columns) when ``df`` is empty.
    """
    if df.empty:
        return pd.DataFrame(columns=[*keys, *aggregations])
    return df.groupby(keys, sort=False).agg(**aggregations).reset_index()


def rank(df: pd.DataFrame, column: str, ascending: bool = False, limit: int | None = None) -> pd.DataFrame:
    """Stable sort on one column, optionally keeping the first ``limit`` rows.

    A negative ``limit`` is treated as zero.
    """
    ordered = df.sort_values(column, ascending=ascending, kind="stable")
    if limit is not None:
        ordered = ordered.head(max(limit, 0))
    return ordered

"""
Filesystem loader for transfer-analytics.

The parser and the queries never see paths; this module is the thin
boundary that reads a source file into a string and hands it to the
parser once. Reading uses ``utf-8-sig`` so a BOM written by spreadsheet
exports does not leak into the first column name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from transfer_analytics.config import AnalyticsConfig, load_config
from transfer_analytics.dataset import TransferDataset

logger = logging.getLogger(__name__)


def read_source_text(path: str | Path) -> str:
    """Read a transfer table from disk as text.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Transfer file not found: {path}")
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        text = f.read()
    logger.info("Read %d characters from %s", len(text), path)
    return text


def load_transfers(
    path: str | Path,
    config: AnalyticsConfig | None = None,
    config_path: str | Path | None = None,
) -> TransferDataset:
    """Read and parse a transfer file into a ``TransferDataset``.

    An empty file is a structural error here (unlike ``parse()`` on an
    empty string), so the header row is required.

    Args:
        path: Path to the comma-delimited transfer table.
        config: Session config. Takes precedence over *config_path*.
        config_path: Optional YAML config to load when *config* is not given.

    Returns:
        A new ``TransferDataset`` snapshot.

    Raises:
        FileNotFoundError: If the transfer file or config file is missing.
        SchemaError: If the file has no header row.
    """
    if config is None and config_path is not None:
        config = load_config(config_path)

    text = read_source_text(path)
    dataset = TransferDataset.from_text(
        text, config=config, source=str(path), require_header=True
    )
    logger.info(
        "Loaded %d transfers from %s (%d malformed rows dropped)",
        len(dataset), path, dataset.rows_dropped,
    )
    return dataset

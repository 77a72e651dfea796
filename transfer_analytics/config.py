"""
Configuration model and YAML I/O for transfer-analytics.

The query functions are pure and take their parameters directly; this
config only supplies the parameters a ``TransferDataset`` passes to them
on behalf of a reporting session (reference leagues and ranking limits).

Key pieces:
- AnalyticsConfig: the Pydantic model mapping 1:1 to the YAML file.
- load_config(path) -> AnalyticsConfig: load and validate from YAML.
- save_config(config, path): serialize to YAML.

Defaults reproduce the query defaults exactly, so a dataset built without
a config behaves like calling the query functions directly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from transfer_analytics.exceptions import ConfigValidationError
from transfer_analytics.queries.clubs import DEFAULT_CLUB_TOP_TRANSFERS
from transfer_analytics.queries.market import (
    DEFAULT_NATIONALITY_LIMIT,
    DEFAULT_TOP_TRANSFERS,
    top_leagues,
)

logger = logging.getLogger(__name__)


class AnalyticsConfig(BaseModel):
    """Parameters for a reporting session."""

    top_leagues: list[str] = Field(
        default_factory=top_leagues,
        description="Reference leagues that bound transfer-flow analysis",
    )
    top_transfers_limit: int = Field(
        DEFAULT_TOP_TRANSFERS, gt=0, description="Rows in the market-wide fee ranking"
    )
    club_top_limit: int = Field(
        DEFAULT_CLUB_TOP_TRANSFERS, gt=0, description="Rows in a club's fee ranking"
    )
    nationality_limit: int = Field(
        DEFAULT_NATIONALITY_LIMIT, gt=0, description="Nationalities reported"
    )

    @model_validator(mode="after")
    def _check_top_leagues(self) -> AnalyticsConfig:
        """Validate that the league reference list is non-empty and unique."""
        if not self.top_leagues:
            raise ValueError("top_leagues must name at least one league.")
        duplicates = sorted({lg for lg in self.top_leagues if self.top_leagues.count(lg) > 1})
        if duplicates:
            raise ValueError(f"top_leagues contains duplicates: {duplicates}")
        return self


def load_config(path: str | Path) -> AnalyticsConfig:
    """Load and validate an analytics YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If a field fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return AnalyticsConfig.model_validate(raw)


def save_config(config: AnalyticsConfig, path: str | Path) -> None:
    """Serialize an AnalyticsConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# transfer-analytics configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)

"""
Demo script: print a transfer report for a CSV file via the public API.

Usage:
    uv run python scripts/run_report.py data/transfers.csv
    uv run python scripts/run_report.py data/transfers.csv --club "Chelsea"
    uv run python scripts/run_report.py data/transfers.csv --config report.yaml

The file is read and parsed once; every section below is a separate
query against the same snapshot.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_report")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _option(args: list[str], name: str) -> str | None:
    """Return the value following ``name`` in *args*, if present."""
    if name in args:
        idx = args.index(name)
        if idx + 1 < len(args):
            return args[idx + 1]
    return None


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import transfer_analytics

    args = sys.argv[1:]
    if not args or args[0].startswith("--"):
        log.error("Usage: run_report.py <transfers.csv> [--club NAME] [--config PATH]")
        sys.exit(2)

    ds = transfer_analytics.load_transfers(args[0], config_path=_option(args, "--config"))

    info = ds.describe()
    log.info("=" * 70)
    log.info("Source       : %s", info.source)
    log.info("Records      : %s (%d malformed rows dropped)", f"{info.num_records:,}", info.rows_dropped)
    log.info("Priced       : %s", f"{info.paid_transfers:,}")
    log.info("Years        : %s", info.year_range)
    log.info("=" * 70)

    log.info("Top leagues by incoming transfers:")
    for row in ds.by_league()[:10]:
        log.info("  %-30s %6d", row.league, row.count)

    log.info("Most expensive transfers:")
    for row in ds.top_transfers()[:10]:
        log.info(
            "  %-30s -> %-30s %12s",
            row.record.get("Prev_club", ""), row.record.get("New_club", ""), f"{row.price:,.0f}",
        )

    log.info("Flows between top leagues:")
    for flow in ds.flows():
        log.info("  %-16s -> %-16s %6d", flow.source, flow.target, flow.count)

    club = _option(args, "--club")
    if club:
        report = ds.club_report(club, strict=True)
        s = report.stats
        log.info("Club '%s': %d in / %d out, net spend %s", club, s.incoming, s.outgoing, f"{s.net_spend:,.0f}")
        for year in report.by_year:
            log.info("  %d  in=%d  out=%d", year.year, year.incoming, year.outgoing)

    log.info("Done.")


if __name__ == "__main__":
    main()

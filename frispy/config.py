"""TOML configuration loader for the register."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_DB_PATH = "~/.config/frispy/pos.db"


@dataclass
class DatabaseConfig:
    path: str = DEFAULT_DB_PATH


@dataclass
class DisplayConfig:
    currency_symbol: str = "$"


@dataclass
class AnalyticsConfig:
    best_sellers_limit: int = 5
    weekly_chart_days: int = 7
    monthly_chart_days: int = 30


@dataclass
class SampleDataConfig:
    enabled: bool = True
    days: int = 90


@dataclass
class PosConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    sample_data: SampleDataConfig = field(default_factory=SampleDataConfig)


def load_config(path: str | Path | None = None) -> PosConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The database path and currency symbol can be supplied through
    FRISPY_DB_PATH and FRISPY_CURRENCY_SYMBOL when the file leaves them unset.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    dbs = raw.get("database", {})
    dsp = raw.get("display", {})
    ana = raw.get("analytics", {})
    smp = raw.get("sample_data", {})

    # Resolve: config file → environment variable → default
    db_path = (
        dbs.get("path", "")
        or os.environ.get("FRISPY_DB_PATH", "")
        or DEFAULT_DB_PATH
    )
    currency_symbol = (
        dsp.get("currency_symbol", "")
        or os.environ.get("FRISPY_CURRENCY_SYMBOL", "")
        or "$"
    )

    return PosConfig(
        database=DatabaseConfig(path=db_path),
        display=DisplayConfig(currency_symbol=currency_symbol),
        analytics=AnalyticsConfig(
            best_sellers_limit=ana.get("best_sellers_limit", 5),
            weekly_chart_days=ana.get("weekly_chart_days", 7),
            monthly_chart_days=ana.get("monthly_chart_days", 30),
        ),
        sample_data=SampleDataConfig(
            enabled=smp.get("enabled", True),
            days=smp.get("days", 90),
        ),
    )

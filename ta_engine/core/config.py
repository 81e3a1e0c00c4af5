"""
Load configuration from config.yaml and .env. Environment wins over yaml.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    logging_cfg = data.get("logging", {}) or {}
    analysis = data.get("analysis", {}) or {}
    backtest = data.get("backtest", {}) or {}
    risk = data.get("risk", {}) or {}
    source = data.get("data", {}) or {}

    csv_path = env("BARS_CSV", source.get("csv_path") or "")
    return Config(
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(env("LOG_DIR", logging_cfg.get("log_dir", "logs"))),
        log_file=env("LOG_FILE", logging_cfg.get("log_file", "ta_engine.log")),
        rsi_period=env_int("RSI_PERIOD", analysis.get("rsi_period", 14)),
        strategy=env("BACKTEST_STRATEGY", backtest.get("strategy", "combined")).lower(),
        risk_pct=env_float("RISK_PCT", risk.get("risk_pct", 1.0)),
        csv_path=Path(csv_path) if csv_path else None,
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "log_level", "log_dir", "log_file",
        "rsi_period", "strategy", "risk_pct", "csv_path",
    )

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "ta_engine.log",
        rsi_period: int = 14,
        strategy: str = "combined",
        risk_pct: float = 1.0,
        csv_path: Optional[Path] = None,
    ):
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
        self.rsi_period = rsi_period
        self.strategy = strategy
        self.risk_pct = risk_pct
        self.csv_path = csv_path

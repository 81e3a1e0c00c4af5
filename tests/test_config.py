"""Unit tests for core.config."""

import os
from pathlib import Path

import pytest
from ta_engine.core.config import load_config

ENV_KEYS = ("LOG_LEVEL", "LOG_DIR", "LOG_FILE", "RSI_PERIOD", "BACKTEST_STRATEGY", "RISK_PCT", "BARS_CSV")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)


def test_defaults_without_files(tmp_path):
    config = load_config(tmp_path / "missing.yaml", tmp_path)
    assert config.log_level == "INFO"
    assert config.rsi_period == 14
    assert config.strategy == "combined"
    assert config.risk_pct == 1.0
    assert config.csv_path is None
    assert config.log_dir == Path("logs")


def test_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n  level: DEBUG\n"
        "analysis:\n  rsi_period: 21\n"
        "backtest:\n  strategy: MACD\n"
        "data:\n  csv_path: data/btc.csv\n",
        encoding="utf-8",
    )
    config = load_config(path, tmp_path)
    assert config.log_level == "DEBUG"
    assert config.rsi_period == 21
    assert config.strategy == "macd"
    assert config.csv_path == Path("data/btc.csv")


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("analysis:\n  rsi_period: 21\n", encoding="utf-8")
    monkeypatch.setenv("RSI_PERIOD", "7")
    monkeypatch.setenv("RISK_PCT", "not-a-number")
    config = load_config(path, tmp_path)
    assert config.rsi_period == 7
    assert config.risk_pct == 1.0


def test_dotenv_file_is_loaded(tmp_path):
    (tmp_path / ".env").write_text("BACKTEST_STRATEGY=rsi\n", encoding="utf-8")
    config = load_config(tmp_path / "missing.yaml", tmp_path)
    assert config.strategy == "rsi"

"""CLI smoke tests for main.py."""

import json

import pytest

import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        f"logging:\n  level: WARNING\n  log_dir: {tmp_path / 'logs'}\n  log_file: cli.log\n",
        encoding="utf-8",
    )
    return path


def _write_csv(path, prices):
    lines = ["time,open,high,low,close,volume"]
    for i, p in enumerate(prices):
        lines.append(f"2024-01-{1 + i // 24:02d}T{i % 24:02d}:00:00Z,{p},{p},{p},{p},1")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_backtest_json(tmp_path, config_file, sine_prices, capsys):
    csv = _write_csv(tmp_path / "bars.csv", sine_prices[:400])
    code = main.main(["--config", str(config_file), "backtest", "--csv", str(csv), "--strategy", "rsi", "--json"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["strategy"] == "rsi"
    assert out["initialCapital"] == 10000.0
    assert out["totalTrades"] >= 1
    assert len(out["trades"]) == min(10, out["totalTrades"])
    assert len(out["equityCurve"]) == 400 - 50 + 1
    assert out["equityCurve"][0] == 10000.0


def test_analyze_json(tmp_path, config_file, random_walk, capsys):
    csv = _write_csv(tmp_path / "bars.csv", random_walk[:100])
    assert main.main(["--config", str(config_file), "analyze", "--csv", str(csv), "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert set(out) == {"rsi", "macd", "bollingerBands", "signal", "currentPrice"}
    assert out["currentPrice"] == pytest.approx(random_walk[99])


def test_risk_summary(config_file, capsys):
    code = main.main(["--config", str(config_file), "risk", "--balance", "10000", "--risk-pct", "2", "--entry", "50", "--stop", "48"])
    assert code == 0
    assert "position size of 100.0000 units" in capsys.readouterr().out


def test_insufficient_data_exit_code(tmp_path, config_file):
    csv = _write_csv(tmp_path / "bars.csv", [100.0 + i for i in range(10)])
    assert main.main(["--config", str(config_file), "signal", "--csv", str(csv)]) == 1


def test_rsi_explicit_zero_period_is_rejected(tmp_path, config_file):
    csv = _write_csv(tmp_path / "bars.csv", [100.0 + (i % 5) for i in range(40)])
    assert main.main(["--config", str(config_file), "rsi", "--csv", str(csv), "--period", "0"]) == 1

#!/usr/bin/env python3
"""
Technical-analysis CLI: analyze | rsi | macd | signal | risk | backtest
Usage:
  python main.py analyze --csv bars.csv [--json]
  python main.py rsi --csv bars.csv [--period 14]
  python main.py backtest --csv bars.csv [--strategy combined]
  python main.py risk --balance 10000 --entry 100 --stop 95 [--risk-pct 1]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ta_engine import service
from ta_engine.core.config import Config, load_config
from ta_engine.core.errors import AnalysisError
from ta_engine.core.logger import setup_logging
from ta_engine.core.types import Bar
from ta_engine.data.loader import closes, load_bars_csv
from ta_engine.strategies.indicator import STRATEGIES

logger = logging.getLogger("ta_engine.cli")


def _bars(args: argparse.Namespace, config: Config) -> List[Bar]:
    path = args.csv or config.csv_path
    if not path:
        raise SystemExit("No bar data: pass --csv or set data.csv_path / BARS_CSV")
    return load_bars_csv(path)


def _emit(result, as_json: bool, summary: str) -> None:
    if as_json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        print(summary)


def cmd_analyze(args: argparse.Namespace, config: Config) -> None:
    prices = closes(_bars(args, config))
    a = service.analyze(prices)
    s = a.signal
    summary = "\n".join([
        "\n--- Technical Analysis ---",
        f"Price: {a.current_price:.4f}",
        f"RSI(14): {a.rsi.current:.2f} ({a.rsi.signal.value})",
        f"MACD: {a.macd.macd:.4f} signal {a.macd.signal:.4f} ({a.macd.trend.value}, crossover: {a.macd.crossover.value})",
        f"Bollinger: {a.bollinger_bands.lower:.4f} / {a.bollinger_bands.middle:.4f} / {a.bollinger_bands.upper:.4f} ({a.bollinger_bands.signal.value})",
        f"Signal: {s.action.value} ({s.confidence:.1f}% | bullish {s.bullish_signals}, bearish {s.bearish_signals})",
    ])
    _emit(a, args.json, summary)


def cmd_rsi(args: argparse.Namespace, config: Config) -> None:
    period = args.period if args.period is not None else config.rsi_period
    r = service.rsi(closes(_bars(args, config)), period)
    _emit(r, args.json, f"RSI({r.period}): {r.current:.2f} ({r.signal.value})")


def cmd_macd(args: argparse.Namespace, config: Config) -> None:
    m = service.macd(closes(_bars(args, config)))
    _emit(m, args.json, f"MACD: {m.macd:.4f} signal {m.signal:.4f} histogram {m.histogram:.4f} ({m.trend.value}, crossover: {m.crossover.value})")


def cmd_signal(args: argparse.Namespace, config: Config) -> None:
    s = service.signal(closes(_bars(args, config)))
    _emit(s, args.json, f"Signal: {s.action.value} ({s.confidence:.1f}% | bullish {s.bullish_signals}, bearish {s.bearish_signals})")


def cmd_risk(args: argparse.Namespace, config: Config) -> None:
    risk_pct = args.risk_pct if args.risk_pct is not None else config.risk_pct
    r = service.risk_management(args.balance, risk_pct, args.entry, args.stop)
    _emit(r, args.json, r.recommendation)


def cmd_backtest(args: argparse.Namespace, config: Config) -> None:
    strategy = args.strategy or config.strategy
    r = service.backtest(_bars(args, config), strategy)
    if args.json:
        print(json.dumps(r.as_dict(), indent=2))
        return
    print("\n--- Backtest Results ---")
    print(f"Strategy: {r.strategy}")
    print(f"Capital: {r.initial_capital:.2f} -> {r.final_capital:.2f} ({r.profit_percent:.2f}%)")
    print(f"Total trades: {r.total_trades} (wins: {r.winning_trades}, losses: {r.losing_trades})")
    print(f"Win rate: {r.win_rate:.1f}%")
    m = r.metrics
    if m:
        print(f"Max drawdown: {m.max_drawdown_pct:.2f}%")
        pf = "n/a" if m.profit_factor is None else f"{m.profit_factor:.2f}"
        print(f"Profit factor: {pf}")
        print(f"Expectancy: {m.expectancy:.2f}/trade")


COMMANDS = {
    "analyze": cmd_analyze,
    "rsi": cmd_rsi,
    "macd": cmd_macd,
    "signal": cmd_signal,
    "risk": cmd_risk,
    "backtest": cmd_backtest,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Technical-analysis CLI")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str, needs_bars: bool = True) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        if needs_bars:
            p.add_argument("--csv", type=Path, default=None, help="OHLCV CSV (time, open, high, low, close, volume)")
        p.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
        return p

    add("analyze", "RSI, MACD, Bollinger Bands and composite signal")
    add("rsi", "Relative Strength Index").add_argument("--period", type=int, default=None)
    add("macd", "MACD (12, 26, 9)")
    add("signal", "Composite BUY/SELL/HOLD signal")
    risk = add("risk", "Position sizing from account risk", needs_bars=False)
    risk.add_argument("--balance", type=float, required=True)
    risk.add_argument("--risk-pct", type=float, default=None)
    risk.add_argument("--entry", type=float, required=True)
    risk.add_argument("--stop", type=float, required=True)
    add("backtest", "Single-position backtest").add_argument(
        "--strategy", choices=sorted(STRATEGIES), default=None,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file)
    try:
        COMMANDS[args.command](args, config)
    except (AnalysisError, FileNotFoundError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Signal synthesis from indicator votes."""

from ta_engine.signals.synthesizer import generate_signal, collect_votes, tally, decide

__all__ = ["generate_signal", "collect_votes", "tally", "decide"]

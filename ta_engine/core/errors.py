"""Analysis errors. Raised to the caller, never retried or coerced to NaN."""


class AnalysisError(Exception):
    """Base error for indicator, signal and backtest computations."""
    pass


class InsufficientData(AnalysisError):
    """Price or bar sequence shorter than the indicator window."""

    def __init__(self, indicator: str, required: int, available: int):
        self.indicator = indicator
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough data points for {indicator} calculation: need {required}, got {available}"
        )


class InvalidInput(AnalysisError, ValueError):
    """Non-finite or out-of-range parameter or price."""
    pass


class DegenerateComputation(AnalysisError):
    """Computation has no defined value (e.g. RSI over a window with no price change)."""
    pass

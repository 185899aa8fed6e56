"""Error types.

Input validation failures are ValueError subclasses so callers can
treat them as bad input. "No arbitrage" is a normal result, never an error.
"""


class ArbitrageInputError(ValueError):
    """Base class for invalid calculator input."""


class InvalidOddsError(ArbitrageInputError):
    """Odds value is not a finite decimal price >= 1."""

    def __init__(self, message: str, value=None, index: int | None = None, label: str | None = None):
        super().__init__(message)
        self.value = value
        self.index = index
        self.label = label


class InvalidInvestmentError(ArbitrageInputError):
    """Investment is not a finite amount > 0."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class ApiError(Exception):
    """Failure talking to an odds provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_status(cls, status: int, detail: str | None = None) -> "ApiError":
        """Map an HTTP status from a provider to an ApiError."""
        if status == 401:
            return cls("Invalid API key or unauthorized access", 401)
        if status == 429:
            return cls("API rate limit exceeded. Please try again later.", 429)
        if status == 404:
            return cls("API endpoint not found", 404)
        return cls(f"API Error: {detail or f'HTTP {status}'}", status)

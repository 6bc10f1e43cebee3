"""
Domain-specific errors for the markets bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class MarketDomainError(Exception):
    """Base error for all market domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MarketNotFoundError(MarketDomainError):
    """Raised when no market exists for the requested identifier."""

    def __init__(self, market_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Market not found: {market_id}")
        self.market_id = market_id


class InvalidQueryParameterError(MarketDomainError):
    """Raised when a query parameter cannot be parsed into its typed form."""

    def __init__(self, parameter: str, value: str) -> None:
        super().__init__(f"{parameter} must be an integer, got {value!r}")
        self.parameter = parameter
        self.value = value


class MarketRepositoryError(MarketDomainError):
    """Raised when the market store cannot be read."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Market repository failure: {reason}")
        self.reason = reason

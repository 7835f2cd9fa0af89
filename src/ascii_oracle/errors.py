"""Application-level exception types for ASCII Oracle."""

from __future__ import annotations


class OracleError(Exception):
    """Base exception for ASCII Oracle."""


class ConfigurationError(OracleError):
    """Raised when settings are present but unusable."""


class ExpressionError(OracleError):
    """Raised when an arithmetic expression is rejected or cannot be evaluated."""


class FormulaError(OracleError):
    """Raised when a physics or chemistry formula cannot be computed."""


class UnknownElementError(FormulaError):
    """Raised when a chemical formula names an element outside the periodic table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown element: {symbol}")
        self.symbol = symbol


class CollaboratorUnavailableError(OracleError):
    """Raised when an external service cannot be reached."""

    def __init__(self, service: str, reason: str = "") -> None:
        message = f"{service} service appears to be offline"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.service = service
        self.reason = reason

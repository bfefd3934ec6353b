from __future__ import annotations

from typing import Any


class PricingDisplayError(Exception):
    """Base exception for all pricing-display errors.

    Attributes:
        code: Optional machine-readable error code (e.g. ``"UNKNOWN_CURRENCY"``).
        details: Arbitrary key/value context about the error.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(PricingDisplayError): ...


class UnknownCurrencyError(PricingDisplayError):
    """Raised by the strict currency lookup when an ISO code has no symbol."""

    def __init__(self, currency: str) -> None:
        super().__init__(
            f"No symbol registered for currency {currency!r}",
            code="UNKNOWN_CURRENCY",
            details={"currency": currency},
        )
        self.currency = currency


class PriceValidationError(PricingDisplayError): ...


class TierIntegrityError(PriceValidationError):
    """Raised at ingestion when a tier list breaks the ordering rules."""

    def __init__(self, issues: list[str]) -> None:
        super().__init__(
            "Malformed tier data: " + "; ".join(issues),
            code="TIER_INTEGRITY",
            details={"issues": list(issues)},
        )
        self.issues = list(issues)

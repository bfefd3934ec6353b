"""Ingestion-side checks for price payloads.

Formatters never raise on bad tier data; callers that load prices from the
billing API use these helpers to surface integrity problems up front.
"""

from __future__ import annotations

from typing import Any, Sequence

import structlog
from pydantic import BaseModel, ValidationError

from pricing_display.core.exceptions import PriceValidationError, TierIntegrityError
from pricing_display.pricing.models import Price, Tier

logger = structlog.get_logger(__name__)


class TierIssue(BaseModel):
    index: int
    message: str


def check_tiers(tiers: Sequence[Tier] | None) -> list[TierIssue]:
    """Return every ordering problem found in *tiers*.

    Tiers must ascend strictly by ``up_to``, and only the last tier may be
    unbounded.
    """
    issues: list[TierIssue] = []
    if not tiers:
        return issues

    unbounded = [i for i, tier in enumerate(tiers) if tier.up_to is None]
    if len(unbounded) > 1:
        issues.append(
            TierIssue(
                index=unbounded[1],
                message=f"{len(unbounded)} tiers have no upper bound",
            )
        )
    for i in unbounded:
        if i != len(tiers) - 1:
            issues.append(TierIssue(index=i, message=f"unbounded tier {i + 1} is not the last tier"))

    previous: int | None = None
    for i, tier in enumerate(tiers):
        if tier.up_to is None:
            continue
        if tier.up_to < 0:
            issues.append(TierIssue(index=i, message=f"tier {i + 1} has negative up_to {tier.up_to}"))
        if previous is not None and tier.up_to <= previous:
            issues.append(
                TierIssue(
                    index=i,
                    message=f"tier {i + 1} up_to {tier.up_to} does not exceed {previous}",
                )
            )
        previous = tier.up_to
    return issues


def validate_tiers(tiers: Sequence[Tier] | None) -> None:
    """Raise :class:`TierIntegrityError` if *tiers* has any ordering problem."""
    issues = check_tiers(tiers)
    if issues:
        raise TierIntegrityError([issue.message for issue in issues])


def load_price(payload: dict[str, Any], *, strict: bool = False) -> Price:
    """Build a :class:`Price` from an API payload.

    Tier problems in ``tiers`` and ``price_unit_tiers`` are logged as
    warnings, or raised as :class:`TierIntegrityError` when *strict* is set.

    Raises:
        PriceValidationError: If the payload does not match the price schema.
    """
    try:
        price = Price.model_validate(payload)
    except ValidationError as exc:
        raise PriceValidationError(
            "Invalid price payload",
            code="INVALID_PRICE",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    for field in ("tiers", "price_unit_tiers"):
        issues = check_tiers(getattr(price, field))
        if not issues:
            continue
        messages = [issue.message for issue in issues]
        if strict:
            raise TierIntegrityError(messages)
        logger.warning("tier_integrity_issues", price_id=price.id, field=field, issues=messages)
    return price

"""Domain services for cost and tax line items."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from investcalc.domain.models.cost_items import (
    CostEffect,
    CostItem,
    FixedAmount,
    PercentOf,
)
from investcalc.utils.decimal_utils import (
    HUNDRED,
    ZERO,
    coerce_decimal,
    percent_of,
    round_half_up,
)


class CostModeLockedError(ValueError):
    """Raised when toggling the mode of an item that does not allow it."""


def amount_of(item: CostItem, base) -> Decimal:
    """Return the absolute amount of an item against a base.

    Args:
        item: Line item to evaluate.
        base: Amount percentages refer to.

    Returns:
        Decimal: Unsigned amount; zero for disabled items.
    """
    if not item.enabled:
        return ZERO
    if isinstance(item.amount, PercentOf):
        return percent_of(base, item.amount.rate_pct)
    return coerce_decimal(item.amount.amount)


def section_total(items: Iterable[CostItem], base) -> Decimal:
    """Sum enabled items, subtracting those with a subtractive effect."""
    total = ZERO
    for item in items:
        amount = amount_of(item, base)
        if item.effect is CostEffect.SUBTRACT:
            total -= amount
        else:
            total += amount
    return total


def toggle_mode(item: CostItem, base) -> CostItem:
    """Switch an item between percent and currency mode.

    The absolute amount at the moment of the toggle is preserved: a
    percentage becomes ``base * pct / 100`` and a currency amount becomes
    ``amount / base * 100`` (zero when the base is zero). Both are rounded
    to two fractional digits.

    Args:
        item: Item to toggle.
        base: Current base amount.

    Returns:
        CostItem: Item in the other mode.

    Raises:
        CostModeLockedError: If the item does not allow mode changes.
    """
    if not item.allow_mode_change:
        raise CostModeLockedError(f"Cost item '{item.key}' has a fixed mode")
    base = coerce_decimal(base)
    if isinstance(item.amount, PercentOf):
        amount = round_half_up(percent_of(base, item.amount.rate_pct))
        return replace(item, amount=FixedAmount(amount=amount))
    rate_pct = ZERO
    if base != 0:
        rate_pct = round_half_up(
            coerce_decimal(item.amount.amount) / base * HUNDRED
        )
    return replace(item, amount=PercentOf(rate_pct=rate_pct))


def set_enabled(item: CostItem, enabled: bool) -> CostItem:
    """Return a copy of ``item`` with the given enablement flag."""
    return replace(item, enabled=enabled)


def find_item(items: Iterable[CostItem], key: str) -> CostItem | None:
    """Return the item with ``key`` or None."""
    for item in items:
        if item.key == key:
            return item
    return None


__all__ = [
    "CostModeLockedError",
    "amount_of",
    "section_total",
    "toggle_mode",
    "set_enabled",
    "find_item",
]

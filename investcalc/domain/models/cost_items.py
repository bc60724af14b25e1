"""Domain models for toggleable cost and tax line items."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from investcalc.utils.decimal_utils import ZERO, coerce_decimal


class CostMode(str, Enum):
    """How a line item value is interpreted."""

    PERCENT = "percent"
    CURRENCY = "currency"


class CostEffect(str, Enum):
    """Whether an item adds to or subtracts from its section total."""

    ADD = "add"
    SUBTRACT = "subtract"


@dataclass(frozen=True)
class PercentOf:
    """Amount expressed as a percentage of a base amount."""

    rate_pct: Decimal


@dataclass(frozen=True)
class FixedAmount:
    """Amount expressed directly in currency."""

    amount: Decimal


@dataclass(frozen=True)
class CostItem:
    """A single cost or tax line item.

    Attributes:
        key: Stable identifier of the item (e.g. ``notaryFees``).
        label: Display label or label key.
        enabled: Whether the item contributes to totals.
        amount: Percentage-of-base or fixed-currency variant.
        allow_mode_change: Whether the item may switch between variants.
        effect: Sign applied when summing the item into a section total.
    """

    key: str
    label: str
    enabled: bool
    amount: PercentOf | FixedAmount
    allow_mode_change: bool = True
    effect: CostEffect = CostEffect.ADD

    @property
    def mode(self) -> CostMode:
        if isinstance(self.amount, PercentOf):
            return CostMode.PERCENT
        return CostMode.CURRENCY

    @property
    def value(self) -> Decimal:
        if isinstance(self.amount, PercentOf):
            return self.amount.rate_pct
        return self.amount.amount

    @classmethod
    def build(
        cls,
        key: str,
        value,
        mode: CostMode | str = CostMode.PERCENT,
        *,
        enabled: bool = True,
        label: str | None = None,
        allow_mode_change: bool = True,
        effect: CostEffect | str = CostEffect.ADD,
    ) -> "CostItem":
        """Create an item from the flat ``{enabled, value, mode}`` view."""
        mode = CostMode(mode)
        number = coerce_decimal(value)
        amount = (
            PercentOf(rate_pct=number)
            if mode is CostMode.PERCENT
            else FixedAmount(amount=number)
        )
        return cls(
            key=key,
            label=label or key,
            enabled=enabled,
            amount=amount,
            allow_mode_change=allow_mode_change,
            effect=CostEffect(effect),
        )


class RunningCostMode(str, Enum):
    """Source of a running-cost block amount."""

    NONE = "none"
    STANDARD = "standard"
    MANUAL = "manual"


@dataclass(frozen=True)
class RunningCostBlock:
    """Apportionable or non-apportionable operating cost block."""

    mode: RunningCostMode = RunningCostMode.STANDARD
    manual_annual: Decimal = ZERO


@dataclass(frozen=True)
class HouseFee:
    """Monthly house fee entered as a total and its apportionable share.

    Only the part not passed on to the tenant is an owner cost. In percent
    mode both values are percentages of the monthly cold rent.
    """

    enabled: bool = False
    mode: CostMode = CostMode.CURRENCY
    total: Decimal = ZERO
    apportionable: Decimal = ZERO


@dataclass(frozen=True)
class RunningCostSplit:
    """Running costs split between tenant-borne and owner-borne shares."""

    apportionable: RunningCostBlock = RunningCostBlock()
    non_apportionable: RunningCostBlock = RunningCostBlock()
    house_fee: HouseFee = HouseFee()


__all__ = [
    "CostMode",
    "CostEffect",
    "PercentOf",
    "FixedAmount",
    "CostItem",
    "RunningCostMode",
    "RunningCostBlock",
    "HouseFee",
    "RunningCostSplit",
]

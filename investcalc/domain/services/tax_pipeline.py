"""Ordered deduction pipeline for cascading taxes.

Each stage declares its base: either the gross amount entering the pipeline
or the output of an earlier stage. A stage whose base stage is disabled
contributes nothing, whatever its own flag says.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from investcalc.domain.models.cost_items import CostItem
from investcalc.domain.models.results import TaxBreakdown
from investcalc.domain.services.cost_items import amount_of, find_item
from investcalc.utils.decimal_utils import ZERO, coerce_decimal

GROSS_BASE = "gross"

WITHHOLDING_TAX = "withholdingTax"
SOLIDARITY_SURCHARGE = "solidaritySurcharge"
CHURCH_TAX = "churchTax"


@dataclass(frozen=True)
class DeductionStage:
    """One stage of a deduction pipeline.

    Attributes:
        key: Stage identifier, referenced by dependent stages.
        item: Rate or amount of the stage; None when not configured.
        base: ``GROSS_BASE`` or the key of an earlier stage.
    """

    key: str
    item: CostItem | None
    base: str = GROSS_BASE


def run_tax_pipeline(
    gross_base,
    stages: Sequence[DeductionStage],
) -> TaxBreakdown:
    """Evaluate deduction stages in order.

    Args:
        gross_base: Amount the first-level stages apply to.
        stages: Stages in evaluation order.

    Returns:
        TaxBreakdown: Unrounded amount per stage and their total.

    Raises:
        ValueError: If a stage refers to a stage not evaluated before it.
    """
    gross_base = coerce_decimal(gross_base)
    amounts = {}
    active: set[str] = set()
    for stage in stages:
        if stage.base == GROSS_BASE:
            base = gross_base
            base_active = True
        elif stage.base in amounts:
            base = amounts[stage.base]
            base_active = stage.base in active
        else:
            raise ValueError(
                f"Stage '{stage.key}' depends on unknown stage '{stage.base}'"
            )
        item = stage.item
        if item is None or not item.enabled or not base_active:
            amounts[stage.key] = ZERO
            continue
        amounts[stage.key] = amount_of(item, base)
        active.add(stage.key)
    total = sum(amounts.values(), start=ZERO)
    return TaxBreakdown(amounts=amounts, total=total)


def capital_income_tax(
    gross_yearly,
    tax_free_allowance,
    tax_items: Sequence[CostItem],
) -> TaxBreakdown:
    """Compute the yearly tax on capital income such as interest or dividends.

    Withholding tax applies to the income above the tax-free allowance;
    solidarity surcharge and church tax apply to the withholding tax.

    Args:
        gross_yearly: Yearly capital income before tax.
        tax_free_allowance: Yearly income exempt from withholding tax.
        tax_items: Withholding, solidarity and church tax items.

    Returns:
        TaxBreakdown: Unrounded amount per stage and their total.
    """
    taxable = max(
        coerce_decimal(gross_yearly) - coerce_decimal(tax_free_allowance),
        ZERO,
    )
    stages = [
        DeductionStage(WITHHOLDING_TAX, find_item(tax_items, WITHHOLDING_TAX)),
        DeductionStage(
            SOLIDARITY_SURCHARGE,
            find_item(tax_items, SOLIDARITY_SURCHARGE),
            base=WITHHOLDING_TAX,
        ),
        DeductionStage(
            CHURCH_TAX,
            find_item(tax_items, CHURCH_TAX),
            base=WITHHOLDING_TAX,
        ),
    ]
    return run_tax_pipeline(taxable, stages)


__all__ = [
    "GROSS_BASE",
    "WITHHOLDING_TAX",
    "SOLIDARITY_SURCHARGE",
    "CHURCH_TAX",
    "DeductionStage",
    "run_tax_pipeline",
    "capital_income_tax",
]

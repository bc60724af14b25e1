"""Tests for the ordered deduction pipeline."""

from decimal import Decimal

import pytest

from investcalc.domain.models import CostItem
from investcalc.domain.services.tax_pipeline import (
    DeductionStage,
    run_tax_pipeline,
)


def _stages(income_enabled=True, soli_enabled=True, church_enabled=True):
    return [
        DeductionStage(
            "incomeTax",
            CostItem.build("incomeTax", "30", enabled=income_enabled),
        ),
        DeductionStage(
            "solidaritySurcharge",
            CostItem.build("solidaritySurcharge", "5.5", enabled=soli_enabled),
            base="incomeTax",
        ),
        DeductionStage(
            "churchTax",
            CostItem.build("churchTax", "9", enabled=church_enabled),
            base="incomeTax",
        ),
    ]


def test_dependent_stages_use_the_income_tax_amount():
    breakdown = run_tax_pipeline("12000", _stages())

    assert breakdown.amount("incomeTax") == Decimal("3600")
    assert breakdown.amount("solidaritySurcharge") == Decimal("198")
    assert breakdown.amount("churchTax") == Decimal("324")
    assert breakdown.total == Decimal("4122")


def test_disabled_income_tax_zeroes_dependent_stages():
    """Surcharges must not apply when their base stage is disabled."""
    breakdown = run_tax_pipeline("12000", _stages(income_enabled=False))

    assert breakdown.amount("solidaritySurcharge") == Decimal("0")
    assert breakdown.amount("churchTax") == Decimal("0")
    assert breakdown.total == Decimal("0")


def test_missing_item_contributes_zero():
    stages = [DeductionStage("incomeTax", None)]

    breakdown = run_tax_pipeline("12000", stages)

    assert breakdown.total == Decimal("0")


def test_unknown_base_stage_raises():
    stages = [
        DeductionStage(
            "churchTax",
            CostItem.build("churchTax", "9"),
            base="incomeTax",
        )
    ]

    with pytest.raises(ValueError):
        run_tax_pipeline("12000", stages)

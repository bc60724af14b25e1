"""Domain services package."""

from .cashflow import (
    compute_cashflow_monthly,
    enrich_cashflows,
    summarize_cashflows,
)
from .cost_items import (
    CostModeLockedError,
    amount_of,
    find_item,
    section_total,
    set_enabled,
    toggle_mode,
)
from .credit import amort_monthly_from_initial_repayment, compute_credit
from .deposit import compute_deposit, deposit_tax_annual, gross_gain
from .fx import (
    CurrencyConverter,
    build_rate_map,
    convert_amount,
    normalize_currency_code,
)
from .object_investment import compute_object_investment
from .real_estate import (
    compute_real_estate,
    house_fee_annual,
    other_running_costs_annual,
    purchase_side_costs,
    rent_tax_breakdown,
    running_costs_annual,
)
from .stock import compute_stock
from .tax_pipeline import (
    DeductionStage,
    capital_income_tax,
    run_tax_pipeline,
)
from .validation import validate_base_price, validate_outstanding_debt

__all__ = [
    "compute_cashflow_monthly",
    "enrich_cashflows",
    "summarize_cashflows",
    "CostModeLockedError",
    "amount_of",
    "find_item",
    "section_total",
    "set_enabled",
    "toggle_mode",
    "amort_monthly_from_initial_repayment",
    "compute_credit",
    "compute_deposit",
    "deposit_tax_annual",
    "gross_gain",
    "CurrencyConverter",
    "build_rate_map",
    "convert_amount",
    "normalize_currency_code",
    "compute_object_investment",
    "compute_real_estate",
    "purchase_side_costs",
    "rent_tax_breakdown",
    "house_fee_annual",
    "other_running_costs_annual",
    "running_costs_annual",
    "compute_stock",
    "DeductionStage",
    "capital_income_tax",
    "run_tax_pipeline",
    "validate_base_price",
    "validate_outstanding_debt",
]

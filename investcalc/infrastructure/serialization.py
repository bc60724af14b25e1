"""JSON-ready (de)serialization of stored entities.

Money and rates are written as decimal strings so values survive a round
trip without float drift. Derived fields are stored too; they are
recomputed by the services on every mutation.
"""

from dataclasses import fields
from decimal import Decimal
from enum import Enum

from investcalc.domain.models import (
    Cashflow,
    Compounding,
    CostItem,
    CostMode,
    Credit,
    DepositInvestment,
    HouseFee,
    InvestmentKind,
    ObjectInvestment,
    RealEstateInvestment,
    RunningCostBlock,
    RunningCostMode,
    RunningCostSplit,
    StockInvestment,
)
from investcalc.utils.decimal_utils import coerce_decimal

CREDIT_KIND = "CREDIT"
CASHFLOW_KIND = "CASHFLOW"

ENTITY_TYPES = {
    InvestmentKind.OBJECT.value: ObjectInvestment,
    InvestmentKind.REAL_ESTATE.value: RealEstateInvestment,
    InvestmentKind.FIXED_TERM_DEPOSIT.value: DepositInvestment,
    InvestmentKind.STOCK.value: StockInvestment,
    CREDIT_KIND: Credit,
    CASHFLOW_KIND: Cashflow,
}


def cost_item_to_dict(item: CostItem) -> dict:
    """Return the flat record view of a cost item."""
    return {
        "key": item.key,
        "label": item.label,
        "enabled": item.enabled,
        "mode": item.mode.value,
        "value": str(item.value),
        "allowModeChange": item.allow_mode_change,
        "effect": item.effect.value,
    }


def cost_item_from_dict(data: dict, key: str | None = None) -> CostItem:
    """Build a cost item from its flat record view.

    Args:
        data: Mapping with ``enabled``, ``value`` and ``mode`` entries.
        key: Item key when it is not part of ``data``.

    Returns:
        CostItem: Parsed item.
    """
    item_key = key or data["key"]
    return CostItem.build(
        item_key,
        data.get("value"),
        data.get("mode", "percent"),
        enabled=bool(data.get("enabled", False)),
        label=data.get("label") or item_key,
        allow_mode_change=bool(data.get("allowModeChange", True)),
        effect=data.get("effect", "add"),
    )


def _block_to_dict(block: RunningCostBlock) -> dict:
    return {
        "mode": block.mode.value,
        "manualAnnual": str(block.manual_annual),
    }


def _block_from_dict(data: dict | None) -> RunningCostBlock:
    if not data:
        return RunningCostBlock()
    return RunningCostBlock(
        mode=RunningCostMode(data.get("mode", RunningCostMode.STANDARD)),
        manual_annual=coerce_decimal(data.get("manualAnnual")),
    )


def house_fee_to_dict(fee: HouseFee) -> dict:
    return {
        "enabled": fee.enabled,
        "mode": fee.mode.value,
        "total": str(fee.total),
        "apportionable": str(fee.apportionable),
    }


def house_fee_from_dict(data: dict | None) -> HouseFee:
    if not data:
        return HouseFee()
    return HouseFee(
        enabled=bool(data.get("enabled", False)),
        mode=CostMode(data.get("mode", CostMode.CURRENCY)),
        total=coerce_decimal(data.get("total")),
        apportionable=coerce_decimal(data.get("apportionable")),
    )


def running_costs_to_dict(split: RunningCostSplit) -> dict:
    return {
        "apportionable": _block_to_dict(split.apportionable),
        "nonApportionable": _block_to_dict(split.non_apportionable),
        "houseFee": house_fee_to_dict(split.house_fee),
    }


def running_costs_from_dict(data: dict | None) -> RunningCostSplit:
    data = data or {}
    return RunningCostSplit(
        apportionable=_block_from_dict(data.get("apportionable")),
        non_apportionable=_block_from_dict(data.get("nonApportionable")),
        house_fee=house_fee_from_dict(data.get("houseFee")),
    )


def _encode(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, CostItem):
        return cost_item_to_dict(value)
    if isinstance(value, RunningCostSplit):
        return running_costs_to_dict(value)
    if isinstance(value, tuple):
        return [_encode(item) for item in value]
    return value


def _decode(field_type, value):
    if field_type is Decimal:
        return coerce_decimal(value)
    if field_type is int:
        return int(value or 0)
    if field_type is Compounding:
        return Compounding(value)
    if field_type is RunningCostSplit:
        return running_costs_from_dict(value)
    if field_type == tuple[CostItem, ...]:
        return tuple(cost_item_from_dict(item) for item in value or ())
    return value


def entity_kind(entity) -> str:
    """Return the storage kind of an entity."""
    if isinstance(entity, Credit):
        return CREDIT_KIND
    if isinstance(entity, Cashflow):
        return CASHFLOW_KIND
    return entity.kind.value


def entity_to_payload(entity) -> dict:
    """Serialize an entity into a JSON-compatible mapping."""
    return {
        field.name: _encode(getattr(entity, field.name))
        for field in fields(entity)
    }


def entity_from_payload(kind: str, payload: dict):
    """Rebuild an entity from its stored kind and payload.

    Args:
        kind: Storage kind as returned by ``entity_kind``.
        payload: Mapping produced by ``entity_to_payload``.

    Returns:
        The rebuilt entity.

    Raises:
        ValueError: If the kind is unknown.
    """
    entity_type = ENTITY_TYPES.get(kind)
    if entity_type is None:
        raise ValueError(f"Unknown entity kind: {kind}")
    values = {
        field.name: _decode(field.type, payload[field.name])
        for field in fields(entity_type)
        if field.name in payload
    }
    return entity_type(**values)


__all__ = [
    "CREDIT_KIND",
    "CASHFLOW_KIND",
    "ENTITY_TYPES",
    "cost_item_to_dict",
    "cost_item_from_dict",
    "house_fee_to_dict",
    "house_fee_from_dict",
    "running_costs_to_dict",
    "running_costs_from_dict",
    "entity_kind",
    "entity_to_payload",
    "entity_from_payload",
]

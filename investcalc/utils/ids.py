"""Identifier helpers for stored entities."""

from uuid import uuid4


def new_entity_id(prefix: str) -> str:
    """Return a fresh identifier such as ``re_3f9c0a1b2c4d``."""
    return f"{prefix}_{uuid4().hex[:12]}"


__all__ = ["new_entity_id"]

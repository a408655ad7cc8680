"""Generic alias-chain field resolution."""

from __future__ import annotations

from typing import Iterable, Mapping

from citations.alias_tables import AliasTable


def first_non_empty(raw_template: Mapping[str, str], candidates: Iterable[str]) -> str | None:
    """Return the value of the first candidate key holding a non-empty string.

    Args:
        raw_template: Raw template key/value mapping.
        candidates: Candidate keys in priority order.

    Returns:
        First non-empty value, or None when no candidate matches.
    """
    for key in candidates:
        value = raw_template.get(key)
        if value:
            return value
    return None


def resolve_fields(raw_template: Mapping[str, str], aliases: AliasTable) -> dict[str, str | None]:
    """Resolve every semantic field of an alias table against a raw mapping."""
    return {
        field_name: first_non_empty(raw_template, candidates)
        for field_name, candidates in aliases.items()
    }

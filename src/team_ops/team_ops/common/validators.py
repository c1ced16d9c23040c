from __future__ import annotations

from typing import Iterable, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_present(value, field_name: str):
    if value is None:
        raise ValidationError(f"{field_name} is required")
    return value


def require_non_empty_tags(values: Optional[Iterable[str]], field_name: str) -> tuple[str, ...]:
    tags = clean_tags(values)
    if not tags:
        raise ValidationError(f"{field_name} needs at least one value")
    return tags


def clean_tags(values: Optional[Iterable[str]]) -> tuple[str, ...]:
    """Strip blanks and duplicates, keeping the caller's order."""
    out: list[str] = []
    for v in values or ():
        v = (v or "").strip()
        if v and v not in out:
            out.append(v)
    return tuple(out)


def optional_text(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None

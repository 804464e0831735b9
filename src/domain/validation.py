"""
Form validation rule engine.

A schema maps field names to FieldRule objects. Each rule coerces one raw
form value and runs its checks; the schema aggregates per-field results into
a single ParseResult with every violated message kept, in declaration order.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


class CoercionError(ValueError):
    """Raised by a coercer when a raw value cannot become the field's type."""


# --- Rules ---


@dataclass(frozen=True)
class Check:
    """A predicate on an already-coerced value, with its failure message."""

    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Coercion plus constraint checks for a single form field."""

    coerce: Callable[[Any], Any]
    invalid_message: str
    checks: tuple[Check, ...] = ()

    def parse(self, raw: Any) -> tuple[Any, list[str]]:
        try:
            value = self.coerce(raw)
        except CoercionError:
            return None, [self.invalid_message]

        errors = [check.message for check in self.checks if not check.predicate(value)]
        if errors:
            return None, errors
        return value, []


@dataclass
class ParseResult:
    """Outcome of Schema.safe_parse."""

    data: dict[str, Any] | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.data is not None


class Schema:
    def __init__(self, fields: Mapping[str, FieldRule]):
        self._fields = dict(fields)

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def omit(self, *names: str) -> Schema:
        """Return a schema without the given fields; remaining rules are shared."""
        unknown = set(names) - set(self._fields)
        if unknown:
            raise KeyError(f"Unknown schema fields: {sorted(unknown)}")
        return Schema({k: v for k, v in self._fields.items() if k not in names})

    def safe_parse(self, raw: Mapping[str, Any]) -> ParseResult:
        data: dict[str, Any] = {}
        errors: dict[str, list[str]] = {}

        for name, rule in self._fields.items():
            value, messages = rule.parse(raw.get(name))
            if messages:
                errors[name] = messages
            else:
                data[name] = value

        if errors:
            return ParseResult(field_errors=errors)
        return ParseResult(data=data)


# --- Coercers ---


def _coerce_string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise CoercionError("expected string")
    return raw


def _coerce_non_blank_string(raw: Any) -> str:
    value = _coerce_string(raw)
    if not value.strip():
        raise CoercionError("expected non-blank string")
    return value


def _coerce_number(raw: Any) -> float:
    # Missing and blank inputs coerce to zero.
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        raise CoercionError("expected number")
    if isinstance(raw, int | float):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError as e:
            raise CoercionError("expected number") from e
    else:
        raise CoercionError("expected number")

    if not math.isfinite(value):
        raise CoercionError("expected finite number")
    return value


# --- Rule builders ---


def string_field(message: str, *, allow_blank: bool = True) -> FieldRule:
    return FieldRule(
        coerce=_coerce_string if allow_blank else _coerce_non_blank_string,
        invalid_message=message,
    )


def number_field(message: str, *checks: Check) -> FieldRule:
    return FieldRule(coerce=_coerce_number, invalid_message=message, checks=checks)


def enum_field(values: Iterable[str], message: str) -> FieldRule:
    allowed = tuple(values)

    def _coerce(raw: Any) -> str:
        if raw not in allowed:
            raise CoercionError(f"expected one of {allowed}")
        return str(raw)

    return FieldRule(coerce=_coerce, invalid_message=message)


def gt(bound: float, message: str) -> Check:
    return Check(predicate=lambda value: value > bound, message=message)

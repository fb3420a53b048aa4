"""Combinators built on top of the Optional operations."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

import msgspec

from optionalkit._logging import get_logger
from optionalkit.constructors import from_nullable, some
from optionalkit.option import Optional

__all__ = ['clean_optional', 'group']

_logger = get_logger(__name__)


def clean_optional[T](value: Optional[T | None | msgspec.UnsetType]) -> Optional[T]:
    """Collapse an Optional holding None or msgspec.UNSET into the empty Optional.

    Present payloads other than None/UNSET are kept as they are, and an absent
    Optional stays absent.

    Examples:
        >>> clean_optional(some(None)).is_empty()
        True
        >>> clean_optional(some(5))
        Present(value=5)
    """
    payload = value.get_or_undefined()
    if value.is_present() and (payload is None or payload is msgspec.UNSET):
        _logger.debug('clean_optional.null_payload', payload=repr(payload))
    return from_nullable(payload)


def group(fields: Mapping[str, Optional[Any]]) -> Optional[dict[str, Any]]:
    """Combine a mapping of Optionals into one Optional of a dict.

    Fields are folded in insertion order. If every field is present the result
    is a present dict with each field's unwrapped value under the same key; if
    any field is absent the whole result is absent and no later field is
    unwrapped.

    Args:
        fields: Mapping from key to Optional value. The mapping itself is not
            modified.

    Returns:
        Present(dict) when all fields are present, otherwise empty.

    Examples:
        >>> group({'first': some('abc'), 'second': some(123)})
        Present(value={'first': 'abc', 'second': 123})
        >>> group({'first': some('abc'), 'second': empty}).is_empty()
        True
    """
    record: dict[str, Any] = {}

    def assign(key: str, value: Any) -> dict[str, Any]:
        record[key] = value
        return record

    def step(acc: Optional[dict[str, Any]], item: tuple[str, Optional[Any]]) -> Optional[dict[str, Any]]:
        key, field = item
        if acc.is_present() and field.is_empty():
            _logger.debug('group.absent_field', field=key)
        return acc.chain(lambda _: field.map(functools.partial(assign, key)))

    return functools.reduce(step, fields.items(), some(record))

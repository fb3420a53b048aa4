"""Constructors: the sanctioned ways to build an Optional."""

from __future__ import annotations

import msgspec

from optionalkit.option import AbsentType, Optional, Present, empty

__all__ = ['empty', 'empty_function', 'from_nullable', 'some']


def some[T](value: T) -> Present[T]:
    """Wrap value in a Present without any null check.

    some(None) is a present Optional holding None, which is how "explicitly
    present but null" is told apart from "absent".
    """
    return Present(value)


def from_nullable[T](value: T | None | msgspec.UnsetType) -> Optional[T]:
    """Return empty if value is None or msgspec.UNSET, otherwise some(value).

    Falsy values such as 0, '' or [] are present.

    Examples:
        >>> from_nullable(None).is_present()
        False
        >>> from_nullable(0).is_present()
        True
    """
    if value is None or value is msgspec.UNSET:
        return empty
    return some(value)


def empty_function() -> AbsentType:
    """Return the empty Optional, for use as a default-supplying callback."""
    return empty

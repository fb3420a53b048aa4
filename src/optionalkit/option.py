"""Optional type: Present[T] | AbsentType for values that may be missing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

__all__ = ['AbsentType', 'Optional', 'Present', 'empty', 'strict_equals']

_SCALARS = (bool, int, float, complex, str, bytes)


def strict_equals(first: Any, second: Any) -> bool:
    """Shallow equality used by is_equal() when no comparator is given.

    Scalars compare by value, everything else by identity. A bool never
    equals a non-bool, so True and 1 differ.
    """
    if first is second:
        return True
    if isinstance(first, bool) != isinstance(second, bool):
        return False
    return isinstance(first, _SCALARS) and isinstance(second, _SCALARS) and first == second


class Present[T](msgspec.Struct, frozen=True):
    """Present variant of Optional holding exactly one value of type T.

    The value is stored as given: Present(None) is a present Optional whose
    payload happens to be None. Use from_nullable() to treat None as absence.

    Examples:
        >>> Present(42).map(lambda x: x * 2)
        Present(value=84)
        >>> Present(42).get_or_else(0)
        42
        >>> Present(None).is_present()
        True
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_empty(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def map[P](self, func: Callable[[T], P]) -> Present[P]:
        """Apply func to the value and wrap the result.

        Args:
            func: Mapping function.

        Returns:
            Present containing func(value).
        """
        return Present(func(self.value))

    def chain[P](self, func: Callable[[T], Optional[P]]) -> Optional[P]:
        """Apply a function that already returns an Optional.

        Flattens one level of nesting, so no Present(Present(...)) appears.

        Args:
            func: Function that takes T and returns Optional[P].

        Returns:
            The Optional returned by func.
        """
        return func(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return self if predicate(value) holds, else the empty Optional."""
        if predicate(self.value):
            return self
        return empty

    def get_or_null(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_undefined(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def is_equal(self, another: Optional[T], compare: Callable[[T, T], bool] | None = None) -> bool:
        """Check whether another Optional holds a value equal to this one.

        Args:
            another: Optional to compare against.
            compare: Comparison function. Defaults to strict_equals(), which
                compares scalars by value and everything else by identity.

        Returns:
            True if another is present and its value compares equal.
        """
        return another.map(
            lambda other: compare(self.value, other) if compare is not None else strict_equals(self.value, other)
        ).get_or_else(False)

    def if_present(self, func: Callable[[T], object]) -> None:
        """Call func with the value. Its return value is discarded."""
        func(self.value)

    def if_absent(self, func: Callable[[], object]) -> None:  # noqa: ARG002
        """Do nothing since a value is present."""

    def back_up(self, another: Optional[T]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged; another is never inspected."""
        return self


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Optional representing a missing value.

    Absent carries no payload, so one instance serves every element type.
    Use the `empty` constant instead of instantiating directly.

    Examples:
        >>> empty.is_empty()
        True
        >>> empty.get_or_else(0)
        0
    """

    def is_present(self) -> TypeIs[Present[Any]]:
        """Return False since this is Absent."""
        return False

    def is_empty(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def map[T, P](self, func: Callable[[T], P]) -> AbsentType:  # noqa: ARG002
        """Return self; func is never called."""
        return self

    def chain[T, P](self, func: Callable[[T], Optional[P]]) -> AbsentType:  # noqa: ARG002
        """Return self; func is never called."""
        return self

    def filter[T](self, predicate: Callable[[T], bool]) -> AbsentType:  # noqa: ARG002
        """Return self; predicate is never called."""
        return self

    def get_or_null(self) -> None:
        """Return None since there is no value."""
        return None

    def get_or_undefined(self) -> msgspec.UnsetType:
        """Return msgspec.UNSET since there is no value."""
        return msgspec.UNSET

    def get_or_else[T](self, default: T) -> T:
        """Return the default since there is no value."""
        return default

    def is_equal[T](
        self,
        another: Optional[T],
        compare: Callable[[T, T], bool] | None = None,  # noqa: ARG002
    ) -> bool:
        """Return True only if another is absent too."""
        return another.is_empty()

    def if_present[T](self, func: Callable[[T], object]) -> None:  # noqa: ARG002
        """Do nothing since there is no value."""

    def if_absent(self, func: Callable[[], object]) -> None:
        """Call func since there is no value."""
        func()

    def back_up[T](self, another: Optional[T]) -> Optional[T]:
        """Return another unchanged."""
        return another


empty: AbsentType = AbsentType()
"""Shared instance representing the absence of a value."""


type Optional[T] = Present[T] | AbsentType

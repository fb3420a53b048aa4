"""Structural interface of an Optional and the duck-typed capability check.

instance_of_optional() looks at members, not at classes, so Optionals built by
another copy of this package (or any object implementing the same operations)
are recognised as well.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeIs, runtime_checkable

from optionalkit._logging import get_logger

__all__ = ['OPTIONAL_MEMBERS', 'OptionalLike', 'instance_of_optional']

_logger = get_logger(__name__)

OPTIONAL_MEMBERS: tuple[str, ...] = (
    'map',
    'chain',
    'filter',
    'get_or_null',
    'get_or_undefined',
    'get_or_else',
    'is_present',
    'is_empty',
    'is_equal',
    'if_absent',
    'if_present',
    'back_up',
)


@runtime_checkable
class OptionalLike[T](Protocol):
    """Operations every Optional implementation exposes."""

    def map[P](self, func: Callable[[T], P]) -> OptionalLike[P]: ...

    def chain[P](self, func: Callable[[T], OptionalLike[P]]) -> OptionalLike[P]: ...

    def filter(self, predicate: Callable[[T], bool]) -> OptionalLike[T]: ...

    def get_or_null(self) -> T | None: ...

    def get_or_undefined(self) -> Any: ...

    def get_or_else(self, default: T) -> T: ...

    def is_present(self) -> bool: ...

    def is_empty(self) -> bool: ...

    def is_equal(self, another: OptionalLike[T], compare: Callable[[T, T], bool] | None = None) -> bool: ...

    def if_present(self, func: Callable[[T], object]) -> None: ...

    def if_absent(self, func: Callable[[], object]) -> None: ...

    def back_up(self, another: OptionalLike[T]) -> OptionalLike[T]: ...


def instance_of_optional(obj: object) -> TypeIs[OptionalLike[Any]]:
    """Return True if obj exposes every Optional operation.

    None, classes, primitives and plain mappings are never Optionals: only
    attributes count, not dict keys.

    Args:
        obj: Object to check.

    Returns:
        True if every name in OPTIONAL_MEMBERS is an attribute of obj.
    """
    if obj is None or isinstance(obj, type):
        return False

    for member in OPTIONAL_MEMBERS:
        if not hasattr(obj, member):
            _logger.debug('instance_of_optional.missing_member', member=member, type=type(obj).__name__)
            return False

    return True

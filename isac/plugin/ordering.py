"""
Precedence ordering for providers.

A lower value means earlier selection.
"""

from typing import Any, Callable, TypeVar

HIGHEST_PRECEDENCE = -(2**31)
LOWEST_PRECEDENCE = 2**31 - 1

_ORDER_ATTR = "__provider_order__"

T = TypeVar("T", bound=type)


def order(value: int) -> Callable[[T], T]:
    """
    Declare the selection priority of a provider class.

    Args:
        value: Priority value, lower is selected first

    Returns:
        Class decorator that records the priority on the class

    Raises:
        TypeError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"order value must be an int, got {type(value).__name__}")

    def decorate(cls: T) -> T:
        setattr(cls, _ORDER_ATTR, value)
        return cls

    return decorate


def get_order(obj: Any) -> int:
    """Return the declared priority of a provider class or instance."""
    cls = obj if isinstance(obj, type) else type(obj)
    return getattr(cls, _ORDER_ATTR, LOWEST_PRECEDENCE)

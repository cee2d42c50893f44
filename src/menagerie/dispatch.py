"""Typed handles: look at an object through a declared static type.

Python resolves every method on the runtime type of the object.  A handle
returned by :func:`as_type` restores the distinction between the two kinds of
methods found in a class hierarchy:

* plain methods are *redefined* by subclasses; through a handle they resolve
  on the declared type, so the subclass version is not reached;
* methods decorated with :func:`virtual` are *overridden*; through a handle
  they still resolve on the runtime object.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_VIRTUAL_FLAG = "__menagerie_virtual__"


def virtual(func: Callable[..., Any]) -> Callable[..., Any]:
    """Mark a method as dynamically dispatched."""
    setattr(func, _VIRTUAL_FLAG, True)
    return func


def is_virtual(cls: type, name: str) -> bool:
    """True if any class in ``cls``'s MRO marks ``name`` as virtual.

    Overrides of a virtual method stay virtual without repeating the
    decorator.
    """
    for klass in cls.__mro__:
        attr = vars(klass).get(name)
        if attr is not None and getattr(attr, _VIRTUAL_FLAG, False):
            return True
    return False


def _declares(cls: type, name: str) -> bool:
    return any(name in vars(klass) for klass in cls.__mro__)


class Handle:
    """A reference to ``target`` whose static type is ``static_type``.

    Only the members the static type (or a virtual method of the runtime
    type) provides are reachable.  Instance state of the target stays hidden.
    """

    __slots__ = ("_target", "_static_type")

    def __init__(self, target: Any, static_type: type):
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_static_type", static_type)

    @property
    def static_type(self) -> type:
        return self._static_type

    def __getattr__(self, name: str) -> Any:
        target = self._target
        static = self._static_type

        if is_virtual(static, name) or (
            not _declares(static, name) and is_virtual(type(target), name)
        ):
            return getattr(target, name)

        try:
            attr = inspect.getattr_static(static, name)
        except AttributeError:
            raise AttributeError(
                f"'{static.__name__}' handle has no attribute '{name}'"
            ) from None

        if hasattr(attr, "__get__"):
            return attr.__get__(target, static)
        return attr

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            attr = inspect.getattr_static(self._static_type, name)
        except AttributeError:
            attr = None
        if not hasattr(attr, "__set__"):
            raise AttributeError(
                f"'{self._static_type.__name__}' handle cannot set '{name}'"
            )
        attr.__set__(self._target, value)

    def __repr__(self) -> str:
        return f"<{self._static_type.__name__} handle to {self._target!r}>"


def as_type(obj: Any, cls: type[T]) -> T:
    """Return a handle to ``obj`` typed as ``cls``.

    ``obj`` may itself be a handle, in which case the new handle refers to the
    same target.  Raises ``TypeError`` if the target is not a ``cls``.
    """
    if isinstance(obj, Handle):
        obj = unwrap(obj)
    if not isinstance(obj, cls):
        raise TypeError(f"{type(obj).__name__} is not a {cls.__name__}")
    return Handle(obj, cls)  # type: ignore[return-value]


def unwrap(handle: Any) -> Any:
    """Return the object behind a handle, or ``handle`` itself if it is not one."""
    if isinstance(handle, Handle):
        return object.__getattribute__(handle, "_target")
    return handle

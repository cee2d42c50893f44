"""Ownership scope: deterministic, reverse-order release of owned objects."""

from __future__ import annotations

import logging
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)


class Releasable(Protocol):
    @property
    def released(self) -> bool: ...

    def release(self) -> None: ...


R = TypeVar("R", bound=Releasable)


class Scope:
    """Owns releasable objects and releases them, last owned first, on close.

    Objects that were already released are skipped.  Objects never passed to
    :meth:`own` are never released by the scope.
    """

    def __init__(self):
        self._owned: list[Releasable] = []
        self._closed = False

    def own(self, obj: R) -> R:
        if self._closed:
            raise RuntimeError("Cannot take ownership in a closed scope")
        self._owned.append(obj)
        return obj

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._owned)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing scope with %d owned objects", len(self._owned))
        first_error: BaseException | None = None
        while self._owned:
            obj = self._owned.pop()
            if obj.released:
                continue
            try:
                obj.release()
            except Exception as exc:
                logger.debug("Releasing %r failed: %s", obj, exc)
                if first_error is None:
                    first_error = exc
        # Everything owned has been released; surface the first failure
        if first_error is not None:
            raise first_error

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, *_) -> None:
        self.close()

"""menagerie: encapsulation, inheritance and dispatch with animals and cats."""

from __future__ import annotations

from menagerie.animals import HUNGER_THRESHOLD, Animal, Cat
from menagerie.dispatch import Handle, as_type, unwrap, virtual
from menagerie.scope import Scope

__all__ = [
    "HUNGER_THRESHOLD",
    "Animal",
    "Cat",
    "Handle",
    "Scope",
    "as_type",
    "unwrap",
    "virtual",
]

"""Animal and Cat: the entity model."""

from __future__ import annotations

import logging
from typing import Callable

import click

from menagerie.dispatch import virtual

logger = logging.getLogger(__name__)

#: An animal with more hunger than this is hungry.
HUNGER_THRESHOLD: int = 30

Echo = Callable[[str], None]


class Animal:
    """An animal with a name and a hunger counter.

    ``name`` and ``hunger`` belong to this class alone (name-mangled), so
    subclasses reach them through the accessors only.  The constructor stores
    ``hunger`` as given; only the setter refuses negative values.

    Calling :meth:`release` (or leaving a ``with`` block) prints the deletion
    notice.  It fires once per instance.
    """

    def __init__(self, name: str = "", hunger: int = 0, *, echo: Echo | None = None):
        self.__name = name
        self.__hunger = hunger
        self.__released = False
        self._echo = echo or click.echo
        logger.debug("Constructed %r", self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__name!r}, hunger={self.__hunger})"

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def release(self) -> None:
        if self.__released:
            logger.debug("%r already released", self)
            return
        self.__released = True
        self._echo(f"Animal('{self.__name}') is deleted.")

    @property
    def released(self) -> bool:
        return self.__released

    def __enter__(self) -> "Animal":
        return self

    def __exit__(self, *_) -> None:
        self.release()

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def name(self) -> str:
        return self.__name

    @name.setter
    def name(self, value: str) -> None:
        self.__name = value

    @property
    def hunger(self) -> int:
        return self.__hunger

    @hunger.setter
    def hunger(self, value: int) -> None:
        if value < 0:
            logger.debug("Ignoring negative hunger %d for %r", value, self)
            return
        self.__hunger = value

    def is_hungry(self) -> bool:
        return self.__hunger > HUNGER_THRESHOLD

    # ------------------------------------------------------------------ #
    # Behaviour
    # ------------------------------------------------------------------ #

    def eat(self, amount: int) -> None:
        """Eat ``amount``, whether hungry or not, never going below zero."""
        if not self.is_hungry():
            self._echo(f"Animal('{self.__name}') is not hungry.")

        self._echo(f"Animal('{self.__name}') is eating.")
        self.__hunger -= amount

        if self.__hunger < 0:
            self.__hunger = 0


class Cat(Animal):
    """An :class:`Animal` with a race that can meow.

    ``eat`` is redefined, not overridden: through an ``Animal`` handle (see
    :func:`menagerie.dispatch.as_type`) the plain ``Animal.eat`` runs.
    ``meow`` is virtual.
    """

    def __init__(
        self,
        name: str = "",
        hunger: int = 0,
        race: str = "",
        *,
        echo: Echo | None = None,
    ):
        super().__init__(name, hunger, echo=echo)
        self._race = race

    @property
    def race(self) -> str:
        return self._race

    @race.setter
    def race(self, value: str) -> None:
        self._race = value

    def eat(self, amount: int) -> None:
        super().eat(amount)
        self._echo(f"Cat('{self.name}') has finished eating.")

    @virtual
    def meow(self) -> None:
        # name is private to Animal
        self._echo(f"Cat('{self.name}') says meow.")

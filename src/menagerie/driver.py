"""The reference walkthrough: construct, release, rename and feed animals."""

from __future__ import annotations

import logging

from menagerie.animals import Animal, Echo
from menagerie.scope import Scope

logger = logging.getLogger(__name__)


def run_demo(echo: Echo | None = None, release_at_exit: bool = True) -> None:
    """Run the walkthrough once, printing its transcript through ``echo``.

    Every instance except ``default_animal_ptr`` is owned by the demo's scope.
    That one stands for a heap allocation nobody frees, so its deletion
    notice never appears.  With ``release_at_exit`` false the scope is left
    open and no shutdown notices are printed at all.
    """
    scope = Scope()
    try:
        # Default construction
        default_animal1 = scope.own(Animal(echo=echo))
        default_animal2 = scope.own(Animal(echo=echo))
        default_animal_ptr = Animal(echo=echo)

        # Name and hunger, then name only
        animal1 = scope.own(Animal("Cat", 0, echo=echo))
        animal2 = scope.own(Animal("Cat", echo=echo))

        # Released by hand straight away; the scope will not release it again
        animal = scope.own(Animal("Cat", 0, echo=echo))
        animal.release()

        animal.name = "My Cat"

        animal.eat(10)
        animal.hunger = 50
        animal.eat(10)

        logger.debug(
            "Demo finished with %r, %r, %r, %r, %r still alive",
            default_animal1,
            default_animal2,
            default_animal_ptr,
            animal1,
            animal2,
        )
    finally:
        if release_at_exit:
            scope.close()

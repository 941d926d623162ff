"""Burgers and garlic bread made by simple and abstract factories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class _Preparable(ABC):
    description: ClassVar[str]

    def prepare(self) -> str:
        """Prepare the item, returning what was done."""
        print(self.description)
        return self.description


class Burger(_Preparable):
    """A burger of some recipe."""

    @abstractmethod
    def prepare(self) -> str:
        return super().prepare()


class BasicBurger(Burger):
    description = "Preparing Basic Burger with bun, patty, and ketchup!"

    def prepare(self):
        return super().prepare()


class StandardBurger(Burger):
    description = "Preparing Standard Burger with bun, patty, cheese, and lettuce!"

    def prepare(self):
        return super().prepare()


class PremiumBurger(Burger):
    description = (
        "Preparing Premium Burger with gourmet bun, premium patty, cheese, "
        "lettuce, and secret sauce!"
    )

    def prepare(self):
        return super().prepare()


class BasicWheatBurger(Burger):
    description = "Preparing Basic Wheat Burger with bun, patty, and ketchup!"

    def prepare(self):
        return super().prepare()


class StandardWheatBurger(Burger):
    description = "Preparing Standard Wheat Burger with bun, patty, cheese, and lettuce!"

    def prepare(self):
        return super().prepare()


class PremiumWheatBurger(Burger):
    description = (
        "Preparing Premium Wheat Burger with gourmet bun, premium patty, cheese, "
        "lettuce, and secret sauce!"
    )

    def prepare(self):
        return super().prepare()


class GarlicBread(_Preparable):
    """A garlic bread of some recipe."""

    @abstractmethod
    def prepare(self) -> str:
        return super().prepare()


class BasicGarlicBread(GarlicBread):
    description = "Preparing Basic Garlic Bread with butter and garlic!"

    def prepare(self):
        return super().prepare()


class CheeseGarlicBread(GarlicBread):
    description = "Preparing Cheese Garlic Bread with extra cheese and butter!"

    def prepare(self):
        return super().prepare()


class BasicWheatGarlicBread(GarlicBread):
    description = "Preparing Basic Wheat Garlic Bread with butter and garlic!"

    def prepare(self):
        return super().prepare()


class CheeseWheatGarlicBread(GarlicBread):
    description = "Preparing Cheese Wheat Garlic Bread with extra cheese and butter!"

    def prepare(self):
        return super().prepare()


def _pick(menu: dict, kind: str, what: str):
    try:
        return menu[kind]()
    except KeyError:
        raise ValueError(f"Invalid {what} type! {kind!r}") from None


class MealFactory(ABC):
    """Makes a family of matching meal items."""

    burgers: ClassVar[dict[str, type[Burger]]]
    garlic_breads: ClassVar[dict[str, type[GarlicBread]]]

    def create_burger(self, kind: str) -> Burger:
        """Make a "basic", "standard" or "premium" burger."""
        return _pick(self.burgers, kind, "burger")

    def create_garlic_bread(self, kind: str) -> GarlicBread:
        """Make a "basic" or "cheese" garlic bread."""
        return _pick(self.garlic_breads, kind, "Garlic bread")


class SinghBurger(MealFactory):
    """Meals on regular bread."""

    burgers = {"basic": BasicBurger, "standard": StandardBurger, "premium": PremiumBurger}
    garlic_breads = {"basic": BasicGarlicBread, "cheese": CheeseGarlicBread}


class KingBurger(MealFactory):
    """Meals on wheat bread."""

    burgers = {
        "basic": BasicWheatBurger,
        "standard": StandardWheatBurger,
        "premium": PremiumWheatBurger,
    }
    garlic_breads = {"basic": BasicWheatGarlicBread, "cheese": CheeseWheatGarlicBread}


class SimpleBurgerFactory:
    """Makes regular burgers by name."""

    _burgers: ClassVar[dict[str, type[Burger]]] = SinghBurger.burgers

    def create_burger(self, kind: str) -> Burger:
        return _pick(self._burgers, kind, "burger")
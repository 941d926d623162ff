import pytest

from patternbook.burgers import (
    BasicBurger,
    BasicGarlicBread,
    BasicWheatBurger,
    Burger,
    CheeseGarlicBread,
    CheeseWheatGarlicBread,
    KingBurger,
    PremiumBurger,
    PremiumWheatBurger,
    SimpleBurgerFactory,
    SinghBurger,
    StandardBurger,
    StandardWheatBurger,
)


@pytest.mark.parametrize(
    "factory, kind, expected",
    [
        (SinghBurger(), "basic", BasicBurger),
        (SinghBurger(), "standard", StandardBurger),
        (SinghBurger(), "premium", PremiumBurger),
        (KingBurger(), "basic", BasicWheatBurger),
        (KingBurger(), "standard", StandardWheatBurger),
        (KingBurger(), "premium", PremiumWheatBurger),
    ],
)
def test_meal_factory_burgers(factory, kind, expected):
    assert type(factory.create_burger(kind)) is expected


@pytest.mark.parametrize(
    "factory, kind, expected",
    [
        (SinghBurger(), "basic", BasicGarlicBread),
        (SinghBurger(), "cheese", CheeseGarlicBread),
        (KingBurger(), "cheese", CheeseWheatGarlicBread),
    ],
)
def test_meal_factory_garlic_breads(factory, kind, expected):
    assert type(factory.create_garlic_bread(kind)) is expected


def test_prepare_texts_come_from_recipes():
    assert KingBurger().create_burger("basic").prepare() == (
        "Preparing Basic Wheat Burger with bun, patty, and ketchup!"
    )
    assert KingBurger().create_garlic_bread("cheese").prepare() == (
        "Preparing Cheese Wheat Garlic Bread with extra cheese and butter!"
    )


def test_simple_factory():
    burger = SimpleBurgerFactory().create_burger("standard")
    assert burger.prepare() == (
        "Preparing Standard Burger with bun, patty, cheese, and lettuce!"
    )


@pytest.mark.parametrize("factory", [SinghBurger(), KingBurger()])
def test_invalid_burger_raises(factory):
    with pytest.raises(ValueError):
        factory.create_burger("deluxe")


def test_invalid_garlic_bread_raises():
    with pytest.raises(ValueError):
        SinghBurger().create_garlic_bread("standard")


def test_simple_factory_invalid_raises():
    with pytest.raises(ValueError):
        SimpleBurgerFactory().create_burger("")


def test_burger_base_is_abstract():
    with pytest.raises(TypeError):
        Burger()
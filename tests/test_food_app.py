import pytest

from patternbook.food_app import (
    NowOrderFactory,
    OrderManager,
    RestaurantManager,
    ScheduledOrderFactory,
    TomatoApp,
    main,
    notify,
)
from patternbook.food_models import (
    DeliveryOrder,
    MenuItem,
    PaymentStrategy,
    PickupOrder,
    Restaurant,
    UpiPaymentStrategy,
    User,
)


class RecordingPayment(PaymentStrategy):
    def __init__(self):
        self.amounts = []

    def pay(self, amount):
        self.amounts.append(amount)
        return "recorded"


@pytest.fixture
def app():
    return TomatoApp()


@pytest.fixture
def user():
    return User(101, "Aditya", "Delhi")


def _fill_cart(app, user):
    restaurant = app.search_restaurants("Delhi")[0]
    app.select_restaurant(user, restaurant)
    app.add_to_cart(user, "P1")
    app.add_to_cart(user, "P2")
    return restaurant


def test_search_is_case_insensitive(app):
    names = [r.name for r in app.search_restaurants("dELHI")]
    assert names == ["Bikaner"]


def test_search_unknown_location(app):
    assert app.search_restaurants("Mumbai") == []


def test_restaurant_manager_search():
    manager = RestaurantManager()
    first = Restaurant("A", "Pune")
    manager.add_restaurant(first)
    manager.add_restaurant(Restaurant("B", "Goa"))
    assert manager.search_by_location("PUNE") == [first]


def test_add_to_cart_requires_restaurant(app, user):
    with pytest.raises(ValueError):
        app.add_to_cart(user, "P1")


def test_add_to_cart_unknown_code(app, user):
    app.select_restaurant(user, app.search_restaurants("Delhi")[0])
    assert app.add_to_cart(user, "P9") is None
    assert user.cart.items == []


def test_add_to_cart_totals(app, user):
    restaurant = _fill_cart(app, user)
    assert [i.code for i in user.cart.items] == ["P1", "P2"]
    assert user.cart.total_cost() == sum(i.price for i in restaurant.menu)


def test_checkout_empty_cart(app, user):
    assert app.checkout_now(user, "Delivery", RecordingPayment()) is None
    assert app.order_manager.orders == []


def test_checkout_now_delivery(app, user):
    _fill_cart(app, user)
    total = user.cart.total_cost()
    order = app.checkout_now(user, "Delivery", RecordingPayment())
    assert isinstance(order, DeliveryOrder)
    assert order.user_address == user.address
    assert order.total == total
    assert app.order_manager.orders == [order]


def test_checkout_scheduled_pickup(app, user):
    _fill_cart(app, user)
    order = app.checkout_scheduled(user, "Pickup", RecordingPayment(), "tomorrow 9am")
    assert isinstance(order, PickupOrder)
    assert order.restaurant_address == "Delhi"
    assert order.scheduled == "tomorrow 9am"


def test_pay_for_order_clears_cart(app, user):
    _fill_cart(app, user)
    payment = RecordingPayment()
    order = app.checkout_now(user, "Delivery", payment)
    assert app.pay_for_order(user, order) is True
    assert payment.amounts == [order.total]
    assert user.cart.is_empty()


def test_pay_without_strategy_keeps_cart(app, user):
    _fill_cart(app, user)
    order = app.checkout_now(user, "Delivery", None)
    assert app.pay_for_order(user, order) is False
    assert len(user.cart.items) == 2


def test_factories_share_fields(user):
    restaurant = Restaurant("R", "Goa")
    items = [MenuItem("P1", "Dosa", 90)]
    now = NowOrderFactory().create_order(user, None, restaurant, items, None, 90.0, "Delivery")
    later = ScheduledOrderFactory("noon").create_order(
        user, None, restaurant, items, None, 90.0, "Pickup"
    )
    assert now.items == later.items == items
    assert later.scheduled == "noon"
    assert now.scheduled != ""


def test_notify_lists_items(app, user):
    _fill_cart(app, user)
    order = app.checkout_now(user, "Delivery", UpiPaymentStrategy("upi-handle"))
    text = notify(order)
    assert f"Order ID: {order.order_id}" in text
    assert "Customer: Aditya" in text
    assert "   - Samosa (₹15)" in text


def test_list_orders():
    manager = OrderManager()
    order = PickupOrder(user=User(1, "Rohit", "Goa"), total=40.0, scheduled="now")
    manager.add_order(order)
    assert "Pickup order for Rohit | Total: ₹40 | At: now" in manager.list_orders()


def test_print_user_cart(app, user):
    _fill_cart(app, user)
    text = app.print_user_cart(user)
    assert "P1 : Chole Bhature : ₹120" in text
    assert text.startswith("Items in cart:")


def test_main_runs(capsys):
    assert main() == 0
    assert "Found Restaurants:" in capsys.readouterr().out
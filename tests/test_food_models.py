import time

import pytest

from patternbook.food_models import (
    Cart,
    CreditCardPaymentStrategy,
    DeliveryOrder,
    MenuItem,
    Order,
    PaymentStrategy,
    PickupOrder,
    Restaurant,
    UpiPaymentStrategy,
    User,
    current_time,
)


class RecordingPayment(PaymentStrategy):
    def __init__(self):
        self.amounts = []

    def pay(self, amount):
        self.amounts.append(amount)
        return "recorded"


def _restaurant():
    restaurant = Restaurant("Bikaner", "Delhi")
    restaurant.add_menu_item(MenuItem("P1", "Chole Bhature", 120))
    restaurant.add_menu_item(MenuItem("P2", "Samosa", 15))
    return restaurant


def test_restaurant_menu_keeps_order():
    restaurant = _restaurant()
    assert [item.code for item in restaurant.menu] == ["P1", "P2"]
    assert restaurant.location == "Delhi"


def test_restaurant_ids_increase():
    first = Restaurant("A", "X")
    second = Restaurant("B", "Y")
    assert second.restaurant_id > first.restaurant_id


def test_cart_requires_restaurant():
    cart = Cart()
    with pytest.raises(ValueError):
        cart.add_item(MenuItem("P1", "Samosa", 15))
    assert cart.items == []


def test_cart_total_and_empty():
    restaurant = _restaurant()
    cart = Cart()
    assert cart.is_empty()
    cart.restaurant = restaurant
    assert cart.is_empty()
    for item in restaurant.menu:
        cart.add_item(item)
    assert not cart.is_empty()
    assert cart.total_cost() == sum(item.price for item in restaurant.menu)


def test_cart_clear_resets():
    cart = Cart()
    cart.restaurant = _restaurant()
    cart.add_item(cart.restaurant.menu[0])
    cart.clear()
    assert cart.items == []
    assert cart.restaurant is None
    assert cart.is_empty()


def test_user_has_own_cart():
    first = User(1, "Aditya", "Delhi")
    second = User(2, "Rohit", "Kolkata")
    assert first.cart is not second.cart
    assert first.cart.is_empty()


def test_upi_payment_text():
    assert UpiPaymentStrategy("upi-handle").pay(50) == "Paid ₹50 using UPI (upi-handle)"


def test_credit_card_payment_text():
    text = CreditCardPaymentStrategy("card-xxxx").pay(80)
    assert text == "Paid ₹80 using Credit Card (card-xxxx)"


def test_order_is_abstract():
    with pytest.raises(TypeError):
        Order()


def test_order_total_defaults_to_items():
    items = _restaurant().menu
    order = DeliveryOrder(items=items)
    assert order.total == sum(item.price for item in items)


def test_order_explicit_total_wins():
    order = PickupOrder(items=_restaurant().menu, total=7.0)
    assert order.total == 7.0


def test_order_types_and_ids():
    delivery = DeliveryOrder(user_address="Delhi")
    pickup = PickupOrder(restaurant_address="Delhi")
    assert delivery.order_type == "Delivery"
    assert pickup.order_type == "Pickup"
    assert pickup.order_id == delivery.order_id + 1


def test_process_payment_without_strategy():
    assert DeliveryOrder().process_payment() is False


def test_process_payment_charges_total():
    payment = RecordingPayment()
    order = DeliveryOrder(items=_restaurant().menu, payment_strategy=payment)
    assert order.process_payment() is True
    assert payment.amounts == [order.total]


def test_current_time_is_ctime_format():
    text = current_time()
    assert not text.endswith("\n")
    parsed = time.strptime(text, "%a %b %d %H:%M:%S %Y")
    assert abs(time.mktime(parsed) - time.time()) < 5
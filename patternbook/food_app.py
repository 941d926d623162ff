"""A food-ordering app: search restaurants, fill a cart, check out and pay."""

from __future__ import annotations

from abc import ABC, abstractmethod

from patternbook.food_models import (
    Cart,
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

_RULE = "---------------------------------------------"
_CART_RULE = "------------------------------------"


class OrderFactory(ABC):
    """Builds orders of the requested type."""

    @abstractmethod
    def create_order(
        self, user, cart, restaurant, items, payment_strategy, total_cost, order_type
    ) -> Order:
        """Build an order; ``order_type`` "Delivery" delivers, anything else is pickup."""

    @staticmethod
    def _build(user, restaurant, items, payment_strategy, total_cost, order_type, scheduled):
        common = dict(
            user=user,
            restaurant=restaurant,
            items=list(items),
            payment_strategy=payment_strategy,
            total=total_cost,
            scheduled=scheduled,
        )
        if order_type == "Delivery":
            return DeliveryOrder(user_address=user.address, **common)
        return PickupOrder(restaurant_address=restaurant.location, **common)


class NowOrderFactory(OrderFactory):
    """Orders scheduled for the current time."""

    def create_order(
        self, user, cart, restaurant, items, payment_strategy, total_cost, order_type
    ):
        return self._build(
            user, restaurant, items, payment_strategy, total_cost, order_type, current_time()
        )


class ScheduledOrderFactory(OrderFactory):
    """Orders scheduled for a fixed time."""

    def __init__(self, schedule_time: str) -> None:
        self.schedule_time = schedule_time

    def create_order(
        self, user, cart, restaurant, items, payment_strategy, total_cost, order_type
    ):
        return self._build(
            user, restaurant, items, payment_strategy, total_cost, order_type,
            self.schedule_time,
        )


class OrderManager:
    """Keeps every order placed."""

    def __init__(self) -> None:
        self.orders: list[Order] = []

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def list_orders(self) -> str:
        lines = ["", "--- All Orders ---"]
        lines.extend(
            f"{order.order_type} order for {order.user.name} | "
            f"Total: ₹{order.total:g} | At: {order.scheduled}"
            for order in self.orders
        )
        text = "\n".join(lines)
        print(text)
        return text


class RestaurantManager:
    """Registry of restaurants, searchable by location."""

    def __init__(self) -> None:
        self.restaurants: list[Restaurant] = []

    def add_restaurant(self, restaurant: Restaurant) -> None:
        self.restaurants.append(restaurant)

    def search_by_location(self, location: str) -> list[Restaurant]:
        """Restaurants whose location matches, ignoring case."""
        wanted = location.lower()
        return [r for r in self.restaurants if r.location.lower() == wanted]


def notify(order: Order) -> str:
    """Announce a paid order and return the announcement."""
    lines = [
        "",
        f"Notification: New {order.order_type} order placed!",
        _RULE,
        f"Order ID: {order.order_id}",
        f"Customer: {order.user.name}",
        f"Restaurant: {order.restaurant.name}",
        "Items Ordered:",
    ]
    lines.extend(f"   - {item.name} (₹{item.price})" for item in order.items)
    lines.extend(
        [
            f"Total: ₹{order.total:g}",
            f"Scheduled For: {order.scheduled}",
            "Payment: Done",
            _RULE,
        ]
    )
    text = "\n".join(lines)
    print(text)
    return text


_SAMPLE_RESTAURANTS = [
    ("Bikaner", "Delhi", [("P1", "Chole Bhature", 120), ("P2", "Samosa", 15)]),
    (
        "Haldiram",
        "Kolkata",
        [("P1", "Raj Kachori", 80), ("P2", "Pav Bhaji", 100), ("P3", "Dhokla", 50)],
    ),
    (
        "Saravana Bhavan",
        "Chennai",
        [("P1", "Masala Dosa", 90), ("P2", "Idli Vada", 60), ("P3", "Filter Coffee", 30)],
    ),
]


class TomatoApp:
    """The app's front: restaurant search, cart handling, checkout and payment."""

    def __init__(
        self,
        restaurant_manager: RestaurantManager | None = None,
        order_manager: OrderManager | None = None,
    ) -> None:
        self.restaurant_manager = restaurant_manager or RestaurantManager()
        self.order_manager = order_manager or OrderManager()
        self._initialize_restaurants()

    def _initialize_restaurants(self) -> None:
        for name, location, menu in _SAMPLE_RESTAURANTS:
            restaurant = Restaurant(name, location)
            for code, dish, price in menu:
                restaurant.add_menu_item(MenuItem(code, dish, price))
            self.restaurant_manager.add_restaurant(restaurant)

    def search_restaurants(self, location: str) -> list[Restaurant]:
        return self.restaurant_manager.search_by_location(location)

    def select_restaurant(self, user: User, restaurant: Restaurant) -> None:
        user.cart.restaurant = restaurant

    def add_to_cart(self, user: User, item_code: str) -> MenuItem | None:
        """Add the menu item with ``item_code``; return it, or None if there is none."""
        restaurant = user.cart.restaurant
        if restaurant is None:
            raise ValueError("Please select a restaurant first.")
        item = next((i for i in restaurant.menu if i.code == item_code), None)
        if item is not None:
            user.cart.add_item(item)
        return item

    def checkout_now(
        self, user: User, order_type: str, payment_strategy: PaymentStrategy | None
    ) -> Order | None:
        return self.checkout(user, order_type, payment_strategy, NowOrderFactory())

    def checkout_scheduled(
        self,
        user: User,
        order_type: str,
        payment_strategy: PaymentStrategy | None,
        schedule_time: str,
    ) -> Order | None:
        return self.checkout(
            user, order_type, payment_strategy, ScheduledOrderFactory(schedule_time)
        )

    def checkout(
        self,
        user: User,
        order_type: str,
        payment_strategy: PaymentStrategy | None,
        order_factory: OrderFactory,
    ) -> Order | None:
        """Turn the user's cart into an order; None if the cart is empty."""
        cart: Cart = user.cart
        if cart.is_empty():
            return None
        order = order_factory.create_order(
            user,
            cart,
            cart.restaurant,
            list(cart.items),
            payment_strategy,
            cart.total_cost(),
            order_type,
        )
        self.order_manager.add_order(order)
        return order

    def pay_for_order(self, user: User, order: Order) -> bool:
        """Pay for ``order``; on success notify and empty the user's cart."""
        if not order.process_payment():
            return False
        notify(order)
        user.cart.clear()
        return True

    def print_user_cart(self, user: User) -> str:
        lines = ["Items in cart:", _CART_RULE]
        lines.extend(
            f"{item.code} : {item.name} : ₹{item.price}" for item in user.cart.items
        )
        lines.append(_CART_RULE)
        lines.append(f"Grand total : ₹{user.cart.total_cost():g}")
        text = "\n".join(lines)
        print(text)
        return text


def main(argv=None) -> int:
    """Walk a user through searching, ordering and paying."""
    app = TomatoApp()
    user = User(101, "Aditya", "Delhi")
    print(f"User: {user.name} is active.")
    restaurants = app.search_restaurants("Delhi")
    if not restaurants:
        print("No restaurants found!")
        return 0
    print("Found Restaurants:")
    for restaurant in restaurants:
        print(f" - {restaurant.name}")
    app.select_restaurant(user, restaurants[0])
    print(f"Selected restaurant: {restaurants[0].name}")
    app.add_to_cart(user, "P1")
    app.add_to_cart(user, "P2")
    app.print_user_cart(user)
    order = app.checkout_now(user, "Delivery", UpiPaymentStrategy("upi-handle"))
    if order is not None:
        app.pay_for_order(user, order)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
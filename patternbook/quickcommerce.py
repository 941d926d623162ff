"""Quick-commerce ordering served from nearby dark stores."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

MAX_DELIVERY_DISTANCE = 5.0

_CATALOG: dict[int, tuple[str, float]] = {
    101: ("Apple", 20.0),
    102: ("Banana", 10.0),
    103: ("Chocolate", 50.0),
    201: ("T-Shirt", 500.0),
    202: ("Jeans", 1000.0),
}
_DEFAULT_PRICE = 100.0


@dataclass(frozen=True)
class Product:
    """A catalogue product identified by its SKU."""

    sku: int
    name: str
    price: float


def create_product(sku: int) -> Product:
    """Look up a product by SKU; unknown SKUs get a generic entry."""
    name, price = _CATALOG.get(sku, (f"Item{sku}", _DEFAULT_PRICE))
    return Product(sku, name, price)


class InventoryStore(ABC):
    """Storage of products and their stock levels."""

    @abstractmethod
    def add_product(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` units of ``product``."""

    @abstractmethod
    def remove_product(self, sku: int, quantity: int) -> None:
        """Take ``quantity`` units of ``sku`` out of stock."""

    @abstractmethod
    def check_stock(self, sku: int) -> int:
        """Units of ``sku`` in stock."""

    @abstractmethod
    def available_products(self) -> list[Product]:
        """Products with stock left, ordered by SKU."""


class DbInventoryStore(InventoryStore):
    """In-memory inventory keyed by SKU."""

    def __init__(self) -> None:
        self._stock: dict[int, int] = {}
        self._products: dict[int, Product] = {}

    def add_product(self, product, quantity):
        self._products.setdefault(product.sku, product)
        self._stock[product.sku] = self._stock.get(product.sku, 0) + quantity

    def remove_product(self, sku, quantity):
        if sku not in self._stock:
            return
        remaining = self._stock[sku] - quantity
        if remaining > 0:
            self._stock[sku] = remaining
        else:
            del self._stock[sku]

    def check_stock(self, sku):
        return self._stock.get(sku, 0)

    def available_products(self):
        return [
            self._products[sku]
            for sku, quantity in sorted(self._stock.items())
            if quantity > 0 and sku in self._products
        ]


class InventoryManager:
    """Front for an inventory store that builds products from SKUs."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store

    def add_stock(self, sku: int, quantity: int) -> None:
        self.store.add_product(create_product(sku), quantity)
        print(f"[InventoryManager] Added SKU {sku} Qty {quantity}")

    def remove_stock(self, sku: int, quantity: int) -> None:
        self.store.remove_product(sku, quantity)

    def check_stock(self, sku: int) -> int:
        return self.store.check_stock(sku)

    def available_products(self) -> list[Product]:
        return self.store.available_products()


class ReplenishStrategy(ABC):
    """A policy for topping up stock."""

    @abstractmethod
    def replenish(self, manager: InventoryManager, items: dict[int, int]) -> None:
        """Top up ``manager`` using ``items`` (SKU to quantity to add)."""


class ThresholdReplenishStrategy(ReplenishStrategy):
    """Top up any SKU whose stock has fallen below a threshold."""

    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def replenish(self, manager, items):
        print("[ThresholdReplenish] Checking threshold... ")
        for sku, quantity in sorted(items.items()):
            current = manager.check_stock(sku)
            if current < self.threshold:
                manager.add_stock(sku, quantity)
                print(f"  -> SKU {sku} was {current}, replenished by {quantity}")


class WeeklyReplenishStrategy(ReplenishStrategy):
    """A scheduled top-up that only announces itself."""

    def replenish(self, manager, items):
        print("[WeeklyReplenish] Weekly replenishment triggered for inventory.")


class DarkStore:
    """A delivery-only warehouse at a fixed location."""

    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        replenish_strategy: ReplenishStrategy | None = None,
    ) -> None:
        self.name = name
        self.x = x
        self.y = y
        self.inventory_manager = InventoryManager(DbInventoryStore())
        self.replenish_strategy = replenish_strategy

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def run_replenishment(self, items: dict[int, int]) -> None:
        if self.replenish_strategy is not None:
            self.replenish_strategy.replenish(self.inventory_manager, items)

    def add_stock(self, sku: int, quantity: int) -> None:
        self.inventory_manager.add_stock(sku, quantity)

    def remove_stock(self, sku: int, quantity: int) -> None:
        self.inventory_manager.remove_stock(sku, quantity)

    def check_stock(self, sku: int) -> int:
        return self.inventory_manager.check_stock(sku)

    def products(self) -> list[Product]:
        return self.inventory_manager.available_products()

    def __repr__(self) -> str:
        return f"DarkStore({self.name!r}, {self.x}, {self.y})"


class DarkStoreManager:
    """Registry of dark stores, searchable by distance."""

    def __init__(self) -> None:
        self.stores: list[DarkStore] = []

    def register(self, store: DarkStore) -> None:
        self.stores.append(store)

    def nearby_stores(self, x: float, y: float, max_distance: float) -> list[DarkStore]:
        """Stores within ``max_distance``, nearest first."""
        in_range = [
            (store.distance_to(x, y), store)
            for store in self.stores
            if store.distance_to(x, y) <= max_distance
        ]
        in_range.sort(key=lambda pair: pair[0])
        return [store for _, store in in_range]


class Cart:
    """Products a user intends to buy, with quantities."""

    def __init__(self) -> None:
        self.items: list[tuple[Product, int]] = []

    def add_item(self, sku: int, quantity: int) -> None:
        product = create_product(sku)
        self.items.append((product, quantity))
        print(f"[Cart] Added SKU {sku} ({product.name}) x{quantity}")

    def total(self) -> float:
        return sum(product.price * quantity for product, quantity in self.items)

    def __iter__(self) -> Iterator[tuple[Product, int]]:
        return iter(self.items)


@dataclass
class User:
    """A shopper at a location, with their own cart."""

    name: str
    x: float
    y: float
    cart: Cart = field(default_factory=Cart)


@dataclass(frozen=True)
class DeliveryPartner:
    name: str


@dataclass
class Order:
    """A placed order, possibly fulfilled by several stores."""

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    user: User
    items: list[tuple[Product, int]] = field(default_factory=list)
    partners: list[DeliveryPartner] = field(default_factory=list)
    total_amount: float = 0.0
    unfulfilled: dict[int, int] = field(default_factory=dict)
    order_id: int = field(default_factory=lambda: next(Order._ids))


class OrderManager:
    """Places orders against the dark stores near the user."""

    def __init__(self, max_distance: float = MAX_DELIVERY_DISTANCE) -> None:
        self.max_distance = max_distance
        self.orders: list[Order] = []

    def place_order(
        self, user: User, cart: Cart, store_manager: DarkStoreManager
    ) -> Order | None:
        """Fulfil ``cart`` from nearby stores; return None if no store is in range."""
        print(f"\n[OrderManager] Placing Order for: {user.name}")
        requested = list(cart.items)
        stores = store_manager.nearby_stores(user.x, user.y, self.max_distance)
        if not stores:
            print(f"  No dark stores within {self.max_distance:g} KM. Cannot fulfill order.")
            return None

        first = stores[0]
        order = Order(user)
        if all(first.check_stock(p.sku) >= qty for p, qty in requested):
            print(f"  All items at: {first.name}")
            for product, quantity in requested:
                first.remove_stock(product.sku, quantity)
                order.items.append((product, quantity))
            order.total_amount = cart.total()
            order.partners.append(DeliveryPartner("Partner1"))
            print("  Assigned Delivery Partner: Partner1")
        else:
            self._split_order(order, requested, stores)

        self._print_summary(order)
        self.orders.append(order)
        return order

    @staticmethod
    def _split_order(order: Order, requested, stores: list[DarkStore]) -> None:
        print("  Splitting order across stores...")
        remaining = {product.sku: quantity for product, quantity in requested}
        partner_ids = itertools.count(1)
        for store in stores:
            if not remaining:
                break
            print(f"   Checking: {store.name}")
            assigned = False
            for sku, needed in sorted(remaining.items()):
                available = store.check_stock(sku)
                if available <= 0:
                    continue
                taken = min(available, needed)
                store.remove_stock(sku, taken)
                print(f"     {store.name} supplies SKU {sku} x{taken}")
                order.items.append((create_product(sku), taken))
                if needed > taken:
                    remaining[sku] = needed - taken
                else:
                    del remaining[sku]
                assigned = True
            if assigned:
                name = f"Partner{next(partner_ids)}"
                order.partners.append(DeliveryPartner(name))
                print(f"     Assigned: {name} for {store.name}")

        if remaining:
            print("  Could not fulfill:")
            for sku, quantity in sorted(remaining.items()):
                print(f"    SKU {sku} x{quantity}")
        order.unfulfilled = dict(sorted(remaining.items()))
        order.total_amount = sum(p.price * q for p, q in order.items)

    @staticmethod
    def _print_summary(order: Order) -> None:
        print(f"\n[OrderManager] Order #{order.order_id} Summary:")
        print(f"  User: {order.user.name}\n  Items:")
        for product, quantity in order.items:
            print(
                f"    SKU {product.sku} ({product.name}) x{quantity} @ ₹{product.price:g}"
            )
        print(f"  Total: ₹{order.total_amount:g}\n  Partners:")
        for partner in order.partners:
            print(f"    {partner.name}")
        print()


def show_all_items(user: User, store_manager: DarkStoreManager) -> list[Product]:
    """List each product available near ``user`` once, ordered by SKU."""
    print(
        f"\n[Zepto] All Available products within {MAX_DELIVERY_DISTANCE:g} KM "
        f"for {user.name}:"
    )
    seen: dict[int, Product] = {}
    for store in store_manager.nearby_stores(user.x, user.y, MAX_DELIVERY_DISTANCE):
        for product in store.products():
            seen.setdefault(product.sku, product)
    products = [seen[sku] for sku in sorted(seen)]
    for product in products:
        print(f"  SKU {product.sku} - {product.name} @ ₹{product.price:g}")
    return products


def initialize(store_manager: DarkStoreManager) -> list[DarkStore]:
    """Set up and register the sample dark stores."""
    layout = [
        ("DarkStoreA", 0.0, 0.0, [(101, 5), (102, 2)]),
        ("DarkStoreB", 4.0, 1.0, [(101, 3), (103, 10)]),
        ("DarkStoreC", 2.0, 3.0, [(102, 5), (201, 7)]),
    ]
    stores = []
    for name, x, y, stock in layout:
        store = DarkStore(name, x, y, ThresholdReplenishStrategy(3))
        print(f"\nAdding stocks in {name}....")
        for sku, quantity in stock:
            store.add_stock(sku, quantity)
        stores.append(store)
    for store in stores:
        store_manager.register(store)
    return stores


def main(argv=None) -> int:
    """Set up the stores and place a sample order split across them."""
    store_manager = DarkStoreManager()
    initialize(store_manager)
    user = User("Aditya", 1.0, 1.0)
    print(f"\nUser with name {user.name} comes on platform")
    show_all_items(user, store_manager)
    print("\nAdding items to cart")
    user.cart.add_item(101, 4)
    user.cart.add_item(102, 3)
    user.cart.add_item(103, 2)
    OrderManager().place_order(user, user.cart, store_manager)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
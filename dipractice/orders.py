"""An order service that checks stock and notifies the customer."""

from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component, inject


class Inventory(ABC):
    """Answers whether an item is in stock."""

    @abstractmethod
    def is_in_stock(self, item_id: str) -> bool: ...


@component(Inventory)
class StaticInventory(Inventory):
    """A fixed inventory with a single item in stock."""

    def is_in_stock(self, item_id: str) -> bool:
        return item_id == "item123"


class Notifier(ABC):
    """Sends a message to a user."""

    @abstractmethod
    def notify(self, user: str, msg: str) -> None: ...


@component(Notifier)
class ConsoleNotifier(Notifier):
    """Prints notifications to standard output."""

    def notify(self, user: str, msg: str) -> None:
        print(f"user: {user}, msg: {msg}")


class OrderService(ABC):
    """Places orders."""

    @abstractmethod
    def order(self, user: str, item_id: str) -> None: ...


@component(OrderService)
class OrderServiceImpl(OrderService):
    """Notifies the user when the ordered item is in stock."""

    inventory: Inventory = inject()
    notification: Notifier = inject()

    def order(self, user: str, item_id: str) -> None:
        if self.inventory.is_in_stock(item_id):
            self.notification.notify(user, "is_in_stock: OK")


def build_module() -> Module:
    """Build the module holding the order service and its dependencies."""
    return ModuleBuilder([StaticInventory, ConsoleNotifier, OrderServiceImpl], []).build()


def main(argv=None) -> int:
    build_module().resolve(OrderService).order("Taro Tanaka", "item123")
    return 0
from dipractice.orders import (
    ConsoleNotifier,
    Inventory,
    Notifier,
    OrderService,
    OrderServiceImpl,
    StaticInventory,
    build_module,
    main,
)


class FakeInventory(Inventory):
    def __init__(self, in_stock):
        self.in_stock = in_stock
        self.queries = []

    def is_in_stock(self, item_id):
        self.queries.append(item_id)
        return self.in_stock


class RecordingNotifier(Notifier):
    def __init__(self):
        self.calls = []

    def notify(self, user, msg):
        self.calls.append((user, msg))


def test_order_service():
    inventory = FakeInventory(True)
    notifier = RecordingNotifier()
    service = OrderServiceImpl(inventory=inventory, notification=notifier)

    service.order("Hanako Sato", "item123")

    assert inventory.queries == ["item123"]
    assert notifier.calls == [("Hanako Sato", "is_in_stock: OK")]


def test_out_of_stock_sends_nothing():
    inventory = FakeInventory(False)
    notifier = RecordingNotifier()
    OrderServiceImpl(inventory=inventory, notification=notifier).order("Hanako Sato", "item999")
    assert inventory.queries == ["item999"]
    assert notifier.calls == []


def test_static_inventory():
    inventory = StaticInventory()
    assert inventory.is_in_stock("item123") is True
    assert inventory.is_in_stock("item456") is False


def test_console_notifier_prints(capsys):
    ConsoleNotifier().notify("Hanako Sato", "ready")
    assert capsys.readouterr().out == "user: Hanako Sato, msg: ready\n"


def test_module_wiring():
    module = build_module()
    service = module.resolve(OrderService)
    assert service.inventory is module.resolve(Inventory)
    assert service.notification is module.resolve(Notifier)


def test_main_prints_notification(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "user: Taro Tanaka, msg: is_in_stock: OK\n"
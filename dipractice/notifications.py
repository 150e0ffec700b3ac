"""A notification service and a mailer with a configurable sender address."""

from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component

DEFAULT_FROM_ADDRESS = "noreply@example.com"


class Notification(ABC):
    @abstractmethod
    def notify(self) -> str: ...


@component(Notification)
class NotificationManager(Notification):
    def notify(self) -> str:
        return "Rust is awesome!"


class Mailer(ABC):
    @abstractmethod
    def send_email(self, to: str, message: str) -> str: ...


@component(Mailer)
class EmailService(Mailer):
    from_address: str = ""

    def send_email(self, to: str, message: str) -> str:
        return f"[FROM: {self.from_address}] To: {to} - Message: {message}"


def build_module(from_address: str = DEFAULT_FROM_ADDRESS) -> Module:
    return (
        ModuleBuilder([NotificationManager, EmailService], [])
        .with_component_parameters(EmailService, from_address=from_address)
        .build()
    )


def main(argv=None) -> int:
    module = build_module()
    print(module.resolve(Notification).notify())
    print(module.resolve(Mailer).send_email("user@example.com", "Hello!"))
    return 0
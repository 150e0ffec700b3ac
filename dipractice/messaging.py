"""A message service resolved from a module."""

from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component


class MessageService(ABC):
    @abstractmethod
    def send(self, msg: str) -> str: ...


@component(MessageService)
class ConsoleMessageService(MessageService):
    def send(self, msg: str) -> str:
        return f"Sent: {msg}"


def build_module() -> Module:
    return ModuleBuilder([ConsoleMessageService], []).build()


def main(argv=None) -> int:
    print(build_module().resolve(MessageService).send("Hello"))
    return 0
"""A logger that stamps each message with the time from a provided time source."""

from abc import ABC, abstractmethod
from datetime import datetime

from dipractice.container import Module, ModuleBuilder, component, provide


class TimeSource(ABC):
    @abstractmethod
    def now(self) -> str: ...


class SystemTimeSource(TimeSource):
    def now(self) -> str:
        return datetime.now().astimezone().isoformat()


class Logger(ABC):
    @abstractmethod
    def log(self, message: str) -> None: ...


@component(Logger)
class LoggerImpl(Logger):
    time_source: TimeSource = provide()

    def log(self, message: str) -> None:
        print(f"[{self.time_source.now()}] {message}")


class TimeSourceProvider:
    interface = TimeSource

    def provide(self, module: Module) -> TimeSource:
        return SystemTimeSource()


def build_module() -> Module:
    return ModuleBuilder([LoggerImpl], [TimeSourceProvider]).build()


def main(argv=None) -> int:
    build_module().resolve(Logger).log("This is a test message.")
    return 0
"""A mailer that logs through a swappable logger and reads its sender from config."""

import contextlib
import os
import sys
from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component, inject

LOG_FILE = "log.txt"


class Logger(ABC):
    """Records a message; may raise OSError."""

    @abstractmethod
    def log(self, msg: str) -> None: ...


@component(Logger)
class ConsoleLogger(Logger):
    """Logs to standard output."""

    def log(self, msg: str) -> None:
        print(f"[LOG] {msg}")


@component(Logger)
class FileLogger(Logger):
    """Appends log lines to a file."""

    file_path: str

    def __init__(self, file_path) -> None:
        self.file_path = os.fspath(file_path)
        with open(self.file_path, "a", encoding="utf-8") as file:
            file.write("--- FileLogger Initialized ---\n")

    def log(self, msg: str) -> None:
        with open(self.file_path, "a", encoding="utf-8") as file:
            file.write(f"[FileLogger] {msg}\n")


class Config(ABC):
    """Looks up configuration values by key."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...


@component(Config)
class StaticConfig(Config):
    """A fixed configuration holding only the sender address."""

    def get(self, key: str) -> str | None:
        if key == "from":
            return "support@example.com"
        return None


class Mailer(ABC):
    """Sends an e-mail."""

    @abstractmethod
    def send_email(self, to: str, message: str) -> None: ...


@component(Mailer)
class EmailService(Mailer):
    """Sends e-mail by logging it with the configured sender."""

    logger: Logger = inject()
    config: Config = inject()

    def send_email(self, to: str, message: str) -> None:
        from_address = self.config.get("from")
        if from_address is None:
            raise LookupError("configuration has no 'from' address")
        self.logger.log(f"from: {from_address}, to: {to}, message: {message}")


def build_module(use_file_logger: bool = False) -> Module:
    """Build the module, logging to LOG_FILE instead of the console if asked."""
    builder = ModuleBuilder([StaticConfig, ConsoleLogger, EmailService], [])
    if use_file_logger:
        builder = builder.with_component_override(Logger, FileLogger(LOG_FILE))
    return builder.build()


def main(argv=None) -> int:
    use_file_logger = os.environ.get("USE_FILE_LOGGER") == "1"
    try:
        module = build_module(use_file_logger)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    with contextlib.suppress(OSError, LookupError):
        module.resolve(Mailer).send_email("practice@example.com", "Hello, World! Shaku")
    return 0
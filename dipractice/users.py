"""A user service that logs each registration under a module-wide identifier."""

import uuid
from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component, inject


class Logger(ABC):
    """Records that a user was registered with an identifier."""

    @abstractmethod
    def log(self, name: str, id: str) -> None: ...


@component(Logger)
class ConsoleLogger(Logger):
    """Prints registrations to standard output."""

    def log(self, name: str, id: str) -> None:
        print(f"[LOG] Registered user:{name} with ID: {id}")


class UserService(ABC):
    """Registers users by name."""

    @abstractmethod
    def register_name(self, name: str) -> None: ...


@component(UserService)
class UserServiceImpl(UserService):
    """Registers users under the identifier it was built with."""

    logger: Logger = inject()
    id: str

    def register_name(self, name: str) -> None:
        self.logger.log(name, self.id)


def build_module(user_id: str | None = None) -> Module:
    """Build the module, giving the user service ``user_id`` or a fresh UUID."""
    if user_id is None:
        user_id = str(uuid.uuid4())
    return (
        ModuleBuilder([ConsoleLogger, UserServiceImpl], [])
        .with_component_parameters(UserServiceImpl, id=user_id)
        .build()
    )


def main(argv=None) -> int:
    build_module().resolve(UserService).register_name("Alice")
    return 0
"""An application service that loads its environment name and logs it."""

import os
from abc import ABC, abstractmethod

from dipractice.container import Module, ModuleBuilder, component, inject

ENVIRONMENT_VARIABLE = "ENVIROMENT"
DEFAULT_ENVIRONMENT = "development"


class Logger(ABC):
    """Records a message."""

    @abstractmethod
    def log(self, message: str) -> None: ...


@component(Logger)
class LoggerImpl(Logger):
    """Prints the loaded configuration to standard output."""

    def log(self, message: str) -> None:
        print(f"[LOG] Laded config: ENV={message}")


class ConfigLoader(ABC):
    """Loads the configuration."""

    @abstractmethod
    def load_config(self) -> str: ...


@component(ConfigLoader)
class ConfigLoaderImpl(ConfigLoader):
    """Reads the environment name from the process environment."""

    def load_config(self) -> str:
        return os.environ.get(ENVIRONMENT_VARIABLE, DEFAULT_ENVIRONMENT)


class AppService(ABC):
    """Runs the application."""

    @abstractmethod
    def run(self) -> None: ...


@component(AppService)
class AppServiceImpl(AppService):
    """Loads the configuration and logs it."""

    logger: Logger = inject()
    config_loader: ConfigLoader = inject()

    def run(self) -> None:
        self.logger.log(self.config_loader.load_config())


def build_module() -> Module:
    """Build the module holding the application service and its dependencies."""
    return ModuleBuilder([LoggerImpl, ConfigLoaderImpl, AppServiceImpl], []).build()


def main(argv=None) -> int:
    build_module().resolve(AppService).run()
    return 0
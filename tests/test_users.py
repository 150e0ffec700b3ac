import uuid

import pytest

from dipractice.container import ModuleBuilder, ResolutionError
from dipractice.users import (
    ConsoleLogger,
    Logger,
    UserService,
    UserServiceImpl,
    build_module,
    main,
)


class RecordingLogger(Logger):
    def __init__(self):
        self.calls = []

    def log(self, name, id):
        self.calls.append((name, id))


def test_register_name_passes_name_and_id_to_logger():
    logger = RecordingLogger()
    service = UserServiceImpl(logger=logger, id="user-1")
    service.register_name("Alice")
    assert logger.calls == [("Alice", "user-1")]


def test_console_logger_output(capsys):
    ConsoleLogger().log("Bob", "abc")
    assert capsys.readouterr().out == "[LOG] Registered user:Bob with ID: abc\n"


def test_build_module_uses_given_id(capsys):
    service = build_module("fixed-id").resolve(UserService)
    service.register_name("Alice")
    assert service.id == "fixed-id"
    assert capsys.readouterr().out == "[LOG] Registered user:Alice with ID: fixed-id\n"


def test_default_id_is_uuid4():
    service = build_module().resolve(UserService)
    assert uuid.UUID(service.id).version == 4


def test_each_module_gets_its_own_id():
    first = build_module().resolve(UserService)
    second = build_module().resolve(UserService)
    assert first.id != second.id
    assert isinstance(first, UserServiceImpl)


def test_resolve_returns_the_same_instance():
    module = build_module("x")
    assert module.resolve(UserService).id == "x"
    assert module.resolve(UserService) is module.resolve(UserService)


def test_missing_id_parameter_fails_to_build():
    with pytest.raises(ResolutionError):
        ModuleBuilder([ConsoleLogger, UserServiceImpl], []).build()


def test_main_registers_alice(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("[LOG] Registered user:Alice with ID: ")
    assert uuid.UUID(out.strip().rsplit(" ", 1)[1]).version == 4
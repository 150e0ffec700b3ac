from dipractice.messaging import (
    ConsoleMessageService,
    MessageService,
    build_module,
    main,
)


def test_send_formats_message():
    assert ConsoleMessageService().send("Hello") == "Sent: Hello"


def test_module_resolves_console_service():
    service = build_module().resolve(MessageService)
    assert isinstance(service, ConsoleMessageService)
    assert service.send("abc") == "Sent: abc"


def test_main_prints_sent_message(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Sent: Hello\n"
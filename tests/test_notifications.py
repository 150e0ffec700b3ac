from dipractice.container import ModuleBuilder
from dipractice.notifications import (
    EmailService,
    Mailer,
    Notification,
    NotificationManager,
    build_module,
    main,
)


def test_notify_text():
    assert NotificationManager().notify() == "Rust is awesome!"


def test_mailer_uses_configured_address():
    mailer = build_module("sender@example.com").resolve(Mailer)
    assert mailer.from_address == "sender@example.com"
    assert mailer.send_email("user@example.com", "Hello!") == (
        "[FROM: sender@example.com] To: user@example.com - Message: Hello!"
    )


def test_sender_address_defaults_to_empty():
    module = ModuleBuilder([NotificationManager, EmailService]).build()
    assert module.resolve(Mailer).from_address == ""


def test_module_resolves_both_services():
    module = build_module("a@example.com")
    assert isinstance(module.resolve(Notification), NotificationManager)
    assert isinstance(module.resolve(Mailer), EmailService)
    assert module.resolve(Notification).notify() == "Rust is awesome!"
    assert module.resolve(Mailer).send_email("b@example.com", "Hi") == (
        "[FROM: a@example.com] To: b@example.com - Message: Hi"
    )


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Rust is awesome!",
        "[FROM: noreply@example.com] To: user@example.com - Message: Hello!",
    ]
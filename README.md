# dipractice

A small dependency-injection container and a set of example services
built with it. It uses only the standard library.

## The container

Everything lives in `dipractice.container`:

- `component(interface)` is a class decorator. It checks that the class
  subclasses `interface`, turns it into a keyword-only dataclass and
  registers it as the implementation of that interface.
- `inject()` declares a field that the module fills with the component
  registered for the field's annotated type.
- `provide()` declares a field that the module fills with a new object from
  the provider registered for the field's annotated type. A provider is a
  class with an `interface` attribute and a `provide(self, module)` method.
- `ModuleBuilder(components, providers)` collects components and providers;
  an interface may have only one of each.
  - `with_component_parameters(component, **kwargs)` sets plain (not
    injected, not provided) fields of a component. Unknown names raise
    `TypeError`.
  - `with_component_override(interface, instance)` makes the module use
    `instance` instead of building the registered component.
  - `build()` creates every component at once and returns a `Module`.
    Both builder methods return the builder, so calls can be chained.
- `Module.resolve(interface)` returns the component for an interface. Each
  component is built once per module and shared.
- `Module.provide(interface)` returns a fresh object from the provider on
  every call.
- `ResolutionError` is raised for an unregistered interface, a duplicate
  registration, a circular dependency, or a plain field with neither a
  parameter nor a default.

```python
from abc import ABC, abstractmethod

from dipractice.container import ModuleBuilder, component, inject


class Greeter(ABC):
    @abstractmethod
    def greet(self, name: str) -> str: ...


@component(Greeter)
class PoliteGreeter(Greeter):
    prefix: str = "Hello"

    def greet(self, name: str) -> str:
        return f"{self.prefix}, {name}"


class App(ABC):
    @abstractmethod
    def run(self) -> str: ...


@component(App)
class AppImpl(App):
    greeter: Greeter = inject()

    def run(self) -> str:
        return self.greeter.greet("world")


module = (
    ModuleBuilder([PoliteGreeter, AppImpl], [])
    .with_component_parameters(PoliteGreeter, prefix="Hi")
    .build()
)
print(module.resolve(App).run())  # Hi, world
```

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The example modules

Each example module has a `build_module()` function and a `main()` that
runs it.

```python
from dipractice.messaging import MessageService, build_module

service = build_module().resolve(MessageService)
print(service.send("Hello"))  # Sent: Hello
```

```python
from dipractice.notifications import Mailer, build_module

mailer = build_module("noreply@example.com").resolve(Mailer)
print(mailer.send_email("user@example.com", "Hello!"))
# [FROM: noreply@example.com] To: user@example.com - Message: Hello!
```

- `dipractice.messaging`: `ConsoleMessageService.send` returns `Sent: <msg>`.
- `dipractice.notifications`: `NotificationManager.notify` returns a fixed
  line; `EmailService` takes its `from_address` as a component parameter
  (default in `build_module` is `noreply@example.com`).
- `dipractice.mailer`: `EmailService` reads the sender from `StaticConfig`
  and logs the mail through a `Logger`, either `ConsoleLogger` or
  `FileLogger`, which appends to a file. `build_module(use_file_logger=True)`
  overrides the logger with a `FileLogger` writing to `log.txt`.
- `dipractice.orders`: `OrderServiceImpl.order` notifies the user when
  `StaticInventory` has the item (only `item123` is in stock).
- `dipractice.users`: `UserServiceImpl` logs each registered name with the
  ID it was built with; `build_module(user_id=None)` uses a fresh UUID4 when
  none is given.
- `dipractice.timelog`: `LoggerImpl` gets its `TimeSource` from
  `TimeSourceProvider` and prefixes messages with the local time in ISO 8601.
- `dipractice.appconfig`: `ConfigLoaderImpl` reads the environment name and
  `AppServiceImpl.run` logs it.
- `dipractice.webapp`: `create_server(module, host, port)` returns an unstarted
  `ThreadingHTTPServer`.

## Commands

| Command | What it does |
| --- | --- |
| `dipractice-messaging` | Prints `Sent: Hello`. |
| `dipractice-notifications` | Prints a notification and an e-mail line from `EmailService`. |
| `dipractice-mailer` | Sends an e-mail through `EmailService`, which logs it through the configured `Logger`. |
| `dipractice-orders` | Orders `item123` for a user; the notifier prints that it is in stock. |
| `dipractice-users` | Registers the user `Alice` under a freshly generated ID. |
| `dipractice-timelog` | Logs a message prefixed with the current local time. |
| `dipractice-appconfig` | Loads the environment name and logs it. |
| `dipractice-webapp` | Starts an HTTP server on `0.0.0.0:8080` that answers `GET /hello`. |

### Environment variables

- `dipractice-mailer`: with `USE_FILE_LOGGER=1` the log goes to `log.txt` in
  the current directory instead of to the console. Errors while logging are
  ignored.
- `dipractice-appconfig`: reads the environment name from `ENVIROMENT`
  (spelled this way) and falls back to `development`.

### The web example

```
dipractice-webapp
```

Then request `http://localhost:8080/hello`. `GET` and `HEAD` on `/hello`
resolve `AppService` from the module, print `Hello from AppService!` on the
server's console and answer `200` with an empty body. Other methods on
`/hello` get `405`; other paths get `404`. Stop the server with Ctrl-C.

## What it does not do

The container holds exactly one component per interface; it has no named or
scoped registrations and no asynchronous resolution. The web example serves
only the one `/hello` route, returns no response body and cannot be given a
different host or port from the command line.
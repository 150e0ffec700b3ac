"""An HTTP server whose /hello route calls a service resolved from a module."""

import sys
from abc import ABC, abstractmethod
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from dipractice.container import Module, ModuleBuilder, component, inject

HELLO_PATH = "/hello"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class Logger(ABC):
    @abstractmethod
    def log(self, msg: str) -> None: ...


@component(Logger)
class ConsoleLogger(Logger):
    def log(self, msg: str) -> None:
        print(msg)


class AppService(ABC):
    @abstractmethod
    def hello(self) -> None: ...


@component(AppService)
class AppServiceImpl(AppService):
    logger: Logger = inject()

    def hello(self) -> None:
        self.logger.log("Hello from AppService!")


def build_module() -> Module:
    return ModuleBuilder([ConsoleLogger, AppServiceImpl], []).build()


def create_server(
    module: Module, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> ThreadingHTTPServer:
    """Bind a server that answers GET /hello by calling the module's AppService."""

    class Handler(BaseHTTPRequestHandler):
        def _respond(self, status: HTTPStatus, allow: str | None = None) -> None:
            self.send_response(status)
            if allow:
                self.send_header("Allow", allow)
            self.send_header("Content-Length", "0")
            self.end_headers()

        def _handle(self, allowed: bool) -> None:
            if urlsplit(self.path).path != HELLO_PATH:
                self._respond(HTTPStatus.NOT_FOUND)
            elif not allowed:
                self._respond(HTTPStatus.METHOD_NOT_ALLOWED, allow="GET,HEAD")
            else:
                module.resolve(AppService).hello()
                self._respond(HTTPStatus.OK)

        def do_GET(self) -> None:
            self._handle(True)

        do_HEAD = do_GET

        def _reject(self) -> None:
            self._handle(False)

        do_POST = do_PUT = do_DELETE = do_PATCH = _reject

    return ThreadingHTTPServer((host, port), Handler)


def main(argv=None) -> int:
    try:
        server = create_server(build_module(), DEFAULT_HOST, DEFAULT_PORT)
    except OSError as exc:
        print(f"failed to listen on {DEFAULT_HOST}:{DEFAULT_PORT}: {exc}", file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            return 0
    return 0
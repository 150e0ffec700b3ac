"""A small dependency-injection container of components, providers and modules."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

_KIND = "dipractice.kind"


class ResolutionError(Exception):
    """Raised when a module cannot be built or an interface cannot be resolved."""


def inject() -> Any:
    """Mark a component field as a component resolved from the module."""
    return dataclasses.field(metadata={_KIND: "inject"})


def provide() -> Any:
    """Mark a component field as a value made by the module's provider."""
    return dataclasses.field(metadata={_KIND: "provide"})


def component(interface: type) -> Callable[[type[T]], type[T]]:
    """Register the decorated class as a component implementing ``interface``."""
    if not isinstance(interface, type):
        raise TypeError(f"interface must be a class, not {interface!r}")

    def decorate(cls: type[T]) -> type[T]:
        if not issubclass(cls, interface):
            raise TypeError(f"{cls.__name__} does not implement {interface.__name__}")
        cls = dataclasses.dataclass(cls, kw_only=True, eq=False)
        cls.__di_interface__ = interface
        return cls

    return decorate


def _name(obj: Any) -> str:
    return getattr(obj, "__name__", repr(obj))


class Module:
    """A built set of components, resolvable by interface."""

    def __init__(self, components, overrides, parameters, providers) -> None:
        self._components: dict[type, type] = components
        self._instances: dict[type, Any] = dict(overrides)
        self._parameters: dict[type, dict[str, Any]] = parameters
        self._providers: dict[type, type] = providers
        self._resolving: list[type] = []

    def resolve(self, interface: type[T]) -> T:
        """Return the single component registered for ``interface``."""
        if interface in self._instances:
            return self._instances[interface]
        if interface not in self._components:
            raise ResolutionError(f"no component is registered for {_name(interface)}")
        if interface in self._resolving:
            cycle = self._resolving[self._resolving.index(interface):] + [interface]
            raise ResolutionError("circular dependency: " + " -> ".join(map(_name, cycle)))
        cls = self._components[interface]
        self._resolving.append(interface)
        try:
            instance = cls(**self._arguments(cls))
        finally:
            self._resolving.pop()
        self._instances[interface] = instance
        return instance

    def provide(self, interface: type[T]) -> T:
        """Return a new value from the provider registered for ``interface``."""
        provider = self._providers.get(interface)
        if provider is None:
            raise ResolutionError(f"no provider is registered for {_name(interface)}")
        return provider().provide(self)

    def _arguments(self, cls: type) -> dict[str, Any]:
        supplied = self._parameters.get(cls, {})
        arguments: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            kind = field.metadata.get(_KIND)
            if kind == "inject":
                arguments[field.name] = self.resolve(field.type)
            elif kind == "provide":
                arguments[field.name] = self.provide(field.type)
            elif field.name in supplied:
                arguments[field.name] = supplied[field.name]
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise ResolutionError(
                    f"parameter {_name(cls)}.{field.name} has no value and no default"
                )
        return arguments


class ModuleBuilder:
    """Collects components, providers, parameters and overrides into a Module."""

    def __init__(self, components: Iterable[type], providers: Iterable[type] = ()) -> None:
        self._components: dict[type, type] = {}
        for cls in components:
            interface = getattr(cls, "__di_interface__", None)
            if interface is None:
                raise TypeError(f"{_name(cls)} is not a component")
            if interface in self._components:
                raise ResolutionError(f"{_name(interface)} has more than one component")
            self._components[interface] = cls
        self._providers: dict[type, type] = {}
        for provider in providers:
            interface = getattr(provider, "interface", None)
            if interface is None:
                raise TypeError(f"{_name(provider)} is not a provider")
            if interface in self._providers:
                raise ResolutionError(f"{_name(interface)} has more than one provider")
            self._providers[interface] = provider
        self._parameters: dict[type, dict[str, Any]] = {}
        self._overrides: dict[type, Any] = {}

    def with_component_parameters(self, component: type, **kwargs: Any) -> ModuleBuilder:
        """Set parameter fields of ``component`` for the module being built."""
        if component not in self._components.values():
            raise ResolutionError(f"{_name(component)} is not a component of this module")
        names = {f.name for f in dataclasses.fields(component) if _KIND not in f.metadata}
        unknown = set(kwargs) - names
        if unknown:
            raise TypeError(
                f"{_name(component)} has no parameters named {', '.join(sorted(unknown))}"
            )
        self._parameters.setdefault(component, {}).update(kwargs)
        return self

    def with_component_override(self, interface: type, instance: Any) -> ModuleBuilder:
        """Use ``instance`` in place of the component registered for ``interface``."""
        if interface not in self._components:
            raise ResolutionError(f"no component is registered for {_name(interface)}")
        self._overrides[interface] = instance
        return self

    def build(self) -> Module:
        """Build every component and return the finished module."""
        module = Module(
            dict(self._components),
            self._overrides,
            {cls: dict(values) for cls, values in self._parameters.items()},
            dict(self._providers),
        )
        for interface in self._components:
            module.resolve(interface)
        return module
"""
RPC method descriptors

Each remote procedure is a sealed RpcMethod subclass declaring its wire name,
how its fields become JSON-RPC params, and the types its success and error
replies decode into. Only classes defined inside this package can subclass
RpcMethod; concrete ones are recorded in the method registry when the class
is created, together with the decoders for their reply types.
"""

import abc
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, NamedTuple

from pydantic import TypeAdapter

SEALED_PACKAGE = __name__.rpartition(".")[0]


class MethodSpec(NamedTuple):
    """Registry entry for one concrete method"""
    method_class: type
    response_adapter: TypeAdapter
    error_adapter: TypeAdapter


_registry: Dict[str, MethodSpec] = {}

# Read-only view, keyed by wire method name
registry: Mapping[str, MethodSpec] = MappingProxyType(_registry)


def _is_sealed_module(module: str) -> bool:
    return module == SEALED_PACKAGE or module.startswith(SEALED_PACKAGE + ".")


def _qualified(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class RpcMethod(abc.ABC):
    """Base class of every request that JsonRpcClient can dispatch

    Concrete subclasses set:
        METHOD_NAME: Wire-level procedure name
        response_type: Type a successful ``result`` decodes into
        error_type: Type a server ``error`` decodes into
    and implement params().
    """

    METHOD_NAME: ClassVar[str]
    response_type: ClassVar[Any]
    error_type: ClassVar[Any]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not _is_sealed_module(cls.__module__):
            raise TypeError(
                f"{cls.__module__}.{cls.__qualname__} cannot subclass RpcMethod: "
                f"methods are only defined in {SEALED_PACKAGE}"
            )

        name = cls.__dict__.get("METHOD_NAME")
        if name is None:
            # Intermediate base without a wire name
            return
        if not isinstance(name, str) or not name:
            raise TypeError(f"{cls.__qualname__}.METHOD_NAME must be a non-empty string")
        for attr in ("response_type", "error_type"):
            if not hasattr(cls, attr):
                raise TypeError(f"{cls.__qualname__} does not declare {attr}")

        existing = _registry.get(name)
        # Re-registration is allowed only for the same class (module reload)
        if existing is not None and _qualified(existing.method_class) != _qualified(cls):
            raise TypeError(
                f"method {name!r} is already declared by {existing.method_class.__qualname__}"
            )
        _registry[name] = MethodSpec(
            method_class=cls,
            response_adapter=TypeAdapter(cls.response_type),
            error_adapter=TypeAdapter(cls.error_type),
        )

    def method_name(self) -> str:
        return type(self).METHOD_NAME

    @abc.abstractmethod
    def params(self) -> Any:
        """Serialize this request into JSON-RPC params

        Returns:
            A JSON-compatible list (positional) or dict (named)

        Raises:
            SerializationError: A field cannot be encoded
        """


def lookup(method: Any) -> MethodSpec:
    """Return the registry entry for a method instance

    Raises:
        TypeError: The object is not a registered RpcMethod
    """
    if not isinstance(method, RpcMethod):
        raise TypeError(f"{type(method).__qualname__} is not an RpcMethod")
    spec = _registry.get(method.method_name())
    if spec is None or spec.method_class is not type(method):
        raise TypeError(f"{type(method).__qualname__} is not a registered RPC method")
    return spec

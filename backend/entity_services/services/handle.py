"""
Service handle returned by the service factory.
"""

from typing import Any, Callable, Dict, Mapping, Tuple


class ServiceHandle:
    """
    Read-only bundle of the operations one entity service exposes.

    Operations are reachable as attributes; anything the entity does not
    expose raises AttributeError.
    """

    __slots__ = ("_service_type", "_operations")

    def __init__(self, service_type: str, operations: Mapping[str, Callable[..., Any]]):
        object.__setattr__(self, "_service_type", service_type)
        object.__setattr__(self, "_operations", dict(operations))

    @property
    def service_type(self) -> str:
        return self._service_type

    @property
    def operations(self) -> Tuple[str, ...]:
        return tuple(self._operations)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._operations[name]
        except KeyError:
            raise AttributeError(
                f'The "{self._service_type}" service has no operation "{name}".'
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Service handles are read-only.")

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._operations))

    def __repr__(self) -> str:
        return f"ServiceHandle({self._service_type!r}, operations={self.operations!r})"

    def as_dict(self) -> Dict[str, Callable[..., Any]]:
        return dict(self._operations)

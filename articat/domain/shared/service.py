from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform(frozen_default=True)
class _ServiceMeta(type):
    """Turns every Service subclass into a frozen dataclass of its collaborators."""

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(frozen=True)(cls)
        return cls


class Service(metaclass=_ServiceMeta):
    """Base class for stateless services.

    State lives in the adapters a service is built with; the service itself
    only holds references, so its fields cannot be reassigned.
    """

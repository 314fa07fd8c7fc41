"""ReactorAllowList — reactors accepted for legacy custom-reactor orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from config.settings import Settings


@dataclass(frozen=True, slots=True)
class ReactorAllowList:
    """Immutable, case-insensitive set of reactor addresses.

    Built once at startup and shared read-only across requests.
    """

    addresses: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, addresses: Iterable[str]) -> ReactorAllowList:
        return cls(frozenset(a.strip().lower() for a in addresses if a.strip()))

    @classmethod
    def from_settings(cls, settings: Settings) -> ReactorAllowList:
        return cls.of(settings.custom_reactor_addresses)

    @property
    def is_empty(self) -> bool:
        return not self.addresses

    def allows(self, reactor: str) -> bool:
        return reactor.lower() in self.addresses

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(sorted(self.addresses))

"""Alias lookup used while filling a DTO."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Self


@dataclass(frozen=True)
class AliasTable:
    """Lookup from external attribute key to inner field name.

    Built from the caller-facing ``field name -> external key`` mapping. When
    several fields claim the same external key, the first one wins.
    """

    by_external_key: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, aliases: Mapping[str, str] | None) -> Self:
        lookup: dict[str, str] = {}
        for field_name, external_key in (aliases or {}).items():
            lookup.setdefault(external_key, field_name)
        return cls(lookup)

    def resolve(self, key: str) -> str:
        """Field name mapped to ``key``, or ``key`` itself when unmapped."""
        return self.by_external_key.get(key, key)

    def __len__(self) -> int:
        return len(self.by_external_key)

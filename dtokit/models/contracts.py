"""Capability contract every DTO exposes."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Self


class DtoContract(ABC):
    """Polymorphic surface shared by all DTO variants."""

    @abstractmethod
    def map(self, aliases: Mapping[str, str]) -> Self:
        """Replace the alias table (field name -> external key)."""

    @abstractmethod
    def fill(self, attributes: Mapping[str, Any], aliases: Mapping[str, str] | None = None) -> Self:
        """Populate declared fields from an untyped attribute set."""

    @abstractmethod
    def to_object(self) -> Self:
        """Return the DTO itself for attribute-style access."""

    @abstractmethod
    def to_array(self, convert_keys_to_snake_case: bool | None = None) -> dict[str, Any]:
        """Export every declared field as a plain mapping."""

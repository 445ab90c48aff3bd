"""Models package exports."""

from dtokit.models.aliases import AliasTable
from dtokit.models.base import Dto
from dtokit.models.contracts import DtoContract
from dtokit.models.setters import field_setter

__all__ = [
    "Dto",
    "DtoContract",
    "AliasTable",
    "field_setter",
]

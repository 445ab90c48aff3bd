"""Data Transfer Objects populated from untyped attribute sets."""

from dtokit.casing import camel_to_snake, snake_to_camel
from dtokit.exceptions import DtoDefinitionError, DtoError
from dtokit.models import AliasTable, Dto, DtoContract, field_setter

__all__ = [
    "Dto",
    "DtoContract",
    "AliasTable",
    "field_setter",
    "snake_to_camel",
    "camel_to_snake",
    "DtoError",
    "DtoDefinitionError",
]

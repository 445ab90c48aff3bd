"""Base DTO with attribute population and export."""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr

from dtokit.casing import camel_to_snake, snake_to_camel
from dtokit.config import settings
from dtokit.models.aliases import AliasTable
from dtokit.models.contracts import DtoContract
from dtokit.models.setters import collect_setters

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Whether a field still counts as unpopulated."""
    return not value


class Dto(BaseModel, DtoContract):
    """Base DTO populated from an untyped attribute set.

    Subclasses declare camelCase fields (with defaults) and, optionally, an
    override setter per field::

        class UserDto(Dto):
            firstName: str | None = None
            email: str | None = None

            def setEmail(self, value):
                self.email = value.lower() if value else None

        user = UserDto({"first_name": "Jo", "email_address": "JO@X.IO"}, {"email": "email_address"})
        user.to_array()  # {"first_name": "Jo", "email": "jo@x.io"}

    Values are stored as given: no validation or coercion happens on fill.
    Keys that match no declared field are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        arbitrary_types_allowed=True,
        validate_assignment=False,
    )

    __dto_setters__: ClassVar[dict[str, str]] = {}

    _pending_aliases: dict[str, str] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        aliases: Mapping[str, str] | None = None,
        /,
        **data: Any,
    ) -> None:
        super().__init__(**data)
        if aliases:
            self.map(aliases)
        if attributes:
            self.fill(attributes)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__dto_setters__ = collect_setters(cls, cls.model_fields)

    def map(self, aliases: Mapping[str, str]) -> Self:
        """Read fields from differently named attributes on the next ``fill``.

        ``aliases`` maps a declared field name to the external key it should be
        read from, e.g. ``{"email": "email_address"}``. The table is used by the
        next ``fill`` only and is then discarded.
        """
        self._pending_aliases = dict(aliases)
        return self

    def fill(self, attributes: Mapping[str, Any], aliases: Mapping[str, str] | None = None) -> Self:
        """Populate the DTO from ``attributes``.

        The supplied attributes are applied first. Every field still empty
        afterwards is then fed through again with its own value, so override
        setters run even for fields the caller left out and can apply defaults.

        Args:
            attributes: External key/value set (snake_case or camelCase keys).
            aliases: Alias table for this call only. Defaults to the table set
                by ``map``.

        Returns:
            The DTO itself.
        """
        table = AliasTable.from_mapping(self._pending_aliases if aliases is None else aliases)
        try:
            applied = self._populate(attributes, table)
            empty = {name: value for name, value in self.to_array(False).items() if is_empty(value)}
            self._populate(empty, table)
        finally:
            self._pending_aliases = {}

        logger.debug(
            f"{type(self).__name__} filled {applied}/{len(attributes)} attributes "
            f"({len(table)} aliases, {len(empty)} empty fields re-applied)"
        )
        return self

    def to_object(self) -> Self:
        return self

    def to_array(self, convert_keys_to_snake_case: bool | None = None) -> dict[str, Any]:
        """Export every declared field with its current value.

        Args:
            convert_keys_to_snake_case: Rewrite ``firstName`` keys as
                ``first_name``. Defaults to ``settings.export_snake_case_keys``.
        """
        if convert_keys_to_snake_case is None:
            convert_keys_to_snake_case = settings.export_snake_case_keys

        properties = {name: getattr(self, name) for name in type(self).model_fields}
        if not convert_keys_to_snake_case:
            return properties
        return {camel_to_snake(name): value for name, value in properties.items()}

    def _populate(self, attributes: Mapping[str, Any], aliases: AliasTable) -> int:
        """Apply one pass of attributes and return how many keys hit a field."""
        fields = type(self).model_fields
        setters = type(self).__dto_setters__
        applied = 0

        for key, value in attributes.items():
            if not isinstance(key, str):
                continue

            name = snake_to_camel(aliases.resolve(key))
            if name not in fields:
                logger.debug(f"{type(self).__name__}: no field for attribute '{key}', skipped")
                continue

            setter = setters.get(name)
            if setter is not None:
                getattr(self, setter)(value)
            else:
                setattr(self, name, value)
            applied += 1

        return applied

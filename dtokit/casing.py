"""Key-name normalization between snake_case and camelCase."""

import re

_WORD_SEPARATOR_RE = re.compile(r"[_ ]")
_INNER_UPPER_RE = re.compile(r"(?<!^)[A-Z]")


def snake_to_camel(value: str) -> str:
    """Convert ``first_name`` (or an already camel ``firstName``) to ``firstName``.

    Only the first letter of each segment is touched, so irregular input is
    normalized best-effort rather than rejected.
    """
    joined = "".join(part[:1].upper() + part[1:] for part in _WORD_SEPARATOR_RE.split(value))
    return joined[:1].lower() + joined[1:]


def camel_to_snake(value: str) -> str:
    """Convert ``firstName`` to ``first_name``."""
    return _INNER_UPPER_RE.sub(r"_\g<0>", value).lower()


def setter_name(field_name: str) -> str:
    """Conventional override-setter method name for a field (``setFirstName``)."""
    return f"set{field_name[:1].upper()}{field_name[1:]}"

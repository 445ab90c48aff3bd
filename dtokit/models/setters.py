"""Override-setter registration for DTO classes.

A field's override setter replaces direct assignment during ``fill``. It is
found either by the ``set<FieldName>`` naming convention or by an explicit
``@field_setter("fieldName")`` marker. Both are resolved once, when the DTO
class is created.
"""

from collections.abc import Callable, Iterable

from dtokit.casing import setter_name
from dtokit.exceptions import DtoDefinitionError

SETTER_MARKER = "__dto_field_setter__"

Setter = Callable[..., None]


def field_setter(field_name: str) -> Callable[[Setter], Setter]:
    """Mark a method as the override setter for ``field_name``.

    Example:
        class UserDto(Dto):
            role: str | None = None

            @field_setter("role")
            def default_role(self, value):
                self.role = value or "member"
    """

    def decorator(func: Setter) -> Setter:
        setattr(func, SETTER_MARKER, field_name)
        return func

    return decorator


def collect_setters(cls: type, field_names: Iterable[str]) -> dict[str, str]:
    """Build the ``field name -> setter method name`` table for a DTO class.

    The most-derived class that provides a setter for a field decides which
    method is used; within one class a marker wins over the naming
    convention. Methods are looked up on the instance at call time, so a
    subclass redefining a marked method is still the one called.

    Raises:
        DtoDefinitionError: If a marked setter targets an undeclared field, or
            one class marks two setters for the same field.
    """
    declared = set(field_names)

    setters: dict[str, str] = {}
    for klass in cls.__mro__:
        marked: dict[str, str] = {}
        for attr, value in vars(klass).items():
            target = getattr(getattr(value, "__func__", value), SETTER_MARKER, None)
            if target is None:
                continue
            if target not in declared:
                raise DtoDefinitionError(
                    f"{cls.__name__}.{attr} sets undeclared field '{target}'",
                    details={"dto": cls.__name__, "method": attr, "field": target},
                )
            if target in marked:
                raise DtoDefinitionError(
                    f"{klass.__name__} declares more than one setter for '{target}'",
                    details={"dto": klass.__name__, "field": target},
                )
            marked[target] = attr

        for name in declared - setters.keys():
            if name in marked:
                setters[name] = marked[name]
            elif setter_name(name) in vars(klass) and callable(getattr(cls, setter_name(name), None)):
                setters[name] = setter_name(name)

    return setters

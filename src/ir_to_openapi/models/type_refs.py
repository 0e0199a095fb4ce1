"""Models for type references carried by the IR."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from ir_to_openapi.models.common import IR_MODEL_CONFIG, Text, none_as_empty_list


class TypeRef(BaseModel):
    """A possibly generic type reference.

    ``base`` is a primitive name, a container name (``List``/``Set``/``Array``)
    or a model name. ``args`` holds the type parameters, empty for
    non-generic types.

    Example:
    -------
        ```json
        {"base": "List", "args": [{"base": "User", "args": []}]}
        ```

    """

    model_config = IR_MODEL_CONFIG

    base: Annotated[Text, Field(default="", description="Base type name")]
    args: Annotated[
        tuple[TypeRef, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=(), description="Ordered type arguments"),
    ]

    def display(self) -> str:
        """Render the reference as source-like text, e.g. ``List<User>``."""
        if not self.args:
            return self.base
        inner = ", ".join(arg.display() for arg in self.args)
        return f"{self.base}<{inner}>"

    @classmethod
    def of(cls, base: str, *args: TypeRef | str) -> TypeRef:
        """Build a reference from a base name and argument references or names.

        Examples
        --------
            >>> TypeRef.of("List", "User").display()
            'List<User>'

        """
        return cls(
            base=base,
            args=tuple(arg if isinstance(arg, TypeRef) else cls(base=arg) for arg in args),
        )

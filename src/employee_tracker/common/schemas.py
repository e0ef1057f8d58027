from __future__ import annotations

from typing import Any, ClassVar, Type, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T", bound="CamelModel")


class CamelModel(BaseModel):
    """Request body base: camelCase on the wire, snake_case in Python.

    Partial-update schemas list columns that may be omitted but never cleared
    in ``non_nullable``; an explicit ``null`` for one of them fails validation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self):
        cleared = [name for name in self.non_nullable if name in self.model_fields_set and getattr(self, name) is None]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self

    @classmethod
    def parse_body(cls: Type[T], payload: Any) -> T:
        return cls.model_validate(payload or {})

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent by the client (for partial updates)."""
        return self.model_dump(exclude_unset=True)

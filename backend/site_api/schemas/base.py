"""Shared schema bases: strict request models and ORM-backed response models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class RequestModel(BaseModel):
    """Request body: unknown fields rejected, strings stripped."""
    model_config = ConfigDict(
        extra="forbid", str_strip_whitespace=True, use_enum_values=True,
    )


class UpdateModel(RequestModel):
    """Partial update: every field optional, explicit null only where the column allows it."""
    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent (partial update payload)."""
        return self.model_dump(exclude_unset=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

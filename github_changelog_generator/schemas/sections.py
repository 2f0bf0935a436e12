"""Pydantic schema for a user-supplied section description."""

from pydantic import BaseModel, ConfigDict, field_validator


class SectionDescriptionModel(BaseModel):
    """Pydantic model for one entry of a custom sections description."""

    model_config = ConfigDict(extra="ignore")

    prefix: str | None = None
    labels: list[str] = []

    @field_validator("labels", mode="before")
    @classmethod
    def none_labels_to_empty(cls, value: object) -> object:
        """Treat a null label list as an empty one."""
        if value is None:
            return []
        return value

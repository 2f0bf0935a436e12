"""Pydantic schemas for already-fetched GitHub issue and pull request records."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ItemKind(str, Enum):
    """Enum for the kind of record being classified."""

    ISSUE = "issue"
    PULL_REQUEST = "pull_request"


class LabelModel(BaseModel):
    """Pydantic model for a label attached to an issue or pull request."""

    model_config = ConfigDict(extra="ignore")

    name: str
    url: str | None = None


class UserModel(BaseModel):
    """Pydantic model for the author of an issue or pull request."""

    model_config = ConfigDict(extra="ignore")

    login: str
    html_url: str | None = None


class ChangelogItem(BaseModel):
    """Pydantic model for an issue or pull request record.

    Records come straight from the GitHub REST API, where pull requests listed
    through the issues endpoint carry a ``pull_request`` object. That marker is
    the only structural difference the changelog cares about, so it is turned
    into the ``kind`` discriminant when the record is validated.
    """

    model_config = ConfigDict(extra="ignore")

    kind: ItemKind = ItemKind.ISSUE
    title: str
    number: int
    html_url: str
    labels: list[LabelModel] = []
    user: UserModel | None = None
    pull_request: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def detect_kind(cls, data: Any) -> Any:
        """Set the kind from the pull request marker unless it was given explicitly."""
        if isinstance(data, dict) and "kind" not in data:
            data = dict(data)
            data["kind"] = ItemKind.PULL_REQUEST if data.get("pull_request") is not None else ItemKind.ISSUE
        if isinstance(data, dict) and data.get("labels") is None:
            data = dict(data)
            data["labels"] = []
        return data

    @property
    def is_pull_request(self) -> bool:
        """Whether this record is a pull request."""
        return self.kind == ItemKind.PULL_REQUEST

    @property
    def label_names(self) -> list[str]:
        """Label names in the order they appear on the record."""
        return [label.name for label in self.labels]

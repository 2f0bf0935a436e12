"""Pydantic schema for the already-fetched input consumed by the CLI."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, field_validator


class TimestampedModel(BaseModel):
    """Base model for records carrying a ``date`` timestamp.

    YAML loaders hand plain dates over as ``datetime.date`` and ISO strings
    without offset parse as naive timestamps. Both are treated as UTC so tags
    and commits always compare with each other.
    """

    date: dt.datetime

    @field_validator("date", mode="before")
    @classmethod
    def date_to_datetime(cls, value: Any) -> Any:
        """Accept a plain date as midnight UTC."""
        if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
            return dt.datetime(value.year, value.month, value.day, tzinfo=dt.timezone.utc)
        return value

    @field_validator("date")
    @classmethod
    def date_as_utc(cls, value: dt.datetime) -> dt.datetime:
        """Give naive timestamps the UTC timezone."""
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value


class TagModel(TimestampedModel):
    """Pydantic model for a git tag and the time of its commit."""

    name: str
    sha: str | None = None


class CommitModel(TimestampedModel):
    """Pydantic model for a commit, used to find the first commit of the history."""

    sha: str


class ReleaseModel(BaseModel):
    """Pydantic model for the issues and pull requests closed in one release.

    Issue and pull request records are kept raw here and validated one by one
    so that a single malformed record can be reported without losing the rest.
    """

    tag: str | None = None
    previous_tag: str | None = None
    issues: list[dict[str, Any]] = []
    pull_requests: list[dict[str, Any]] = []


class ChangelogInputModel(BaseModel):
    """Pydantic model for a full input dump."""

    tags: list[TagModel] = []
    commits: list[CommitModel] = []
    releases: list[ReleaseModel]

"""Resolution of tags to display names, link targets and times."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Protocol

import structlog

from github_changelog_generator.configuration.models import ChangelogConfig
from github_changelog_generator.schemas.changelog_input import CommitModel, TagModel
from github_changelog_generator.utils.constants import UNRELEASED_TAG_LINK

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TagReference:
    """How a tag is shown in an entry header."""

    name: str
    link: str
    time: datetime
    unreleased: bool = False


class TagResolver(Protocol):
    """Protocol for looking up tag times and neighbours."""

    def detect_link_tag_time(self, newer_tag: TagModel | None) -> TagReference:
        """Resolve the name, link target and time of the newer tag of an entry."""
        ...

    def previous_tag(self, tag: TagModel | None) -> TagModel | None:
        """Return the tag released just before the given one."""
        ...

    def first_commit_before(self, time: datetime) -> str | None:
        """Return the sha of the earliest commit at or before the given time."""
        ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StaticTagResolver:
    """Resolves tags from already-fetched tag and commit records."""

    def __init__(
        self,
        tags: list[TagModel],
        config: ChangelogConfig,
        commits: list[CommitModel] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize with tag and commit records and the changelog configuration."""
        self.tags = sorted(tags, key=lambda tag: tag.date, reverse=True)
        self.commits = sorted(commits or [], key=lambda commit: commit.date)
        self.config = config
        self.clock = clock

    def detect_link_tag_time(self, newer_tag: TagModel | None) -> TagReference:
        """Resolve the newer tag of an entry.

        A missing tag stands for the changes since the last tag: it is shown
        as the future release when one is configured, otherwise under the
        unreleased label linking to HEAD.
        """
        if newer_tag is not None:
            return TagReference(name=newer_tag.name, link=newer_tag.name, time=newer_tag.date)

        time = self.clock()
        if self.config.future_release:
            return TagReference(name=self.config.future_release, link=self.config.future_release, time=time)
        return TagReference(name=self.config.unreleased_label, link=UNRELEASED_TAG_LINK, time=time, unreleased=True)

    def previous_tag(self, tag: TagModel | None) -> TagModel | None:
        """Return the newest tag strictly older than the given one.

        For no tag at all (the unreleased entry) this is the newest tag.
        """
        if tag is None:
            return self.tags[0] if self.tags else None
        for candidate in self.tags:
            if candidate.date < tag.date:
                return candidate
        return None

    def first_commit_before(self, time: datetime) -> str | None:
        """Return the sha of the oldest commit made at or before the given time."""
        for commit in self.commits:
            if commit.date <= time:
                return commit.sha
        logger.debug("No commit found before time", time=time.isoformat())
        return None

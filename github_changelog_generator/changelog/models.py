"""Data models for changelog generation."""

from dataclasses import dataclass, field

from github_changelog_generator.schemas.changelog_input import TagModel
from github_changelog_generator.schemas.items import ChangelogItem


@dataclass
class ReleaseEntry:
    """Issues and pull requests closed between a tag and the tag before it.

    A ``tag`` of None stands for the unreleased changes after the newest tag.
    A ``previous_tag`` of None lets the tag resolver pick it.
    """

    tag: TagModel | None = None
    previous_tag: TagModel | None = None
    issues: list[ChangelogItem] = field(default_factory=list)
    pull_requests: list[ChangelogItem] = field(default_factory=list)

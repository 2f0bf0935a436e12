"""Models for changelog configuration shared by the CLI and the generator."""

from typing import Any

from pydantic import BaseModel, Field

from github_changelog_generator.configuration.exceptions import RequiredConfigurationElementError
from github_changelog_generator.utils.constants import (
    ALL_LABELS_MARKER,
    DEFAULT_BREAKING_LABELS,
    DEFAULT_BREAKING_PREFIX,
    DEFAULT_BUG_LABELS,
    DEFAULT_BUG_PREFIX,
    DEFAULT_CHANGELOG_HEADER,
    DEFAULT_DATE_FORMAT,
    DEFAULT_ENHANCEMENT_LABELS,
    DEFAULT_ENHANCEMENT_PREFIX,
    DEFAULT_GITHUB_SITE,
    DEFAULT_ISSUE_LABELS,
    DEFAULT_ISSUE_PREFIX,
    DEFAULT_MERGE_PREFIX,
    DEFAULT_UNRELEASED_LABEL,
)

SectionsDescription = str | dict[str, Any]


class ChangelogConfig(BaseModel):
    """Read-only options controlling how a changelog is classified and rendered."""

    # Repository
    user: str | None = None
    project: str | None = None
    github_site: str = DEFAULT_GITHUB_SITE

    # Document
    header: str = DEFAULT_CHANGELOG_HEADER
    unreleased_label: str = DEFAULT_UNRELEASED_LABEL
    future_release: str | None = None
    date_format: str = DEFAULT_DATE_FORMAT
    release_url: str | None = None
    compare_link: bool = True

    # Sections
    breaking_prefix: str | None = DEFAULT_BREAKING_PREFIX
    breaking_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_BREAKING_LABELS))
    enhancement_prefix: str | None = DEFAULT_ENHANCEMENT_PREFIX
    enhancement_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_ENHANCEMENT_LABELS))
    bug_prefix: str | None = DEFAULT_BUG_PREFIX
    bug_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_BUG_LABELS))
    issue_prefix: str | None = DEFAULT_ISSUE_PREFIX
    issue_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_ISSUE_LABELS))
    merge_prefix: str | None = DEFAULT_MERGE_PREFIX
    configure_sections: SectionsDescription | None = None
    add_sections: SectionsDescription | None = None

    # Which sub-blocks render
    issues: bool = True
    pulls: bool = True
    add_pr_wo_labels: bool = True
    include_merged: bool = True

    # Line formatting
    simple_list: bool = False
    issue_line_labels: list[str] = Field(default_factory=list)
    author: bool = True
    usernames_as_github_logins: bool = False

    @property
    def project_url(self) -> str:
        """Web URL of the project, e.g. https://github.com/owner/repo.

        Raises:
            RequiredConfigurationElementError: If the repository owner or name is not set.
        """
        if not self.user or not self.project:
            raise RequiredConfigurationElementError(name="Repository", cli_name="repo", env_name="REPO")
        return f"{self.github_site}/{self.user}/{self.project}"

    @property
    def configure_sections_enabled(self) -> bool:
        """Whether custom sections replace the default layout."""
        return bool(self.configure_sections)

    @property
    def merged_section_enabled(self) -> bool:
        """Whether pull requests matching no section are listed in their own block."""
        return (self.pulls and self.add_pr_wo_labels) or (self.configure_sections_enabled and self.include_merged)

    @property
    def all_line_labels(self) -> bool:
        """Whether every label of an item is shown on its line."""
        return self.issue_line_labels == [ALL_LABELS_MARKER]

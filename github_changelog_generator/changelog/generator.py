"""Main changelog generation orchestration."""

import structlog

from ..configuration.models import ChangelogConfig
from ..schemas.changelog_input import TagModel
from ..schemas.items import ChangelogItem
from .classifier import classify
from .markdown import MarkdownWriter
from .models import ReleaseEntry
from .renderer import Renderer
from .sections import build_sections
from .tags import TagResolver

logger = structlog.get_logger(__name__)


class ChangelogGenerator:
    """Builds changelog entries from already-fetched issues and pull requests.

    Each entry is generated in its own pass: sections are built fresh from the
    configuration, filled by the classifier and handed to the renderer. The
    generator keeps no section state between passes, so one instance can
    render any number of entries.
    """

    def __init__(self, config: ChangelogConfig, tag_resolver: TagResolver) -> None:
        """Initialize with the changelog configuration and a tag resolver.

        Args:
            config: Options controlling sections and formatting
            tag_resolver: Collaborator resolving tag names, links and times
        """
        self.config = config
        self.tag_resolver = tag_resolver
        self.renderer = Renderer(config)

    def create_entry_for_tag(
        self,
        pull_requests: list[ChangelogItem],
        issues: list[ChangelogItem],
        newer_tag: TagModel | None,
        older_tag: TagModel | None = None,
    ) -> str:
        """Generate the entry for one tag, header and body.

        Args:
            pull_requests: Pull requests of the entry. Left holding only the
                pull requests that matched no section.
            issues: Issues of the entry
            newer_tag: Tag of the entry, or None for unreleased changes
            older_tag: Tag the entry starts from. When None, the first commit
                of the history stands in for it in the compare link.

        Returns:
            Markdown text of the entry

        Raises:
            ConfigParseError: If a custom sections description is malformed
        """
        newer = self.tag_resolver.detect_link_tag_time(newer_tag)

        if older_tag is None:
            older_tag_link = self.tag_resolver.first_commit_before(newer.time)
        else:
            older_tag_link = older_tag.name

        sections = build_sections(self.config)
        if self.config.issues:
            classify(sections, issues, pull_requests)

        logger.info(
            "Generating changelog entry",
            tag=newer.name,
            older=older_tag_link,
            issues=len(issues),
            residual_pull_requests=len(pull_requests),
        )
        return self.renderer.render(sections, pull_requests, newer, older_tag_link)

    def compound_changelog(self, releases: list[ReleaseEntry]) -> str:
        """Generate the full document for releases given newest first."""
        writer = MarkdownWriter(self.config.header)
        entries: list[str] = []
        for release in releases:
            previous_tag = release.previous_tag
            if previous_tag is None:
                previous_tag = self.tag_resolver.previous_tag(release.tag)
            entries.append(self.create_entry_for_tag(release.pull_requests, release.issues, release.tag, previous_tag))
        return writer.compose(entries)

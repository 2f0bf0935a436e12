"""Renders classified sections into the Markdown text of one changelog entry."""

import structlog
from structlog.stdlib import BoundLogger

from github_changelog_generator.changelog.formatter import LineFormatter
from github_changelog_generator.changelog.section import Section
from github_changelog_generator.changelog.tags import TagReference
from github_changelog_generator.configuration.models import ChangelogConfig
from github_changelog_generator.schemas.items import ChangelogItem
from github_changelog_generator.utils.constants import MERGED_SECTION_NAME

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore


class Renderer:
    """Turns populated sections into an entry with header, sections and merged block.

    Every block ends with its own blank line, so blocks are simply concatenated.
    """

    def __init__(self, config: ChangelogConfig, formatter: LineFormatter | None = None) -> None:
        """Initialize with the changelog configuration."""
        self.config = config
        self.formatter = formatter or LineFormatter(config)

    def release_url(self, tag_link: str) -> str:
        """URL the entry title links to."""
        if self.config.release_url:
            return self.config.release_url.replace("%s", tag_link)
        return f"{self.config.project_url}/tree/{tag_link}"

    def generate_header(self, newer_tag: TagReference, older_tag_link: str | None) -> str:
        """Title line with link and date, plus the compare link when enabled.

        Args:
            newer_tag (TagReference): Tag the entry is for.
            older_tag_link (str | None): Tag name or commit sha the entry starts from.
        """
        header = ""
        release_url = self.release_url(newer_tag.link)
        if newer_tag.unreleased:
            header += f"## [{newer_tag.name}]({release_url})\n\n"
        else:
            time_string = newer_tag.time.strftime(self.config.date_format)
            header += f"## [{newer_tag.name}]({release_url}) ({time_string})\n\n"

        if self.config.compare_link and older_tag_link:
            header += f"[Full Changelog]({self.config.project_url}/compare/{older_tag_link}...{newer_tag.link})\n\n"

        return header

    def generate_sub_section(self, items: list[ChangelogItem], prefix: str | None) -> str:
        """Prefix line and one list line per item; nothing for an empty section."""
        if not items:
            return ""

        log = ""
        if not self.config.simple_list:
            log += f"{prefix or ''}\n\n"
        for item in items:
            log += f"- {self.formatter.format_line(item)}\n"
        log += "\n"
        return log

    def sections_to_log(self, sections: list[Section]) -> str:
        """Render each section in its defined order."""
        return "".join(self.generate_sub_section(section.issues, section.prefix) for section in sections)

    def merged_section_to_log(self, pull_requests: list[ChangelogItem]) -> str:
        """Render the pull requests that matched no section."""
        merged = Section(name=MERGED_SECTION_NAME, prefix=self.config.merge_prefix, labels=[], issues=pull_requests)
        return self.generate_sub_section(merged.issues, merged.prefix)

    def generate_body(self, sections: list[Section], residual_pull_requests: list[ChangelogItem]) -> str:
        """Sections followed by the merged block when it is enabled."""
        body = self.sections_to_log(sections)
        if self.config.merged_section_enabled:
            body += self.merged_section_to_log(residual_pull_requests)
        return body

    def render(
        self,
        sections: list[Section],
        residual_pull_requests: list[ChangelogItem],
        newer_tag: TagReference,
        older_tag_link: str | None,
    ) -> str:
        """Render a full entry: header then body."""
        content = self.generate_header(newer_tag, older_tag_link)
        content += self.generate_body(sections, residual_pull_requests)
        logger.debug("Rendered changelog entry", tag=newer_tag.name, length=len(content))
        return content


def render(
    sections: list[Section],
    residual_pull_requests: list[ChangelogItem],
    newer_tag: TagReference,
    older_tag_link: str | None,
    config: ChangelogConfig,
) -> str:
    """Render a full entry with the given configuration."""
    return Renderer(config).render(sections, residual_pull_requests, newer_tag, older_tag_link)

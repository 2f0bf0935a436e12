"""Formats a single issue or pull request as one Markdown list line."""

from github_changelog_generator.configuration.models import ChangelogConfig
from github_changelog_generator.schemas.items import ChangelogItem, LabelModel
from github_changelog_generator.utils.constants import MARKDOWN_ESCAPED_CHARACTERS, NULL_USER_MARKER
from github_changelog_generator.utils.github import web_url_for_label


def escape_markdown(text: str) -> str:
    """Escape characters so Markdown shows the text literally.

    Backslashes are doubled before anything else, otherwise the backslashes
    added for the other characters would be doubled as well.
    """
    text = text.replace("\\", "\\\\")
    for char in MARKDOWN_ESCAPED_CHARACTERS:
        text = text.replace(char, f"\\{char}")
    return text


class LineFormatter:
    """Renders issues and pull requests according to the formatting options.

    Example output:
        Add coveralls integration [\\#223](https://github.com/owner/repo/pull/223) (@octocat)
    """

    def __init__(self, config: ChangelogConfig) -> None:
        """Initialize with the changelog configuration."""
        self.config = config

    def format_line(self, item: ChangelogItem) -> str:
        """Return the line for an item, without list marker or newline."""
        line = f"{escape_markdown(item.title)} [\\#{item.number}]({item.html_url})"
        if self.config.issue_line_labels:
            line += self.line_labels_for(item)
        return self.with_user(line, item)

    def line_labels_for(self, item: ChangelogItem) -> str:
        """Badges for the labels selected by issue_line_labels."""
        if self.config.all_line_labels:
            labels = item.labels
        else:
            labels = [label for label in item.labels if label.name in self.config.issue_line_labels]
        return "".join(self._label_badge(label) for label in labels)

    @staticmethod
    def _label_badge(label: LabelModel) -> str:
        if label.url is None:
            return f" [{label.name}]"
        return f" [[{label.name}]({web_url_for_label(label.url)})]"

    def with_user(self, line: str, item: ChangelogItem) -> str:
        """Append the author of a pull request when author attribution is on."""
        if not self.config.author or not item.is_pull_request:
            return line

        user = item.user
        if user is None:
            return f"{line} ({NULL_USER_MARKER})"

        if self.config.usernames_as_github_logins:
            return f"{line} (@{user.login})"
        profile_url = user.html_url or f"{self.config.github_site}/{user.login}"
        return f"{line} ([{user.login}]({profile_url}))"


def format_line(item: ChangelogItem, config: ChangelogConfig) -> str:
    """Format one item with the given configuration."""
    return LineFormatter(config).format_line(item)

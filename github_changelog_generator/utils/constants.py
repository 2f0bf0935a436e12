"""Shared constants used across the application."""

# Changelog Defaults
# ------------------

DEFAULT_GITHUB_SITE = "https://github.com"
"""Web host used to build project, tree and compare links."""

DEFAULT_CHANGELOG_HEADER = "# Changelog"
"""Default header placed at the top of a generated changelog document."""

DEFAULT_UNRELEASED_LABEL = "Unreleased"
"""Display name for changes that are not yet part of a tag."""

UNRELEASED_TAG_LINK = "HEAD"
"""Link target used for the unreleased pseudo-tag."""

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
"""strftime format for the release date shown next to each entry title."""

DEFAULT_BREAKING_PREFIX = "**Breaking changes:**"
DEFAULT_BREAKING_LABELS = ["backwards-incompatible", "breaking"]

DEFAULT_ENHANCEMENT_PREFIX = "**Implemented enhancements:**"
DEFAULT_ENHANCEMENT_LABELS = ["enhancement", "Enhancement", "Type: Enhancement"]

DEFAULT_BUG_PREFIX = "**Fixed bugs:**"
DEFAULT_BUG_LABELS = ["bug", "Bug", "Type: Bug"]

DEFAULT_ISSUE_PREFIX = "**Closed issues:**"
DEFAULT_ISSUE_LABELS: list[str] = []

DEFAULT_MERGE_PREFIX = "**Merged pull requests:**"

# Section names
# -------------

ISSUES_SECTION_NAME = "issues"
"""Name of the section that collects issues matching no other section."""

MERGED_SECTION_NAME = "merged"
"""Name of the synthetic section listing pull requests matching no section."""

# Line formatting
# ---------------

MARKDOWN_ESCAPED_CHARACTERS = ["<", ">", "*", "_", "(", ")", "[", "]", "#"]
"""Characters in item titles that are escaped so Markdown renders them literally."""

ALL_LABELS_MARKER = "ALL"
"""Value of issue_line_labels that shows every label of an item."""

NULL_USER_MARKER = "{Null user}"
"""Placeholder shown when a pull request has no resolvable author."""

LABEL_API_URL_SEGMENT = "api.github.com/repos"
LABEL_WEB_URL_SEGMENT = "github.com"

"""Utility modules for shared functionality."""

from .constants import (
    ALL_LABELS_MARKER,
    DEFAULT_CHANGELOG_HEADER,
    ISSUES_SECTION_NAME,
    MARKDOWN_ESCAPED_CHARACTERS,
    MERGED_SECTION_NAME,
)
from .github import split_repository_in_configuration, web_url_for_label

__all__ = [
    "ALL_LABELS_MARKER",
    "DEFAULT_CHANGELOG_HEADER",
    "ISSUES_SECTION_NAME",
    "MARKDOWN_ESCAPED_CHARACTERS",
    "MERGED_SECTION_NAME",
    "split_repository_in_configuration",
    "web_url_for_label",
]

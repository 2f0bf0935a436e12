"""Changelog classification and rendering module."""

from .classifier import classify
from .formatter import LineFormatter, escape_markdown, format_line
from .generator import ChangelogGenerator
from .markdown import MarkdownWriter
from .models import ReleaseEntry
from .renderer import Renderer, render
from .section import Section, SectionContext
from .sections import build_sections, default_sections, parse_sections
from .tags import StaticTagResolver, TagReference, TagResolver

__all__ = [
    "Section",
    "SectionContext",
    "ReleaseEntry",
    "parse_sections",
    "default_sections",
    "build_sections",
    "classify",
    "LineFormatter",
    "escape_markdown",
    "format_line",
    "Renderer",
    "render",
    "TagReference",
    "TagResolver",
    "StaticTagResolver",
    "MarkdownWriter",
    "ChangelogGenerator",
]

"""Builds the ordered list of changelog sections from configuration.

Sections come from three places: the built-in default layout, a description
that replaces it (``configure_sections``), or a description appended after it
(``add_sections``). Descriptions map a section name to its prefix and labels,
either as a mapping or as JSON/YAML text.
"""

from typing import Any

import structlog
from pydantic import ValidationError
from ruamel.yaml.error import YAMLError
from structlog.stdlib import BoundLogger

from github_changelog_generator.changelog.section import Section
from github_changelog_generator.configuration.exceptions import ConfigParseError
from github_changelog_generator.configuration.models import ChangelogConfig, SectionsDescription
from github_changelog_generator.schemas.sections import SectionDescriptionModel
from github_changelog_generator.utils.yaml import load_yaml_string

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore


def parse_sections(sections_desc: SectionsDescription) -> list[Section]:
    """Turn a sections description into Section objects, in description order.

    Args:
        sections_desc (str | dict[str, Any]): Text or mapping of section name to
            an object with ``prefix`` and ``labels``.

    Raises:
        ConfigParseError: If the text does not parse, is not a mapping, or an
            entry is not a prefix/labels object.

    Returns:
        list[Section]: One empty section per top-level key.
    """
    if isinstance(sections_desc, str):
        try:
            parsed: Any = load_yaml_string(sections_desc)
        except YAMLError as exc:
            logger.error("Failed to parse sections description", error=str(exc))
            raise ConfigParseError("There was a problem parsing your JSON string for sections", str(exc)) from exc
    else:
        parsed = sections_desc

    if not isinstance(parsed, dict):
        raise ConfigParseError(
            "Sections description must map section names to prefix and labels",
            f"got {type(parsed).__name__}",
        )

    sections: list[Section] = []
    for name, value in parsed.items():
        try:
            description = SectionDescriptionModel.model_validate(value)
        except ValidationError as exc:
            logger.error("Invalid section description", section=str(name), error=exc.errors())
            raise ConfigParseError(f"Invalid description for section '{name}'", str(exc)) from exc
        sections.append(Section(name=str(name), prefix=description.prefix, labels=list(description.labels)))

    logger.debug("Parsed sections description", sections=[section.name for section in sections])
    return sections


def default_sections(config: ChangelogConfig) -> list[Section]:
    """Default layout: breaking, enhancements, bugs and the issues catch-all."""
    return [
        Section(name="breaking", prefix=config.breaking_prefix, labels=list(config.breaking_labels)),
        Section(name="enhancements", prefix=config.enhancement_prefix, labels=list(config.enhancement_labels)),
        Section(name="bugs", prefix=config.bug_prefix, labels=list(config.bug_labels)),
        Section(name="issues", prefix=config.issue_prefix, labels=list(config.issue_labels)),
    ]


def build_sections(config: ChangelogConfig) -> list[Section]:
    """Build a fresh list of sections for one generation pass."""
    if config.configure_sections:
        sections = parse_sections(config.configure_sections)
        mode = "configure"
    elif config.add_sections:
        sections = default_sections(config) + parse_sections(config.add_sections)
        mode = "add"
    else:
        sections = default_sections(config)
        mode = "default"
    logger.debug("Built sections", mode=mode, sections=[section.name for section in sections])
    return sections

"""Sections of a changelog entry and the per-pass lookup index over them."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from github_changelog_generator.schemas.items import ChangelogItem


@dataclass
class Section:
    """A named bucket of classified items rendered under a common prefix."""

    name: str
    prefix: str | None = None
    labels: list[str] = field(default_factory=list)
    issues: list[ChangelogItem] = field(default_factory=list)


class SectionContext:
    """Ordered sections of one generation pass plus lookups by label and by name.

    The context owns the section list. Lookups by name go through positions in
    that list, so a section fetched by name is always the very object iterated
    when rendering. A context is built for a single pass and must not be
    shared between passes.
    """

    def __init__(self, sections: list[Section]) -> None:
        """Index the given sections in their defined order."""
        self.sections = sections
        self.label_map = self._build_label_map(sections)
        self._positions = self._build_positions(sections)

    @staticmethod
    def _build_label_map(sections: list[Section]) -> dict[str, str]:
        # Later sections overwrite earlier ones for the same label.
        label_to_section: dict[str, str] = {}
        for section in sections:
            for label in section.labels:
                label_to_section[label] = section.name
        return label_to_section

    @staticmethod
    def _build_positions(sections: list[Section]) -> dict[str, int]:
        positions: dict[str, int] = {}
        for position, section in enumerate(sections):
            positions[section.name] = position
        return positions

    @property
    def section_map(self) -> dict[str, Section]:
        """Mapping of section name to section."""
        return {name: self.sections[position] for name, position in self._positions.items()}

    def get(self, name: str) -> Section | None:
        """Return the section with the given name, if any."""
        position = self._positions.get(name)
        if position is None:
            return None
        return self.sections[position]

    def section_for_label(self, label: str) -> Section | None:
        """Return the section a label routes to, if any."""
        name = self.label_map.get(label)
        if name is None:
            return None
        return self.get(name)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

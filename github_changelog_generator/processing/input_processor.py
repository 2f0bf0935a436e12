"""Handles reading and validating an already-fetched changelog input dump.

This module provides the InputProcessor class, which loads tags, commits and
per-release issues and pull requests from a YAML or JSON file, validates every
record with Pydantic, and turns the result into release entries ready for the
changelog generator. Validation errors are collected across the whole file.
All logging is performed using structlog.
"""

from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from structlog.stdlib import BoundLogger

from github_changelog_generator.changelog.models import ReleaseEntry
from github_changelog_generator.processing.exceptions import InputProcessingError
from github_changelog_generator.schemas.changelog_input import ChangelogInputModel, ReleaseModel, TagModel
from github_changelog_generator.schemas.items import ChangelogItem, ItemKind
from github_changelog_generator.utils.yaml import load_yaml_file

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore


class InputProcessor:
    """Loads and validates a changelog input dump.

    The dump is expected to have a top-level 'releases' list and, optionally,
    'tags' and 'commits' lists used for tag resolution.
    """

    def __init__(self, raise_on_error: bool = True) -> None:
        """Initialize InputProcessor.

        Args:
            raise_on_error (bool): Whether to raise an InputProcessingError on validation errors.
        """
        self.raise_on_error = raise_on_error

    def load_input_model(self, path: str | Path) -> ChangelogInputModel:
        """Load and validate the top-level structure of a dump."""
        errors: list[dict[str, Any]] = []
        data = self._load_file(str(path), errors)
        if data is None:
            raise InputProcessingError(errors)
        try:
            return ChangelogInputModel.model_validate(data)
        except ValidationError as ve:
            logger.error("Validation error for input file", file=str(path), error=ve.errors())
            raise InputProcessingError([{"file": str(path), "error": ve.errors()}]) from ve

    def load_releases(self, path: str | Path) -> tuple[ChangelogInputModel, list[ReleaseEntry]]:
        """Load a dump and validate every issue and pull request record.

        Returns:
            tuple[ChangelogInputModel, list[ReleaseEntry]]: The raw model, for its
            tags and commits, and one release entry per 'releases' item.
        """
        model = self.load_input_model(path)
        tags_by_name = {tag.name: tag for tag in model.tags}
        errors: list[dict[str, Any]] = []
        releases: list[ReleaseEntry] = []
        for release_index, release in enumerate(model.releases):
            releases.append(
                ReleaseEntry(
                    tag=self._resolve_tag(release.tag, "tag", tags_by_name, str(path), release_index, errors),
                    previous_tag=self._resolve_tag(release.previous_tag, "previous_tag", tags_by_name, str(path), release_index, errors),
                    issues=self._extract_items(release, "issues", None, str(path), release_index, errors),
                    pull_requests=self._extract_items(release, "pull_requests", ItemKind.PULL_REQUEST, str(path), release_index, errors),
                )
            )
        if errors:
            logger.error("One or more errors occurred during input processing", errors=errors)
            if self.raise_on_error:
                raise InputProcessingError(errors)
        logger.info("Loaded changelog input", file=str(path), releases=len(releases), tags=len(model.tags))
        return model, releases

    def _load_file(self, path: str, errors: list[dict[str, Any]]) -> dict[str, Any] | None:
        try:
            data = load_yaml_file(Path(path))
        except Exception as e:
            logger.error("Failed to parse input file", path=path, error=str(e))
            errors.append({"file": path, "error": str(e)})
            return None
        if not isinstance(data, dict):
            logger.error("Input file is not a dictionary", path=path)
            errors.append({"file": path, "error": "Input file is not a dictionary"})
            return None
        return data

    def _resolve_tag(
        self,
        name: str | None,
        field: str,
        tags_by_name: dict[str, TagModel],
        path: str,
        release_index: int,
        errors: list[dict[str, Any]],
    ) -> TagModel | None:
        if name is None:
            return None
        tag = tags_by_name.get(name)
        if tag is None:
            logger.error("Release refers to an unknown tag", file=path, release_index=release_index, field=field, tag=name)
            errors.append({"file": path, "release_index": release_index, "error": f"Unknown {field} '{name}'"})
        return tag

    def _extract_items(
        self,
        release: ReleaseModel,
        field: str,
        kind: ItemKind | None,
        path: str,
        release_index: int,
        errors: list[dict[str, Any]],
    ) -> list[ChangelogItem]:
        records: list[dict[str, Any]] = getattr(release, field)
        items: list[ChangelogItem] = []
        for idx, record in enumerate(records):
            # Issue listings may contain pull requests; their marker decides the kind.
            data = record if kind is None else {**record, "kind": kind}
            try:
                items.append(ChangelogItem.model_validate(data))
            except ValidationError as ve:
                logger.error(
                    "Validation error for record",
                    file=path,
                    release_index=release_index,
                    field=field,
                    record_index=idx,
                    error=ve.errors(),
                )
                errors.append({"file": path, "release_index": release_index, "field": field, "record_index": idx, "error": ve.errors()})
        return items

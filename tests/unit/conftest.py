"""Fixtures for unit tests."""

from typing import Callable, Generator

import pytest
import structlog

from github_changelog_generator.schemas.items import ChangelogItem, ItemKind

ItemFactory = Callable[..., ChangelogItem]


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


def _make_item(kind: ItemKind, title: str, labels: list[str], number: int, user: dict[str, str] | None) -> ChangelogItem:
    record: dict[str, object] = {
        "title": title,
        "number": number,
        "html_url": f"https://github.com/owner/repo/{'pull' if kind == ItemKind.PULL_REQUEST else 'issues'}/{number}",
        "labels": [{"name": name, "url": f"https://api.github.com/repos/owner/repo/labels/{name}"} for name in labels],
        "user": user,
    }
    if kind == ItemKind.PULL_REQUEST:
        record["pull_request"] = {"url": f"https://api.github.com/repos/owner/repo/pulls/{number}"}
    return ChangelogItem.model_validate(record)


@pytest.fixture
def make_issue() -> ItemFactory:
    """Factory for issue records titled 'issue <title>'."""

    def factory(title: str, labels: list[str] | None = None, number: int = 1, user: dict[str, str] | None = None) -> ChangelogItem:
        return _make_item(ItemKind.ISSUE, f"issue {title}", labels or [], number, user)

    return factory


@pytest.fixture
def make_pr() -> ItemFactory:
    """Factory for pull request records titled 'pr <title>'."""

    def factory(title: str, labels: list[str] | None = None, number: int = 1, user: dict[str, str] | None = None) -> ChangelogItem:
        return _make_item(ItemKind.PULL_REQUEST, f"pr {title}", labels or [], number, user)

    return factory

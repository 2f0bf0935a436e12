"""Assigns issues and pull requests to changelog sections by their labels."""

import structlog
from structlog.stdlib import BoundLogger

from github_changelog_generator.changelog.section import Section, SectionContext
from github_changelog_generator.schemas.items import ChangelogItem
from github_changelog_generator.utils.constants import ISSUES_SECTION_NAME

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore


def find_section(context: SectionContext, item: ChangelogItem) -> Section | None:
    """Return the section of the first label on the item that routes anywhere.

    Labels are scanned in the order they appear on the item, so an item
    labelled ``[A, B]`` lands in A's section even when B's section is defined
    first. Labels that route nowhere are skipped.
    """
    for label in item.label_names:
        section = context.section_for_label(label)
        if section is not None:
            return section
    return None


def classify_issues(context: SectionContext, issues: list[ChangelogItem]) -> int:
    """Append each issue to its section, falling back to the issues catch-all.

    Returns:
        int: Number of issues dropped because nothing captured them.
    """
    catch_all = context.get(ISSUES_SECTION_NAME)
    dropped = 0
    for issue in issues:
        section = find_section(context, issue)
        if section is None:
            section = catch_all
        if section is None:
            logger.debug("Issue matches no section and there is no catch-all", number=issue.number)
            dropped += 1
            continue
        section.issues.append(issue)
    return dropped


def classify_pull_requests(context: SectionContext, pull_requests: list[ChangelogItem]) -> None:
    """Append each pull request to its section and remove it from the caller's list.

    Pull requests have no catch-all. After this call ``pull_requests`` holds
    only the pull requests that matched no section, in their original order.
    """
    matched: set[int] = set()
    for pull_request in pull_requests:
        section = find_section(context, pull_request)
        if section is None:
            continue
        section.issues.append(pull_request)
        matched.add(id(pull_request))
    pull_requests[:] = [pull_request for pull_request in pull_requests if id(pull_request) not in matched]


def classify(sections: list[Section], issues: list[ChangelogItem], pull_requests: list[ChangelogItem]) -> list[Section]:
    """Sort issues, then pull requests, into sections.

    Args:
        sections (list[Section]): Freshly built sections for this pass, in
            defined order. Their ``issues`` lists are filled in place.
        issues (list[ChangelogItem]): Issues in input order. Not modified.
        pull_requests (list[ChangelogItem]): Pull requests in input order.
            Modified in place to contain only the residual pull requests.

    Returns:
        list[Section]: The same sections, now populated, in defined order.
    """
    context = SectionContext(sections)
    pull_request_count = len(pull_requests)
    dropped = classify_issues(context, issues)
    classify_pull_requests(context, pull_requests)
    logger.debug(
        "Classified items into sections",
        issues=len(issues),
        dropped_issues=dropped,
        pull_requests=pull_request_count,
        residual_pull_requests=len(pull_requests),
        sections={section.name: len(section.issues) for section in context},
    )
    return context.sections

"""Reconciles configuration between CLI arguments and environment variables."""

from typing import Any

import structlog

from github_changelog_generator.configuration.env import Settings
from github_changelog_generator.configuration.exceptions import RequiredConfigurationElementError
from github_changelog_generator.configuration.models import ChangelogConfig
from github_changelog_generator.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def reconcile_changelog_configuration(
    cli_repo: str | None,
    cli_github_site: str | None,
    settings: Settings | None = None,
    **options: Any,
) -> ChangelogConfig:
    """Builds the changelog configuration from CLI arguments and environment variables.

    CLI arguments take precedence over environment variables. Options left as
    None on the command line fall back to the ChangelogConfig defaults.

    Args:
        cli_repo (str | None): Repository in 'owner/repo' format from the CLI.
        cli_github_site (str | None): GitHub web host from the CLI.
        settings (Settings | None): Environment settings; loaded when not given.
        **options: Any other ChangelogConfig field.

    Raises:
        RequiredConfigurationElementError: If no repository is configured.
        ValueError: If the repository is not in 'owner/repo' format.

    Returns:
        ChangelogConfig: The reconciled configuration.
    """
    if settings is None:
        settings = Settings()

    repo = cli_repo or settings.REPO
    if not repo:
        raise RequiredConfigurationElementError(name="Repository", cli_name="repo", env_name="REPO")
    user, project = split_repository_in_configuration(repo)

    github_site = (cli_github_site or settings.GITHUB_SITE).rstrip("/")

    provided = {name: value for name, value in options.items() if value is not None}
    config = ChangelogConfig(user=user, project=project, github_site=github_site, **provided)
    logger.debug("Reconciled changelog configuration", user=user, project=project, github_site=github_site, options=sorted(provided))
    return config

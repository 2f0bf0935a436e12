"""Contains utility functions for GitHub repository references."""

from github_changelog_generator.utils.constants import LABEL_API_URL_SEGMENT, LABEL_WEB_URL_SEGMENT


def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("Changelog generation requires repo in config.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def web_url_for_label(api_url: str) -> str:
    """Convert a label's REST API URL into the URL of its page on the web UI."""
    return api_url.replace(LABEL_API_URL_SEGMENT, LABEL_WEB_URL_SEGMENT, 1)

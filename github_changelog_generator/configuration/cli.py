"""Defines the Command Line Interface (CLI) using Typer."""

import logging
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_changelog_generator.changelog.generator import ChangelogGenerator
from github_changelog_generator.changelog.tags import StaticTagResolver
from github_changelog_generator.configuration.env import Settings
from github_changelog_generator.configuration.exceptions import ConfigParseError, RequiredConfigurationElementError
from github_changelog_generator.configuration.reconcile import reconcile_changelog_configuration
from github_changelog_generator.processing.exceptions import InputProcessingError
from github_changelog_generator.processing.input_processor import InputProcessor

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


def configure_logging(debug: bool) -> None:
    """Send structlog output to stderr at INFO, or DEBUG when debugging."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def split_labels(labels: str | None) -> list[str] | None:
    """Parse a comma-separated label list; None when the option was not given."""
    if labels is None:
        return None
    return [label.strip() for label in labels.split(",") if label.strip()]


@typer_app.callback()
def main_callback() -> None:
    """Generate changelogs from already-fetched GitHub issues and pull requests."""


@typer_app.command(name="generate")
def generate_cli(
    input_path: Annotated[Path, Argument(envvar="INPUT_PATH", help="Path to the YAML or JSON dump of tags, commits, issues and pull requests.")],
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository name (owner/repo).")] = None,
    github_site: Annotated[str | None, Option(envvar="GITHUB_SITE", help="GitHub web host used for links.")] = None,
    output: Annotated[Path | None, Option("--output", "-o", envvar="OUTPUT_FILE", help="File to write the changelog to. Defaults to stdout.")] = None,
    header: Annotated[str | None, Option(envvar="CHANGELOG_HEADER", help="Header placed at the top of the document.")] = None,
    configure_sections: Annotated[
        str | None, Option(envvar="CONFIGURE_SECTIONS", help="JSON/YAML sections description replacing the default sections.")
    ] = None,
    add_sections: Annotated[str | None, Option(envvar="ADD_SECTIONS", help="JSON/YAML sections description appended to the default sections.")] = None,
    breaking_prefix: Annotated[str | None, Option(help="Prefix of the breaking changes section.")] = None,
    breaking_labels: Annotated[str | None, Option(help="Comma-separated labels of the breaking changes section.")] = None,
    enhancement_prefix: Annotated[str | None, Option(help="Prefix of the enhancements section.")] = None,
    enhancement_labels: Annotated[str | None, Option(help="Comma-separated labels of the enhancements section.")] = None,
    bug_prefix: Annotated[str | None, Option(help="Prefix of the bugs section.")] = None,
    bug_labels: Annotated[str | None, Option(help="Comma-separated labels of the bugs section.")] = None,
    issue_prefix: Annotated[str | None, Option(help="Prefix of the closed issues section.")] = None,
    issue_labels: Annotated[str | None, Option(help="Comma-separated labels of the closed issues section.")] = None,
    merge_prefix: Annotated[str | None, Option(help="Prefix of the merged pull requests section.")] = None,
    issue_line_labels: Annotated[str | None, Option(help="Comma-separated labels to show on each line, or ALL.")] = None,
    date_format: Annotated[str | None, Option(help="strftime format of release dates.")] = None,
    release_url: Annotated[str | None, Option(help="Release URL template; %s is replaced by the tag.")] = None,
    unreleased_label: Annotated[str | None, Option(help="Title of the unreleased entry.")] = None,
    future_release: Annotated[str | None, Option(help="Show unreleased changes under this upcoming tag.")] = None,
    compare_link: Annotated[bool, Option(help="Add a Full Changelog compare link to each entry.")] = True,
    simple_list: Annotated[bool, Option(help="List items without section prefixes.")] = False,
    issues: Annotated[bool, Option(help="Include sections of issues and labelled pull requests.")] = True,
    pulls: Annotated[bool, Option(help="Include pull requests.")] = True,
    add_pr_wo_labels: Annotated[bool, Option(help="List pull requests matching no section under the merge prefix.")] = True,
    include_merged: Annotated[bool, Option(help="With --configure-sections, list pull requests matching no section.")] = True,
    author: Annotated[bool, Option(help="Add the author of each pull request.")] = True,
    usernames_as_github_logins: Annotated[bool, Option(help="Show authors as @login mentions.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Generates a changelog from an already-fetched dump of issues and pull requests."""
    settings = Settings()
    configure_logging(debug or settings.DEBUG)

    try:
        config = reconcile_changelog_configuration(
            cli_repo=repo,
            cli_github_site=github_site,
            settings=settings,
            header=header,
            configure_sections=configure_sections,
            add_sections=add_sections,
            breaking_prefix=breaking_prefix,
            breaking_labels=split_labels(breaking_labels),
            enhancement_prefix=enhancement_prefix,
            enhancement_labels=split_labels(enhancement_labels),
            bug_prefix=bug_prefix,
            bug_labels=split_labels(bug_labels),
            issue_prefix=issue_prefix,
            issue_labels=split_labels(issue_labels),
            merge_prefix=merge_prefix,
            issue_line_labels=split_labels(issue_line_labels),
            date_format=date_format,
            release_url=release_url,
            unreleased_label=unreleased_label,
            future_release=future_release,
            compare_link=compare_link,
            simple_list=simple_list,
            issues=issues,
            pulls=pulls,
            add_pr_wo_labels=add_pr_wo_labels,
            include_merged=include_merged,
            author=author,
            usernames_as_github_logins=usernames_as_github_logins,
        )
    except RequiredConfigurationElementError as exc:
        typer.echo(f"{exc} (command line option --{exc.cli_name.replace('_', '-')}, environment variable {exc.env_name})", err=True)
        raise typer.Exit(1) from exc
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not input_path.exists():
        typer.echo(f"Input file not found: {input_path.absolute()}", err=True)
        raise typer.Exit(1)

    processor = InputProcessor()
    try:
        model, releases = processor.load_releases(input_path)
    except InputProcessingError as exc:
        typer.echo("Error(s) encountered while processing input:", err=True)
        for err in exc.errors:
            typer.echo(str(err), err=True)
        raise typer.Exit(1) from exc

    if not pulls:
        for release in releases:
            release.pull_requests = []

    resolver = StaticTagResolver(tags=model.tags, commits=model.commits, config=config)
    generator = ChangelogGenerator(config=config, tag_resolver=resolver)
    try:
        content = generator.compound_changelog(releases)
    except ConfigParseError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    if output is None:
        typer.echo(content, nl=False)
        return

    if output.parent != Path(""):
        output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.echo(f"Wrote changelog with {len(releases)} entries to {output}", err=True)


if __name__ == "__main__":
    typer_app()

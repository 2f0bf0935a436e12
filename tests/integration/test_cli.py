"""Integration tests for the CLI."""

import subprocess
from pathlib import Path
from typing import Callable

import pytest

RunCli = Callable[[list[str]], subprocess.CompletedProcess[str]]

INPUT_YAML = """
tags:
  - name: v1.0.0
    date: 2024-01-10T09:00:00Z
  - name: v1.1.0
    date: 2024-03-05T12:00:00Z
commits:
  - sha: abc123
    date: 2023-12-01T08:30:00Z
releases:
  - tag: v1.1.0
    issues:
      - title: Crash on <start>
        number: 3
        html_url: https://github.com/owner/repo/issues/3
        labels:
          - name: bug
            url: https://api.github.com/repos/owner/repo/labels/bug
      - title: Question about docs
        number: 6
        html_url: https://github.com/owner/repo/issues/6
    pull_requests:
      - title: Add exporter
        number: 4
        html_url: https://github.com/owner/repo/pull/4
        user:
          login: octocat
          html_url: https://github.com/octocat
        labels:
          - name: enhancement
            url: https://api.github.com/repos/owner/repo/labels/enhancement
      - title: Bump dependencies
        number: 5
        html_url: https://github.com/owner/repo/pull/5
        user:
          login: dependabot
          html_url: https://github.com/apps/dependabot
  - tag: v1.0.0
    issues:
      - title: Initial release
        number: 1
        html_url: https://github.com/owner/repo/issues/1
        labels:
          - name: enhancement
"""

EXPECTED_CHANGELOG = (
    "# Changelog\n\n"
    "## [v1.1.0](https://github.com/owner/repo/tree/v1.1.0) (2024-03-05)\n\n"
    "[Full Changelog](https://github.com/owner/repo/compare/v1.0.0...v1.1.0)\n\n"
    "**Implemented enhancements:**\n\n"
    "- Add exporter [\\#4](https://github.com/owner/repo/pull/4) ([octocat](https://github.com/octocat))\n\n"
    "**Fixed bugs:**\n\n"
    "- Crash on \\<start\\> [\\#3](https://github.com/owner/repo/issues/3)\n\n"
    "**Closed issues:**\n\n"
    "- Question about docs [\\#6](https://github.com/owner/repo/issues/6)\n\n"
    "**Merged pull requests:**\n\n"
    "- Bump dependencies [\\#5](https://github.com/owner/repo/pull/5) ([dependabot](https://github.com/apps/dependabot))\n\n"
    "## [v1.0.0](https://github.com/owner/repo/tree/v1.0.0) (2024-01-10)\n\n"
    "[Full Changelog](https://github.com/owner/repo/compare/abc123...v1.0.0)\n\n"
    "**Implemented enhancements:**\n\n"
    "- Initial release [\\#1](https://github.com/owner/repo/issues/1)\n\n"
)


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Input dump with two tags."""
    path = tmp_path / "input.yaml"
    path.write_text(INPUT_YAML, encoding="utf-8")
    return path


def test_no_input_path_provided(run_cli: RunCli) -> None:
    """Test that the CLI exits with an error if no input path is provided."""
    result = run_cli(["generate"])
    assert result.returncode != 0
    assert "missing argument 'input_path'" in result.stderr.lower()


def test_missing_repo(run_cli: RunCli, input_file: Path) -> None:
    """Test that the CLI exits with an error if no repository is configured."""
    result = run_cli(["generate", str(input_file)])
    assert result.returncode == 1
    assert "Missing required configuration element: Repository" in result.stderr


def test_missing_input_file(run_cli: RunCli, tmp_path: Path) -> None:
    """Test that the CLI exits with an error if the input file does not exist."""
    result = run_cli(["generate", str(tmp_path / "missing.yaml"), "--repo", "owner/repo"])
    assert result.returncode == 1
    assert "Input file not found" in result.stderr


def test_malformed_input(run_cli: RunCli, tmp_path: Path) -> None:
    """Test that the CLI exits with an error if the input is malformed."""
    malformed = tmp_path / "bad.yaml"
    malformed.write_text("releases: [unclosed")
    result = run_cli(["generate", str(malformed), "--repo", "owner/repo"])
    assert result.returncode == 1
    assert "Error(s) encountered while processing input" in result.stderr


def test_generate_to_stdout(run_cli: RunCli, input_file: Path) -> None:
    """Test generating a full changelog to stdout."""
    result = run_cli(["generate", str(input_file), "--repo", "owner/repo"])
    assert result.returncode == 0
    assert result.stdout == EXPECTED_CHANGELOG


def test_generate_to_output_file(run_cli: RunCli, input_file: Path, tmp_path: Path) -> None:
    """Test writing the changelog to a file."""
    output = tmp_path / "docs" / "CHANGELOG.md"
    result = run_cli(["generate", str(input_file), "--repo", "owner/repo", "--output", str(output)])
    assert result.returncode == 0
    assert output.read_text(encoding="utf-8") == EXPECTED_CHANGELOG
    assert "Wrote changelog with 2 entries" in result.stderr


def test_generate_with_configured_sections(run_cli: RunCli, input_file: Path) -> None:
    """Test that configured sections replace the defaults."""
    sections = '{"features": {"prefix": "**Features:**", "labels": ["enhancement"]}}'
    result = run_cli(["generate", str(input_file), "--repo", "owner/repo", "--configure-sections", sections, "--no-author"])
    assert result.returncode == 0
    assert "**Features:**\n\n- Add exporter [\\#4](https://github.com/owner/repo/pull/4)\n" in result.stdout
    assert "**Fixed bugs:**" not in result.stdout
    assert "Question about docs" not in result.stdout
    assert "**Merged pull requests:**\n\n- Bump dependencies" in result.stdout


def test_generate_with_malformed_sections(run_cli: RunCli, input_file: Path) -> None:
    """Test that a malformed sections description is reported."""
    result = run_cli(["generate", str(input_file), "--repo", "owner/repo", "--add-sections", '{"broken": ['])
    assert result.returncode == 1
    assert "There was a problem parsing your JSON string for sections" in result.stderr


def test_generate_without_pulls(run_cli: RunCli, input_file: Path) -> None:
    """Test that --no-pulls leaves pull requests out entirely."""
    result = run_cli(["generate", str(input_file), "--repo", "owner/repo", "--no-pulls"])
    assert result.returncode == 0
    assert "Add exporter" not in result.stdout
    assert "Bump dependencies" not in result.stdout
    assert "**Merged pull requests:**" not in result.stdout
    assert "Crash on" in result.stdout


def test_generate_simple_list_with_labels(run_cli: RunCli, input_file: Path) -> None:
    """Test simple list output with label badges and login mentions."""
    result = run_cli(
        [
            "generate",
            str(input_file),
            "--repo",
            "owner/repo",
            "--simple-list",
            "--issue-line-labels",
            "ALL",
            "--usernames-as-github-logins",
        ]
    )
    assert result.returncode == 0
    assert "**Fixed bugs:**" not in result.stdout
    assert (
        "- Add exporter [\\#4](https://github.com/owner/repo/pull/4) [[enhancement](https://github.com/owner/repo/labels/enhancement)] (@octocat)"
        in result.stdout
    )

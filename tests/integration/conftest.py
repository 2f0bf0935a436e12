"""Pytest configuration for integration tests."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable

import pytest
from dotenv import load_dotenv

RunCli = Callable[[list[str]], subprocess.CompletedProcess[str]]

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env.integration before running integration tests, if it exists."""
    integration_env = PROJECT_ROOT / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)


@pytest.fixture
def run_cli(tmp_path: Path) -> RunCli:
    """Helper to run the CLI as a subprocess from a clean directory and capture output."""

    def runner(args: list[str]) -> subprocess.CompletedProcess[str]:
        env = {key: value for key, value in os.environ.items() if key not in ("REPO", "GITHUB_SITE", "DEBUG")}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
        complete_command = [sys.executable, "-m", "github_changelog_generator.configuration.cli", *args]
        print(f"Running command: {' '.join(complete_command)}")
        result = subprocess.run(
            complete_command,
            capture_output=True,
            text=True,
            cwd=tmp_path,
            env=env,
        )
        print(f"Command result: {result.returncode}")
        print(f"Command stdout: {result.stdout}")
        print(f"Command stderr: {result.stderr}")
        return result

    return runner

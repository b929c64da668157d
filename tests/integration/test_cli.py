"""Integration tests for the command-line interface.

This integration test suite runs the installed entry point in a subprocess and covers:
- Interactive confirmation and refusal
- Tree output with folder sizes
- Dry runs
- Config group lookup
- Exit codes for usage and lookup errors
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Skip all tests in this module unless --run-cli-tests is given
# This prevents these slow tests from running during normal test runs
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(make_tree):
    """Create a temporary project directory with build leftovers."""
    return make_tree(
        {
            "main.py": "print('hello')\n",
            "debug.log": "DEBUG: test log\n",
            "build": {"out.o": b"\x00" * 64, "notes.md": "# notes\n"},
            "important": {"keep.log": "keep me\n"},
            ".cache": {"stale.log": "old\n"},
        },
        name="project",
    )


def run_cli(args, input_text=None, timeout=10):
    """Run the folder-cleaner CLI with the given arguments.

    Args:
        args: List of CLI arguments
        input_text: Text fed to standard input
        timeout: Maximum time to wait for command to complete

    Returns:
        CompletedProcess instance with stdout and stderr captured
    """
    cmd = [sys.executable, "-m", "folder_cleaner.cli.main"] + [str(arg) for arg in args]
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    return subprocess.run(
        cmd,
        input=input_text,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        encoding="utf-8",
        env=env,
        timeout=timeout,
    )


def test_version():
    """Test that --version prints the program name."""
    result = run_cli(["--version"])
    assert result.returncode == 0
    assert "folder-cleaner" in result.stdout


def test_delete_after_confirmation(temp_project):
    """Test that answering 1 deletes matching files outside protected folders."""
    result = run_cli(["-u", "-r", "-e", "log", "-e", "o", "-p", "important/", temp_project], input_text="1\n")

    assert result.returncode == 0, result.stderr
    assert "Cleaning Overview" in result.stdout
    assert "Deleted 2 files and 0 folders." in result.stdout
    assert not (temp_project / "debug.log").exists()
    assert not (temp_project / "build" / "out.o").exists()
    assert (temp_project / "important" / "keep.log").exists()
    assert (temp_project / ".cache" / "stale.log").exists()
    assert (temp_project / "main.py").exists()


def test_refusal_keeps_files(temp_project):
    """Test that answering exit leaves everything in place."""
    result = run_cli(["-u", "-r", "-e", "log", temp_project], input_text="2\n")

    assert result.returncode == 0
    assert "untouched" in result.stdout
    assert (temp_project / "debug.log").exists()


def test_closed_input_keeps_files(temp_project):
    """Test that end of input is treated as exit."""
    result = run_cli(["-u", "-r", "-e", "log", temp_project], input_text="")

    assert result.returncode == 0
    assert (temp_project / "debug.log").exists()


def test_tree_output(temp_project):
    """Test the tree printed with -t."""
    result = run_cli(["-u", "-r", "-e", "log", "-e", "o", "-t", "-n", temp_project], input_text="1\n")

    assert result.returncode == 0
    assert "├── build\n│   └── out.o\n├── debug.log\n└── important\n    └── keep.log\n" in result.stdout
    assert "Folder Size Overview" in result.stdout
    assert (temp_project / "debug.log").exists()


def test_tree_with_sizes(temp_project):
    """Test that -s adds folder sizes to the tree."""
    result = run_cli(["-u", "-r", "-e", "o", "-t", "-s", "--unit", "b", "-n", temp_project], input_text="1\n")

    assert result.returncode == 0
    assert "└── build - \x1b[1m64 B\x1b[0m" in result.stdout


def test_config_group(temp_project, tmp_path):
    """Test cleaning a folder group from a config file."""
    config = tmp_path / "nuke.toml"
    config.write_text(
        f"[[leftovers]]\ndirectory = \"{Path(temp_project).as_posix()}\"\nextensions_to_delete = [\"log\"]\n"
    )

    result = run_cli(["--config-file", config, "-y", "leftovers"])

    assert result.returncode == 0, result.stderr
    assert not (temp_project / "debug.log").exists()
    assert (temp_project / "build" / "out.o").exists()


def test_nothing_to_delete(temp_project):
    """Test a folder without matching files."""
    result = run_cli(["-u", "-e", "exe", temp_project])

    assert result.returncode == 0
    assert "Nothing to delete" in result.stdout


def test_usage_error():
    """Test that a missing key exits with status 2."""
    result = run_cli([])
    assert result.returncode == 2


def test_unknown_key(tmp_path):
    """Test that an unknown key exits with status 1."""
    result = run_cli(["--config-file", tmp_path / "none.toml", tmp_path / "nothing"])

    assert result.returncode == 1
    assert "neither a valid path nor an entry" in result.stderr

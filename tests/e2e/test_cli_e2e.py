from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Runs the entry point script in a subprocess and feeds commands through
standard input, validating exit codes and stream output.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "fsnavigator" / "main.py"


def run_cli(args: List[str], stdin: str = "") -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        input=stdin,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_interactive_session_over_stdin() -> None:
    """TC-01: Demo tree, navigation and search through piped input."""
    script = "\n".join([
        "find report.docx",
        "cd /home/user",
        "ls",
        "cd /home/readme.txt",
        "pwd",
        "exit",
    ]) + "\n"

    result = run_cli([], stdin=script)

    assert result.returncode == 0, result.stderr
    assert "/home/user/Documents/report.docx\n" in result.stdout
    assert "Documents/\nDownloads/\nprofile.txt\n" in result.stdout
    assert "Error: Invalid path '/home/readme.txt'." in result.stdout
    assert "fs/home/user> /home/user\n" in result.stdout
    assert result.stdout.endswith("Exiting File System Navigator.\n")


def test_cli_eof_terminates_cleanly() -> None:
    """TC-02: End of input ends the session with exit code 0."""
    result = run_cli(["--no-demo"], stdin="mkdir a\ncd a\n")

    assert result.returncode == 0
    assert result.stdout.endswith("fs/a> \nExiting File System Navigator.\n")


def test_cli_scripted_commands() -> None:
    """TC-03: -c runs commands without banner or prompt."""
    result = run_cli(["-c", "mkdir x/y", "-c", "touch home", "-c", "cd home", "-c", "ls"])

    assert result.returncode == 0
    assert result.stdout == (
        "Error: Directory name cannot contain '/'.\n"
        "Error: 'home' already exists.\n"
        "readme.txt\n"
        "user/\n"
    )


def test_cli_bad_config_exit_code(tmp_path: Path) -> None:
    """TC-04: Malformed config file returns exit code 2."""
    cfg = tmp_path / "bad.json"
    cfg.write_text("[", encoding="utf-8")

    result = run_cli(["--config", str(cfg)])

    assert result.returncode == 2
    assert "Configuration error" in result.stderr

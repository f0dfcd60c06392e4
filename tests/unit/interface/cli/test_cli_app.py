from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Drives the full session in-process with in-memory streams.
"""

import io
import json
from pathlib import Path

from fsnavigator.interface.cli.app import main


def run_session(argv, stdin_text: str = ""):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
    return code, stdout.getvalue()


def test_interactive_session_with_banner_and_exit():
    code, output = run_session([], "pwd\ncd home\npwd\nexit\n")

    assert code == 0
    assert output.startswith("Welcome to the File System Navigator!\nFile System Navigator Commands:")
    assert "fs/> /\n" in output
    assert "fs/home> /home\n" in output
    assert output.endswith("fs/home> Exiting File System Navigator.\n")


def test_interactive_session_eof_prints_newline():
    code, output = run_session(["--config", "unused.json"], "ls\n")

    assert code == 0
    assert output.endswith("fs/> home/\nfs/> \nExiting File System Navigator.\n")


def test_no_demo_starts_empty():
    code, output = run_session(["--no-demo", "-c", "ls", "-c", "find home"])

    assert code == 0
    assert output == "No file or directory named 'home' found.\n"


def test_scripted_commands_stop_at_exit():
    code, output = run_session(["-c", "pwd", "-c", "exit", "-c", "pwd"])

    assert code == 0
    assert output == "/\n"


def test_dump_config_prints_effective_json():
    code, output = run_session(["--dump-config", "--no-demo", "--debug"])

    assert code == 0
    conf = json.loads(output)
    assert conf["populate_demo"] is False
    assert conf["log_level"] == "DEBUG"


def test_config_file_changes_prompt(tmp_path: Path):
    cfg = tmp_path / "nav.json"
    cfg.write_text(json.dumps({"prompt_prefix": "vfs", "show_banner": False}), encoding="utf-8")

    code, output = run_session(["--config", str(cfg)], "exit\n")

    assert code == 0
    assert output == "vfs/> Exiting File System Navigator.\n"


def test_malformed_config_returns_exit_code_2(tmp_path: Path, capsys):
    cfg = tmp_path / "bad.json"
    cfg.write_text("{", encoding="utf-8")

    code, output = run_session(["--config", str(cfg)])

    assert code == 2
    assert output == ""
    assert "Configuration error" in capsys.readouterr().err


def test_keyboard_interrupt_returns_130():
    class _InterruptingStdin(io.StringIO):
        def readline(self, *args):
            raise KeyboardInterrupt

    stdout = io.StringIO()
    code = main(["--no-demo"], stdin=_InterruptingStdin(), stdout=stdout)

    assert code == 130

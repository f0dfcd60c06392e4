from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the session lifecycle: configuration loading and validation,
logging bootstrap, namespace construction (optionally with the demo tree)
and the read-dispatch loop over standard input or scripted commands.
"""

import json
import logging
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

from fsnavigator.core.services.namespace import Namespace
from fsnavigator.core.services.seed import populate_demo
from fsnavigator.core.services.validator import validate_config
from fsnavigator.domain.config import ConfigError, load_config
from fsnavigator.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from fsnavigator.interface.cli import args as cli_args
from fsnavigator.interface.cli.dispatcher import CommandDispatcher
from fsnavigator.utils.i18n import i18n

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
) -> int:
    """
    Execute the navigator session.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Input stream for the interactive loop. Defaults to sys.stdin.
        stdout: Output stream for prompts and results. Defaults to sys.stdout.

    Returns:
        int: Process exit code (0 success, 2 configuration error, 130 interrupted).
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (file + CLI overrides)
    try:
        base_conf = load_config(args.config_path)
    except ConfigError as e:
        print(f"ERROR: {i18n.t('cli.errors.config_fail', error=str(e))}", file=sys.stderr)
        return 2

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (quiet console, full detail in the opt-in file)
    configure_logging(LoggingConfig(
        console_level=conf["log_level"],
        log_file=conf["log_file"] or None,
    ))
    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.dump_config:
            print(json.dumps(conf, ensure_ascii=False, indent=2), file=stdout)
            return 0

        return _run_session(args.commands, conf, stdin, stdout)
    finally:
        shutdown_logging()


def _run_session(
        commands: Optional[List[str]],
        conf: Dict[str, Any],
        stdin: TextIO,
        stdout: TextIO,
) -> int:
    """Build the namespace and drive it from scripted commands or stdin."""
    namespace = Namespace()
    if conf["populate_demo"]:
        populate_demo(namespace)

    dispatcher = CommandDispatcher(namespace, stdout)
    logger.info("Navigator session started")

    try:
        if commands:
            run_script(dispatcher, commands)
        else:
            run_interactive(dispatcher, stdin, stdout, conf)
    except KeyboardInterrupt:
        print("", file=stdout)
        logger.warning(i18n.t("app.interrupted"))
        return 130

    logger.info("Navigator session finished")
    return 0

# -----------------------------------------------------------------------------
# SESSION LOOPS
# -----------------------------------------------------------------------------

def run_interactive(
        dispatcher: CommandDispatcher,
        stdin: TextIO,
        stdout: TextIO,
        conf: Dict[str, Any],
) -> None:
    """
    Prompt-read-dispatch loop until 'exit' or end of input.

    EOF prints a newline so the shell prompt starts on a clean line.
    """
    if conf["show_banner"]:
        print(i18n.t("app.welcome"), file=stdout)
        dispatcher.show_help()

    while True:
        stdout.write(dispatcher.prompt(conf["prompt_prefix"]))
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break

        if not dispatcher.dispatch(line.rstrip("\r\n")):
            break

    print(i18n.t("app.goodbye"), file=stdout)


def run_script(dispatcher: CommandDispatcher, commands: Iterable[str]) -> None:
    """Dispatch a fixed sequence of command lines, stopping at 'exit'."""
    for line in commands:
        if not dispatcher.dispatch(line):
            break

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

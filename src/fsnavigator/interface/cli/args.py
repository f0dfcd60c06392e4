from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the navigator and translates the raw
argparse namespace into session configuration overrides.
"""

import argparse
from typing import Any, Dict

from fsnavigator.domain.constants import APP_VERSION
from fsnavigator.infra.logging import get_default_log_path
from fsnavigator.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the navigator CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsnavigator",
        description=i18n.t("app.description"),
    )

    # --- Session Input ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=None,
        metavar="CMD",
        help=i18n.t("cli.args.command"),
    )
    p.add_argument(
        "--no-demo",
        action="store_true",
        help=i18n.t("cli.args.no_demo"),
    )

    # --- Configuration ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides subset.

    Only flags the user actually set appear in the result.
    """
    overrides: Dict[str, Any] = {}

    if args.no_demo:
        overrides["populate_demo"] = False
    if args.commands:
        # Scripted runs print command output only
        overrides["show_banner"] = False
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

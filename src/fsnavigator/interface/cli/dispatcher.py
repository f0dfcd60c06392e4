from __future__ import annotations

"""
Command Dispatcher.

Maps a line of user input onto the namespace operations and renders
results and errors as human-readable text. Acts as the 'View' for the
interactive session: the core never prints.
"""

import logging
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from fsnavigator.core.services.namespace import Namespace
from fsnavigator.domain.results import OperationResult, OperationStatus
from fsnavigator.utils.i18n import i18n

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class CommandDispatcher:
    """
    Parse and execute single command lines against a namespace.

    Each line is split into a command token and at most one argument token;
    further tokens are ignored.
    """

    def __init__(self, namespace: Namespace, out: TextIO):
        self.namespace = namespace
        self.out = out
        # Commands taking a required argument
        self._unary: Dict[str, Callable[[str], None]] = {
            "mkdir": self._mkdir,
            "touch": self._touch,
            "cd": self._cd,
            "find": self._find,
        }
        # Commands taking no argument
        self._nullary: Dict[str, Callable[[], None]] = {
            "ls": self._ls,
            "pwd": self._pwd,
            "tree": self._tree,
            "help": self.show_help,
        }

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def dispatch(self, line: str) -> bool:
        """
        Execute one line of input.

        Args:
            line: Raw input line.

        Returns:
            bool: False when the session should end, True otherwise.
        """
        command, argument = parse_line(line)
        if command is None:
            return True

        if command == EXIT_COMMAND:
            return False

        logger.debug(f"Dispatching '{command}' arg={argument!r}")

        if command in self._nullary:
            self._nullary[command]()
        elif command in self._unary:
            if argument is None:
                self._print(i18n.t(f"usage.{command}"))
            else:
                self._unary[command](argument)
        else:
            self._print(i18n.t("errors.unknown_command", command=command))

        return True

    def show_help(self) -> None:
        self._print(i18n.t("help"))

    def prompt(self, prefix: str) -> str:
        return i18n.t("app.prompt", prefix=prefix, path=self.namespace.print_working_directory())

    # -------------------------------------------------------------------------
    # Command handlers
    # -------------------------------------------------------------------------

    def _ls(self) -> None:
        for entry in self.namespace.list_entries():
            self._print(entry.display())

    def _pwd(self) -> None:
        self._print(self.namespace.print_working_directory())

    def _tree(self) -> None:
        for line in self.namespace.render_tree():
            self._print(line)

    def _mkdir(self, name: str) -> None:
        self._report(self.namespace.make_directory(name), "errors.dir_name_invalid")

    def _touch(self, name: str) -> None:
        self._report(self.namespace.create_file(name), "errors.file_name_invalid")

    def _cd(self, path: str) -> None:
        self._report(self.namespace.change_directory(path))

    def _find(self, name: str) -> None:
        results = self.namespace.find(name)
        if not results:
            self._print(i18n.t("errors.not_found", name=name))
            return
        for path in results:
            self._print(path)

    # -------------------------------------------------------------------------
    # Rendering helpers
    # -------------------------------------------------------------------------

    def _report(self, result: OperationResult, invalid_name_key: str = "") -> None:
        """Print the message matching a failed result; successes are silent."""
        if result.ok:
            return
        if result.status is OperationStatus.NAME_INVALID:
            self._print(i18n.t(invalid_name_key))
        elif result.status is OperationStatus.NAME_COLLISION:
            self._print(i18n.t("errors.name_collision", name=result.subject))
        elif result.status is OperationStatus.INVALID_PATH:
            self._print(i18n.t("errors.invalid_path", path=result.subject))

    def _print(self, text: str) -> None:
        print(text, file=self.out)


def parse_line(line: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Split an input line into (command, argument).

    Returns (None, None) for blank lines; the argument is None when absent.
    """
    tokens: List[str] = line.split()
    if not tokens:
        return None, None
    argument = tokens[1] if len(tokens) > 1 else None
    return tokens[0], argument

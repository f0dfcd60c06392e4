from __future__ import annotations

"""
Demo Tree Population.

Builds the sample directory structure shown at session start, driving the
public namespace operations exactly as a user would.
"""

import logging

from fsnavigator.core.services.namespace import Namespace

logger = logging.getLogger(__name__)


def populate_demo(namespace: Namespace) -> None:
    """
    Populate the namespace with the startup sample tree.

    Resulting structure:
    /home
      /user
        /Documents
          report.docx
        /Downloads
        profile.txt
      readme.txt

    The current directory is reset to the root afterwards.
    """
    namespace.make_directory("home")
    namespace.change_directory("home")
    namespace.make_directory("user")
    namespace.create_file("readme.txt")
    namespace.change_directory("user")
    namespace.make_directory("Documents")
    namespace.make_directory("Downloads")
    namespace.create_file("profile.txt")
    namespace.change_directory("Documents")
    namespace.create_file("report.docx")
    namespace.change_directory("/")

    logger.debug("Demo tree populated")

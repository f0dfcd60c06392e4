from __future__ import annotations

"""
Unit tests for the demo tree population.
"""

from fsnavigator.core.services.namespace import Namespace
from fsnavigator.core.services.seed import populate_demo


def test_populate_demo_builds_sample_tree(namespace: Namespace) -> None:
    populate_demo(namespace)

    expected = {
        "home": "/home",
        "user": "/home/user",
        "readme.txt": "/home/readme.txt",
        "Documents": "/home/user/Documents",
        "Downloads": "/home/user/Downloads",
        "profile.txt": "/home/user/profile.txt",
        "report.docx": "/home/user/Documents/report.docx",
    }
    for name, path in expected.items():
        assert namespace.find(name) == [path]


def test_populate_demo_leaves_session_at_root(namespace: Namespace) -> None:
    populate_demo(namespace)
    assert namespace.print_working_directory() == "/"
    assert [e.display() for e in namespace.list_entries()] == ["home/"]

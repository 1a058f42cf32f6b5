"""Test fixtures for gobuild tests.

- projects: Go project layouts, with and without gobuild.yaml

Import fixtures in your tests using:
    from tests.fixtures.projects import go_project
"""

__all__ = [
    "projects",
]

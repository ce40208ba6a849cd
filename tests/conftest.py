"""Test configuration and fixtures for icontree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path, monkeypatch):
    """Create the reference tree used across the renderer and CLI tests.

    The tree is rooted at a directory named ``test`` and the working directory is
    moved next to it, so the root can be passed as the relative path ``test``::

        test
        ├── a/b/.gitkeep
        ├── c.txt
        ├── d/e/.gitkeep
        ├── d/e/f/.gitkeep
        ├── d/e/f/g/.gitkeep
        ├── d/h.txt
        └── d.txt
    """
    root = tmp_path / "test"
    (root / "a" / "b").mkdir(parents=True)
    (root / "d" / "e" / "f" / "g").mkdir(parents=True)
    (root / "c.txt").write_text("c\n")
    (root / "d" / "h.txt").write_text("h\n")
    (root / "d.txt").write_text("d\n")
    for keep in ("a/b", "d/e", "d/e/f", "d/e/f/g"):
        (root / keep / ".gitkeep").touch()

    monkeypatch.chdir(tmp_path)
    return root

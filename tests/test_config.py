"""Tests for RenderConfig validation."""

from pathlib import Path

import pytest

from icontree.config import DEFAULT_MAX_DEPTH, RenderConfig
from icontree.exceptions import PathInvalidError
from icontree.file_system_tree.permission_action import PermissionAction


def test_defaults(tmp_path):
    config = RenderConfig(str(tmp_path))

    assert config.root == Path(tmp_path)
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert not config.include_hidden
    assert not config.directories_only
    assert not config.full_path
    assert not config.overview
    assert config.exclusion_rules is None
    assert config.permission_action is PermissionAction.IGNORE


def test_missing_root():
    with pytest.raises(PathInvalidError):
        RenderConfig("/non/existent/directory")


def test_file_root(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.touch()
    with pytest.raises(PathInvalidError) as excinfo:
        RenderConfig(file_path)
    assert excinfo.value.path == str(file_path)


@pytest.mark.parametrize("depth", [-1, True, 1.5])
def test_invalid_depth(tmp_path, depth):
    with pytest.raises(ValueError, match="max_depth"):
        RenderConfig(tmp_path, max_depth=depth)


def test_zero_depth_is_valid(tmp_path):
    assert RenderConfig(tmp_path, max_depth=0).max_depth == 0


def test_permission_action_from_string(tmp_path):
    assert RenderConfig(tmp_path, permission_action="RAISE").permission_action is PermissionAction.RAISE


def test_invalid_permission_action(tmp_path):
    with pytest.raises(ValueError, match="Invalid permission_action"):
        RenderConfig(tmp_path, permission_action="explode")


def test_config_is_frozen(tmp_path):
    config = RenderConfig(tmp_path)
    with pytest.raises(AttributeError):
        config.max_depth = 3  # type: ignore[misc]

"""Unit tests for the argument parser module in the icontree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from icontree.cli.argparser import create_exclusion_action, create_parser, non_negative_int, validate_args
from icontree.config import DEFAULT_MAX_DEPTH
from icontree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    return MagicMock(spec=GitIgnoreExclusionRules)


@pytest.fixture
def ignore_file(tmp_path):
    """Create a gitignore-style file."""
    path = tmp_path / ".treeignore"
    path.write_text("*.pyc\nbuild/\n")
    return path


def test_create_exclusion_action():
    ExclusionAction = create_exclusion_action(MagicMock())

    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"
    assert action.help == "test help"


def test_exclusion_action_exclude_file(mock_exclusion_rules):
    action = create_exclusion_action(mock_exclusion_rules)(option_strings=["-e", "--exclude"], dest="exclude")
    namespace = argparse.Namespace()
    ignore_path = Path("/path/to/.gitignore")

    action(None, namespace, ignore_path, "-e")

    mock_exclusion_rules.load_rules.assert_called_once_with(ignore_path)
    mock_exclusion_rules.add_rule.assert_not_called()
    assert namespace.exclude == [ignore_path]


def test_exclusion_action_ignore_pattern(mock_exclusion_rules):
    action = create_exclusion_action(mock_exclusion_rules)(option_strings=["-i", "--ignore"], dest="ignore")
    namespace = argparse.Namespace()

    action(None, namespace, "*.pyc", "--ignore")

    mock_exclusion_rules.add_rule.assert_called_once_with("*.pyc")
    assert namespace.ignore == ["*.pyc"]


def test_exclusion_action_keeps_command_line_order():
    rules = GitIgnoreExclusionRules()
    parser = create_parser(rules)

    parser.parse_args(["-i", "*.log", "-i", "!keep.log", "-i", "build/", "."])

    assert rules.patterns == ["*.log", "!keep.log", "build/"]
    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_exclusion_action_append_to_existing(mock_exclusion_rules):
    action = create_exclusion_action(mock_exclusion_rules)(option_strings=["-e", "--exclude"], dest="exclude")
    namespace = argparse.Namespace(exclude=[Path("/existing/file")])

    action(None, namespace, Path("/path/to/.gitignore"), "-e")

    assert namespace.exclude == [Path("/existing/file"), Path("/path/to/.gitignore")]


def test_missing_ignore_file_is_usage_error(tmp_path, capsys):
    parser = create_parser(GitIgnoreExclusionRules())

    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-e", str(tmp_path / "missing"), str(tmp_path)])

    assert excinfo.value.code == 2
    assert "missing" in capsys.readouterr().err


def test_create_parser_defaults(mock_exclusion_rules, tmp_path):
    parser = create_parser(mock_exclusion_rules)

    args = parser.parse_args([str(tmp_path)])

    assert args.path == tmp_path
    assert args.level == DEFAULT_MAX_DEPTH
    assert not args.all
    assert not args.directory
    assert not args.full
    assert not args.overview
    assert not args.no_color
    assert not args.no_icons
    assert not args.follow_symlinks
    assert args.exclude is None
    assert args.ignore is None
    assert args.output is None
    assert args.permission_action == "ignore"


def test_create_parser_with_all_options(ignore_file, tmp_path):
    parser = create_parser(GitIgnoreExclusionRules())
    output_file = tmp_path / "tree.txt"

    args = parser.parse_args(
        [
            "-l",
            "2",
            "-a",
            "-d",
            "-f",
            "--overview",
            "--no-color",
            "--no-icons",
            "-L",
            "-e",
            str(ignore_file),
            "-i",
            "*.tmp",
            "-o",
            str(output_file),
            "-P",
            "warn",
            str(tmp_path),
        ]
    )

    assert args.path == tmp_path
    assert args.level == 2
    assert args.all
    assert args.directory
    assert args.full
    assert args.overview
    assert args.no_color
    assert args.no_icons
    assert args.follow_symlinks
    assert args.exclude == [ignore_file]
    assert args.ignore == ["*.tmp"]
    assert args.output == output_file
    assert args.permission_action == "warn"


def test_long_option_names(tmp_path):
    parser = create_parser(GitIgnoreExclusionRules())

    args = parser.parse_args(["--level", "0", "--all", "--directory", "--full", "--follow-symlinks", str(tmp_path)])

    assert args.level == 0
    assert args.all and args.directory and args.full and args.follow_symlinks


@pytest.mark.parametrize("argv", [[], ["-l", "-1", "."], ["-l", "two", "."], ["-P", "skip", "."]])
def test_invalid_command_lines(argv):
    parser = create_parser(GitIgnoreExclusionRules())

    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(argv)

    assert excinfo.value.code == 2


def test_version(capsys):
    from icontree import __version__

    parser = create_parser(GitIgnoreExclusionRules())

    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"icontree {__version__}"


@pytest.mark.parametrize("value, expected", [("0", 0), ("3", 3), ("10", 10)])
def test_non_negative_int(value, expected):
    assert non_negative_int(value) == expected


@pytest.mark.parametrize("value", ["-1", "1.5", "deep"])
def test_non_negative_int_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        non_negative_int(value)


def test_validate_args_valid(tmp_path):
    validate_args(argparse.Namespace(output=None))
    validate_args(argparse.Namespace(output=tmp_path / "tree.txt"))


def test_validate_args_missing_output_directory(tmp_path):
    with pytest.raises(ValueError) as excinfo:
        validate_args(argparse.Namespace(output=tmp_path / "missing" / "tree.txt"))

    assert "Output directory does not exist" in str(excinfo.value)

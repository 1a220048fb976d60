"""Unit tests for the argument parser module in dir2tree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dir2tree.cli.argparser import create_exclusion_action, create_parser, validate_args
from dir2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


def test_create_exclusion_action():
    ExclusionAction = create_exclusion_action(MagicMock())

    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"
    assert action.help == "test help"


def test_exclusion_action_exclude_file(mock_exclusion_rules):
    ExclusionAction = create_exclusion_action(mock_exclusion_rules)
    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude")
    namespace = argparse.Namespace()
    rules_file = Path("/path/to/.gitignore")

    action(None, namespace, rules_file, "-e")

    mock_exclusion_rules.load_rules.assert_called_once_with(rules_file)
    mock_exclusion_rules.add_rule.assert_not_called()
    assert namespace.exclude == [rules_file]


def test_exclusion_action_ignore_pattern(mock_exclusion_rules):
    ExclusionAction = create_exclusion_action(mock_exclusion_rules)
    action = ExclusionAction(option_strings=["-i", "--ignore"], dest="ignore")
    namespace = argparse.Namespace()

    action(None, namespace, "*.pyc", "-i")
    action(None, namespace, "build/", "--ignore")

    assert [call.args[0] for call in mock_exclusion_rules.add_rule.call_args_list] == ["*.pyc", "build/"]
    assert namespace.ignore == ["*.pyc", "build/"]


def test_create_parser_defaults(mock_exclusion_rules, tmp_path):
    parser = create_parser(mock_exclusion_rules)

    args = parser.parse_args([str(tmp_path)])

    assert args.directory == tmp_path
    assert args.format == "text-tree"
    assert args.output is None
    assert args.indent == 2
    assert args.summary is False
    assert args.verbose is False


def test_create_parser_with_all_options(tmp_path):
    rules_file = tmp_path / ".gitignore"
    rules_file.write_text("*.log\n")
    rules = GitIgnoreExclusionRules()
    parser = create_parser(rules)

    args = parser.parse_args(
        [
            "-f",
            "markdown",
            "-o",
            str(tmp_path / "out.md"),
            "-e",
            str(rules_file),
            "-i",
            "!keep.log",
            "--indent",
            "4",
            "-s",
            "-v",
            str(tmp_path),
        ]
    )

    assert args.format == "markdown"
    assert args.output == tmp_path / "out.md"
    assert args.exclude == [rules_file]
    assert args.ignore == ["!keep.log"]
    assert args.indent == 4
    assert args.summary
    assert args.verbose

    # Patterns from the file and the command line are applied in order
    assert rules.exclude("app.log")
    assert not rules.exclude("keep.log")


def test_parser_rejects_unknown_format(mock_exclusion_rules, tmp_path):
    parser = create_parser(mock_exclusion_rules)

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-f", "yaml", str(tmp_path)])

    assert exc_info.value.code == 2


def test_parser_rejects_missing_rules_file(tmp_path):
    parser = create_parser(GitIgnoreExclusionRules())

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-e", str(tmp_path / "missing"), str(tmp_path)])

    assert exc_info.value.code == 2


def test_validate_args_valid():
    validate_args(argparse.Namespace(indent=0))
    validate_args(argparse.Namespace(indent=8))


def test_validate_args_negative_indent():
    with pytest.raises(ValueError, match="--indent"):
        validate_args(argparse.Namespace(indent=-1))

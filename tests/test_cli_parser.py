"""Tests for CLI command parsing."""

import pytest

from cli.models import SetTokenCommand, ShareCommand
from cli.parser import ParseError, parse_command


def test_parse_share_files_and_directories():
    cmd = parse_command("share sha1-aaa sha1-bbb/")

    assert cmd == ShareCommand(items=(("sha1-aaa", "false"), ("sha1-bbb", "true")))


def test_share_command_to_selection():
    cmd = parse_command("share sha1-aaa/")

    assert cmd.to_selection() == [{"blobRef": "sha1-aaa", "isDir": "true"}]


def test_parse_share_without_refs():
    with pytest.raises(ParseError, match="at least one blobref"):
        parse_command("share")


def test_parse_share_does_not_validate_refs():
    cmd = parse_command("share not-a-ref")

    assert cmd.items == (("not-a-ref", "false"),)


def test_parse_set_token():
    assert parse_command("set-token abc") == SetTokenCommand(token="abc")


def test_parse_set_token_arity():
    with pytest.raises(ParseError):
        parse_command("set-token a b")


@pytest.mark.parametrize("line", ["", "   "])
def test_parse_empty(line):
    with pytest.raises(ParseError, match="Empty command"):
        parse_command(line)


def test_parse_unknown_command():
    with pytest.raises(ParseError, match="Unknown command: upload"):
        parse_command("upload x")


def test_parse_unbalanced_quotes():
    with pytest.raises(ParseError, match="Invalid syntax"):
        parse_command('share "sha1-aaa')

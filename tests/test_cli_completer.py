"""Tests for ShareCompleter."""

import pytest
from prompt_toolkit.document import Document

from cli.completer import ShareCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    return ShareCompleter()


def get_completions_list(completer, text):
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    """Tests for command name completion."""

    def test_empty_input_lists_all_commands(self, completer):
        assert get_completions_list(completer, "") == COMMANDS

    def test_partial_command(self, completer):
        assert get_completions_list(completer, "sh") == ["share"]

    def test_case_insensitive(self, completer):
        assert get_completions_list(completer, "SE") == ["set-token"]


class TestRefCompletion:
    """Tests for blobref completion after 'share'."""

    def test_no_refs_remembered(self, completer):
        assert get_completions_list(completer, "share ") == []

    def test_remembered_refs_are_offered(self, completer):
        completer.remember(["sha1-bbb", "sha1-aaa"])

        assert get_completions_list(completer, "share ") == ["sha1-aaa", "sha1-bbb"]

    def test_partial_ref(self, completer):
        completer.remember(["sha1-aaa", "sha224-ccc"])

        assert get_completions_list(completer, "share sha22") == ["sha224-ccc"]

    def test_already_typed_refs_are_skipped(self, completer):
        completer.remember(["sha1-aaa", "sha1-bbb"])

        assert get_completions_list(completer, "share sha1-aaa/ ") == ["sha1-bbb"]

    def test_other_commands_have_no_argument_completion(self, completer):
        completer.remember(["sha1-aaa"])

        assert get_completions_list(completer, "set-token ") == []

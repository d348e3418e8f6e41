"""Custom completer for the share CLI."""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS


class ShareCompleter(Completer):
    """
    Completes command names for the first token, and repeats blobrefs
    already typed earlier in the session for 'share' arguments.
    """

    def __init__(self):
        self.seen_refs: set[str] = set()

    def remember(self, refs: Iterable[str]) -> None:
        """Record blobrefs so later 'share' commands can complete them."""
        self.seen_refs.update(refs)

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        if tokens[0].lower() != "share":
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        already_typed = set(tokens[1:])
        already_typed.discard(current_word)

        for ref in sorted(self.seen_refs):
            if ref in already_typed or ref + "/" in already_typed:
                continue
            if ref.startswith(current_word):
                yield Completion(ref, start_position=-len(current_word))

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

"""
Tab completion for the gh-dungeon REPL.

This module provides verb and direction completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from .commands import DIRECTIONS, VERBS


class VerbCompleter(Completer):
    """Completes the verb, then the direction for 'go' and 'shift'."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        words = text.split()

        if not words:
            candidates = VERBS
            word = ""
        elif text.endswith(' '):
            # Verb typed, offer its arguments
            candidates = DIRECTIONS.get(words[0], []) if len(words) == 1 else []
            word = ""
        elif len(words) == 1:
            candidates = VERBS
            word = words[0]
        else:
            candidates = DIRECTIONS.get(words[0], []) if len(words) == 2 else []
            word = words[-1]

        for item in candidates:
            if item.startswith(word):
                yield Completion(item, start_position=-len(word))

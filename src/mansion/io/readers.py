from __future__ import annotations

"""Input capabilities for the explorer.

Every reader hands out one whitespace-delimited token per call. Tokens left
on the current line are kept for the next call unless ``discard_line`` is
invoked, which is what the explorer does after an invalid option so the rest
of a bad line is never reinterpreted as a fresh choice.
"""

from collections import deque
from typing import Callable, Deque, Iterable, Iterator, Optional

from rich.console import Console

from mansion.core.errors import ChoiceReadError


class LineChoiceReader:
    """Token reader over any iterable of text lines."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pending: Deque[str] = deque()

    def _next_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise ChoiceReadError("End of input reached") from None

    def read_token(self) -> str:
        # Blank lines are skipped, like whitespace before a scanf conversion
        while not self._pending:
            self._pending.extend(self._next_line().split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()


class ScriptedChoiceReader(LineChoiceReader):
    """Reader fed from a fixed list of tokens, one per line."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens = list(tokens)
        super().__init__(self.tokens)


class ConsoleChoiceReader(LineChoiceReader):
    """Interactive reader prompting on a rich console."""

    def __init__(self, console: Console, prompt: str = "> ", input_fn: Optional[Callable[[str], str]] = None):
        self.console = console
        self.prompt = prompt
        self._input = input_fn or console.input
        super().__init__(self._prompt_lines())

    def _prompt_lines(self) -> Iterator[str]:
        while True:
            try:
                yield self._input(self.prompt)
            except EOFError:
                return
            except (OSError, UnicodeDecodeError, KeyboardInterrupt) as exc:
                raise ChoiceReadError(f"Failed to read choice: {exc!r}") from exc


__all__ = ["LineChoiceReader", "ScriptedChoiceReader", "ConsoleChoiceReader"]

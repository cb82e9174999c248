"""Interactive menu loop driving an IntervalSet.

The shell owns all parsing and presentation. It turns raw console tokens into
integers, calls IntervalSet operations, and renders their results; the
interval set itself never performs I/O.
"""

import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from rich.console import Console

from intervalset.config import ShellConfig
from intervalset.core import IntervalSet
from intervalset.display import (
    display_declined,
    display_error,
    display_intervals,
    display_menu,
    display_success,
)
from intervalset.logging_config import get_logger
from intervalset.result import InvalidRange, NotFound, WriteResult

logger = get_logger(__name__)


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO):
        self._stream: TextIO = stream
        self._pending: Iterator[str] = iter(())

    def next(self) -> str:
        while True:
            token = next(self._pending, None)
            if token is not None:
                return token
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = iter(line.split())

    def discard_line(self) -> None:
        self._pending = iter(())


class Shell:
    def __init__(
        self,
        intervals: IntervalSet | None = None,
        config: ShellConfig | None = None,
        stdin: TextIO | None = None,
        console: Console | None = None,
    ):
        self.intervals: IntervalSet = intervals if intervals is not None else IntervalSet()
        self.config: ShellConfig = config or ShellConfig()
        self.console: Console = console or Console()
        self._tokens: _Tokens = _Tokens(stdin or sys.stdin)
        self._commands: dict[str, Callable[[], bool]] = {
            "1": self._add,
            "2": self._delete,
            "3": self._query_point,
            "4": self._query_range,
            "5": self._display,
            "6": self._clear,
            "7": self._exit,
        }

    def run(self) -> int:
        """Run the menu loop until Exit is chosen or input ends.

        Returns:
            Process exit status (always 0).
        """
        try:
            while True:
                display_menu(self.config.title, self.console)
                self.console.print(self.config.prompt, end="")
                if not self.handle(self._tokens.next()):
                    break
        except EOFError:
            logger.debug("Input closed; leaving shell")
            self.console.print()
        return 0

    def handle(self, choice: str) -> bool:
        """Dispatch one menu choice.

        Returns:
            False when the shell should stop, True otherwise.
        """
        command = self._commands.get(choice)
        if command is None:
            display_declined("Invalid choice. Try again.", self.console)
            return True
        try:
            return command()
        except ValueError as e:
            self._tokens.discard_line()
            display_error(str(e), self.console)
            return True

    def _read_ints(self, prompt: str, count: int) -> list[int]:
        self.console.print(prompt, end="")
        values = []
        for _ in range(count):
            token = self._tokens.next()
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"Expected an integer, got {token!r}") from None
        return values

    def _report(self, result: WriteResult, action: str, start: int, end: int) -> None:
        if result.success:
            display_success(f"Interval [{start}, {end}] {action}.", self.console)
        elif isinstance(result.error, InvalidRange):
            display_declined("Invalid interval: start > end", self.console)
        elif isinstance(result.error, NotFound):
            display_declined(f"Interval [{start}, {end}] not found.", self.console)
        else:
            display_error(str(result.error), self.console)

    def _add(self) -> bool:
        start, end = self._read_ints("Enter start and end: ", 2)
        self._report(self.intervals.add(start, end), "added", start, end)
        return True

    def _delete(self) -> bool:
        start, end = self._read_ints("Enter start and end of interval to delete: ", 2)
        self._report(self.intervals.delete(start, end), "deleted", start, end)
        return True

    def _query_point(self) -> bool:
        (point,) = self._read_ints("Enter point to query: ", 1)
        if self.intervals.query_point(point):
            self.console.print(f"Point {point} exists in an interval.")
        else:
            self.console.print(f"Point {point} does not exist in any interval.")
        return True

    def _query_range(self) -> bool:
        start, end = self._read_ints("Enter range to query (start end): ", 2)
        if self.intervals.query_range(start, end):
            self.console.print(
                f"Range [{start}, {end}] overlaps with stored intervals."
            )
        else:
            self.console.print(f"Range [{start}, {end}] does not overlap.")
        return True

    def _display(self) -> bool:
        display_intervals(self.intervals.list(), self.console)
        return True

    def _clear(self) -> bool:
        self.intervals.clear()
        display_success("All intervals cleared.", self.console)
        return True

    def _exit(self) -> bool:
        self.console.print("Exiting...")
        return False


__all__ = ["Shell"]

# smart_fridge/smart_fridge/api/input_reader.py
from __future__ import annotations

import sys
from datetime import date
from typing import Callable, Optional, TextIO, TypeVar

from smart_fridge.api.schemas import parse_date, parse_number, parse_unit
from smart_fridge.core.config import DATE_FORMAT
from smart_fridge.domain.units import UNITS, Unit

T = TypeVar("T")


class InputReader:
    """Line-oriented prompts over a pair of text streams.

    Every read_* method keeps asking until the answer parses. EOFError from
    the input stream propagates so the caller can shut down.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, date_format: str = DATE_FORMAT) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.date_format = date_format

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _until(self, prompt: str, parse: Callable[[str], T], complaint: str) -> T:
        while True:
            raw = self._line(prompt)
            try:
                return parse(raw)
            except ValueError:
                self.say(complaint)

    def read_text(self, prompt: str) -> str:
        def _non_blank(s: str) -> str:
            if not s:
                raise ValueError("blank")
            return s

        return self._until(prompt, _non_blank, "Invalid input. Enter a new one.")

    def read_int(self, prompt: str) -> int:
        def _positive_int(s: str) -> int:
            n = int(s)
            if n <= 0:
                raise ValueError("not positive")
            return n

        return self._until(prompt, _positive_int, "Invalid input. Enter a positive whole number.")

    def read_float(self, prompt: str) -> float:
        def _positive(s: str) -> float:
            x = parse_number(s)
            if not x > 0:
                raise ValueError("not positive")
            return x

        return self._until(prompt, _positive, "Invalid input. Enter a positive number.")

    def read_date(self, prompt: str) -> date:
        example = date(2025, 1, 31).strftime(self.date_format)
        return self._until(
            prompt,
            lambda s: parse_date(s, self.date_format),
            f"Invalid date format. Enter a valid date like '{example}'.",
        )

    def read_unit(self, prompt: str) -> Unit:
        self.say(prompt)
        self.say(", ".join(u.symbol for u in UNITS))
        return self._until("> ", parse_unit, "Invalid unit. Enter a valid unit.")

    def read_yes(self, prompt: str) -> bool:
        def _yes_no(s: str) -> bool:
            if s not in ("1", "2"):
                raise ValueError("expected 1 or 2")
            return s == "1"

        return self._until(f"{prompt}\n[1] Yes\n[2] No\n> ", _yes_no, "Invalid input. Enter 1 for Yes or 2 for No.")

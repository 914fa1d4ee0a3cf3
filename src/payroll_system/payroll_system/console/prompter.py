from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO, TypeVar

from ..common.validators import parse_float, parse_int
from ..core.constants import INVALID_NUMBER_MESSAGE
from ..core.exceptions import InputExhaustedError, ValidationError

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)


class Prompter:
    """Line-oriented console reader that keeps asking until a number parses.

    A token is the first whitespace-delimited word of a line; whatever follows
    it on the same line is discarded. Blank lines are skipped without
    repeating the prompt. Every read raises `InputExhaustedError` once the
    input stream is exhausted.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def say(self, message: str) -> None:
        self.write(message + "\n")

    def _next_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise InputExhaustedError("input stream closed")
        return line.rstrip("\r\n")

    def read_token(self) -> str:
        while True:
            words = self._next_line().split(maxsplit=1)
            if words:
                return words[0]

    def read_line(self, prompt: str) -> str:
        self.write(prompt)
        return self._next_line()

    def read_number(self, prompt: str, parse: Callable[[str], N]) -> N:
        while True:
            self.write(prompt)
            token = self.read_token()
            try:
                return parse(token)
            except ValidationError as e:
                logger.debug("Rejected numeric input: %s", e)
                self.say(INVALID_NUMBER_MESSAGE)

    def read_int(self, prompt: str) -> int:
        return self.read_number(prompt, parse_int)

    def read_float(self, prompt: str) -> float:
        return self.read_number(prompt, parse_float)

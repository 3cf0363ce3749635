"""
Interactive read loop and script runner for minilisp.

The loop reads a line at a time and accumulates lines until the buffer's
parentheses balance, then evaluates the buffer as one fragment and prints the
rendering of its value. A failed evaluation is reported and the loop goes on
with an empty buffer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from minilisp.config import get_log_level, get_prompt
from minilisp.errors import MiniLispError, MiniLispSyntaxError
from minilisp.interpreter import Interpreter
from minilisp.reader.tokenizer import split_syntax

logger = logging.getLogger(__name__)


def is_balanced(text: str) -> bool:
    """True once every '(' outside string literals has a matching ')' (or there are extra ')').

    An unterminated string literal is never balanced.
    """
    depth = 0
    try:
        for part in split_syntax(text):
            if part == "(":
                depth += 1
            elif part == ")":
                depth -= 1
    except MiniLispSyntaxError:
        return False
    return depth <= 0


class Repl:
    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: Optional[str] = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt if prompt is not None else get_prompt()
        self.buffer = ""

    def feed(self, line: str) -> Optional[str]:
        """
        Add one line to the buffer. Returns the text to show when the buffer
        was evaluated, or None while more input is needed.
        """
        if not self.buffer and not line.strip():
            return None
        self.buffer += line
        if not is_balanced(self.buffer):
            return None

        code, self.buffer = self.buffer, ""
        try:
            return self.interp.render(self.interp.eval(code))
        except MiniLispError as ex:
            logger.debug("evaluation failed", exc_info=True)
            return f"error: {ex}"

    def run(self) -> None:
        while True:
            if not self.buffer:
                self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n")
                break
            text = self.feed(line)
            if text is not None:
                print(text, file=self.stdout)


def run_file(path: Path, interp: Optional[Interpreter] = None) -> None:
    interp = interp if interp is not None else Interpreter()
    interp.eval_all(path.read_text(encoding="utf-8"))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp", description="minilisp interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="script to run; starts the REPL when omitted")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    if args.file is None:
        Repl().run()
        return 0
    try:
        run_file(args.file)
    except MiniLispError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1
    return 0

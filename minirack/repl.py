"""Interactive read-eval-print loop for minirack. Uses cmd as backend."""

from __future__ import annotations

import argparse
import cmd
import logging
import sys
from pathlib import Path

from minirack.config import debugging_enabled
from minirack.errors import MinirackError
from minirack.interpreter import Interpreter
from minirack.printer import display_string
from minirack.reader.parser import needs_more_input

INTRO = "minirack :: type 'end' to quit"
RESULT_PREFIX = "==> "


def format_error(err: Exception) -> str:
    if isinstance(err, RecursionError):
        return "MinirackError: maximum recursion depth exceeded"
    return f"{type(err).__name__}: {err}"


class Shell(cmd.Cmd):
    """minirack interpreter shell."""
    prompt = ">>> "
    secondary_prompt = "  > "  # used for line continuations
    _tmp_prompt = ">>> "

    def __init__(self, itp: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.itp = itp
        self._tmp_line = ""

    def cmdloop(self, intro=None):
        """Read lines until `end` or end of input.

        cmd.Cmd reports end of input as the line "EOF", which is also a valid
        symbol, so the loop reads lines itself and only calls do_EOF when the
        input is exhausted.
        """
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            print(self.intro, file=self.stdout)
        stop = False
        while not stop:
            line = self._read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.onecmd(line)
        self.postloop()

    def _read_line(self) -> str | None:
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line: str) -> bool:
        # Every line is source text; cmd's first-word dispatch would misread "(end)".
        if not self._tmp_line and line.strip() == "end":
            return True
        return self.default(line)

    def default(self, line: str) -> bool:
        """Buffers lines until brackets balance, then evaluates the buffer."""
        source = self._tmp_line + line + "\n"
        if needs_more_input(source):
            self._tmp_line = source
            self.prompt = self.secondary_prompt
            return False

        self._tmp_line = ""
        self.prompt = self._tmp_prompt
        self.run_source(source)
        return False

    def run_source(self, source: str) -> None:
        """Evaluate and echo each value; an error abandons the rest of `source`."""
        try:
            for value in self.itp.eval_all(source):
                print(RESULT_PREFIX + display_string(value), file=self.stdout)
        except (MinirackError, RecursionError) as err:
            print(format_error(err), file=self.stdout)

    def do_EOF(self, arg: str) -> bool:
        """Exits interpreter."""
        print(file=self.stdout)
        return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minirack",
        description="Evaluate minirack source files or start an interactive session.",
    )
    parser.add_argument("files", nargs="*", help="source files to evaluate before the session starts")
    parser.add_argument("--debug", action="store_true", help="trace each evaluation step (or set MINIRACK_DEBUG=1)")
    parser.add_argument("--no-prelude", action="store_true", help="start without the derived-function prelude")
    parser.add_argument("--no-repl", action="store_true", help="exit after evaluating the given files")
    args = parser.parse_args(argv)

    if args.debug or debugging_enabled():
        logging.basicConfig(level=logging.DEBUG, format="      %(message)s")

    itp = Interpreter(prelude=None if args.no_prelude else 'auto')

    for path in args.files:
        try:
            for value in itp.eval_all(Path(path).read_text(encoding="utf-8")):
                print(RESULT_PREFIX + display_string(value))
        except (MinirackError, RecursionError, OSError) as err:
            print(f"{path}: {format_error(err)}", file=sys.stderr)
            return 1

    if args.no_repl:
        return 0

    Shell(itp).cmdloop(intro=INTRO)
    return 0

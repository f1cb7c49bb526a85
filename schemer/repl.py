"""
Read-eval-print loop for schemer.

Reads forms from a text stream (accumulating lines until an expression is
complete), evaluates them in one Interpreter so definitions persist, prints
each result and keeps going after errors. Stops cleanly on (quit) or EOF.
"""

from __future__ import annotations

import logging
from typing import TextIO

from schemer.errors import SchemeError, SchemeIncompleteInput
from schemer.interpreter import Interpreter
from schemer.printer import to_string
from schemer.reader.parser import parse_all
from schemer.evaluation.evaluator import evaluate
from schemer.types.environment import EMPTY_ENV
from schemer.types.quit import Quit
from schemer.types.unspecified import Unspecified

logger = logging.getLogger(__name__)

PROMPT = "schemer> "
CONTINUATION_PROMPT = "....... "


class Repl:
    def __init__(self, interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: bool = True):
        self.interp = interp
        self.stdin = stdin
        self.stdout = stdout
        self.prompt = prompt

    def _write_prompt(self, text: str) -> None:
        if self.prompt:
            self.stdout.write(text)
            self.stdout.flush()

    def run(self) -> int:
        """Run until (quit) or end of input. Returns a process exit status."""
        if self.interp.halted:
            return 0
        buffer = ""
        self._write_prompt(PROMPT)
        for line in self.stdin:
            buffer += line
            try:
                exprs = parse_all(buffer)
            except SchemeIncompleteInput:
                self._write_prompt(CONTINUATION_PROMPT)
                continue
            except SchemeError as ex:
                self._report(ex)
                buffer = ""
                self._write_prompt(PROMPT)
                continue
            buffer = ""
            for expr in exprs:
                try:
                    result = evaluate(expr, EMPTY_ENV, self.interp.context)
                except SchemeError as ex:
                    self._report(ex)
                    break
                except RecursionError:
                    logger.error("recursion too deep while evaluating %s", to_string(expr))
                    self.stdout.write("error: recursion too deep\n")
                    break
                if result is Quit:
                    return 0
                if result is not Unspecified:
                    self.stdout.write(to_string(result) + "\n")
            self._write_prompt(PROMPT)
        if buffer.strip():
            logger.warning("discarding incomplete input at end of stream")
        return 0

    def _report(self, ex: SchemeError) -> None:
        logger.error("%s: %s", type(ex).__name__, ex)
        self.stdout.write(f"error: {ex}\n")

"""A small read-eval-print loop that prompts for integer parameters."""

from __future__ import annotations

import dataclasses
import enum
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO, Union

QUIT_WORDS = frozenset({"q", "Q"})
ERROR_VALUE = 1


class ParamType(enum.Enum):
    """Kinds of value a parameter may hold."""

    INT = "int"


@dataclass
class Param:
    """A prompted parameter and the value last entered for it."""

    prompt: str
    type: ParamType = ParamType.INT
    value: int = -1


Evaluator = Callable[[list[Param]], str]


@dataclass(frozen=True)
class FnSpec:
    """An evaluator together with the names it is known by."""

    fn: Evaluator
    short_name: str
    name: str


class Repl:
    """Prompt for each parameter, evaluate the selected function, print the result.

    Entering ``q`` or ``Q`` (or reaching end of input) stops the loop. Input
    that is not an integer is reported and replaced by the error value 1.
    """

    def __init__(
        self,
        fns: Union[Evaluator, Iterable[FnSpec]],
        params: Iterable[Param] | None = None,
        *,
        input: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        if callable(fns):
            fns = [FnSpec(fns, "", "")]
        self.fns: list[FnSpec] = list(fns)
        self.params: list[Param] = (
            list(params) if params is not None else [Param("n:")]
        )
        self.current = self.fns[0].name if self.fns else ""
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.terminus = False
        self.result = ""

    def _parse(self, text: str) -> int:
        try:
            return int(text)
        except ValueError as exc:
            self.output.write(f"error: invalid_argument...\n{exc}\n")
            return ERROR_VALUE

    def read(self) -> None:
        """Prompt for every parameter, stopping the loop on a quit word."""
        self.output.write("\n")
        for param in self.params:
            self.output.write(f"{param.prompt} ")
            self.output.flush()
            line = self.input.readline()
            text = line.rstrip()
            if not line or text in QUIT_WORDS:
                self.terminus = True
                return
            param.value = self._parse(text)

    def eval(self) -> None:
        """Apply the selected function to copies of the parameters."""
        spec = next((f for f in self.fns if f.name == self.current), None)
        if spec is None:
            raise LookupError(f"no function named {self.current!r}")
        self.result = spec.fn([dataclasses.replace(p) for p in self.params])

    def print(self) -> None:
        """Write the last result on its own line."""
        self.output.write(f"{self.result}\n")
        self.output.flush()

    def run(self) -> None:
        """Loop read, eval and print until told to quit."""
        while not self.terminus:
            self.read()
            if self.terminus:
                break
            self.eval()
            self.print()
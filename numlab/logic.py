"""Building blocks for statements in a small predicate calculus."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Statement:
    """A sentence given as text."""

    text: str


@dataclass(frozen=True)
class Proposition(Statement):
    """A statement that is either true or false; assumed true by default."""

    is_true: bool = True


@dataclass(frozen=True)
class Let:
    """A binding of given properties."""

    given_properties: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "given_properties", tuple(self.given_properties))


class Qualifier(enum.Enum):
    """Existential or universal quantification."""

    EX = "exists"
    AX = "for all"


@dataclass(frozen=True)
class Stmt:
    """A quantified predicate."""

    qualifier: Qualifier = Qualifier.EX
    predicate: str = ""


class Operator(enum.Enum):
    """Connectives joining two statements."""

    CONJUNCTION = "and"
    DISJUNCTION = "or"


@dataclass(frozen=True)
class CompoundStmt:
    """Two statements joined by a connective."""

    lhs: Stmt
    rhs: Stmt
    op: Operator


class StatementSource(enum.Enum):
    """Where a statement came from."""

    GIVEN = "given"
    DEDUCED = "deduced"


def prove() -> bool:
    """Return the verdict of the prover, which accepts everything."""
    return True
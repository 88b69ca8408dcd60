"""Structured parse failures.

A failure records where the input first diverged from the grammar and what was
expected there. Lark's own exceptions never leave this package; they are mapped
to a ``ParseFailure`` by ``failure_from_lark``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from cubeparse.grammar import COLOR_TERMINALS, GAMES_PARSER, TERMINAL_LABELS


class FailureKind(str, Enum):
    MALFORMED_INTEGER = "MalformedInteger"
    UNKNOWN_COLOR = "UnknownColor"
    STRUCTURAL_MISMATCH = "StructuralMismatch"
    INCOMPLETE_INPUT = "IncompleteInput"


@dataclass(frozen=True)
class ParseFailure:
    kind: FailureKind
    rule: str
    offset: int
    line: int
    column: int
    expected: tuple[str, ...] = ()

    def message(self) -> str:
        return f"line {self.line}: expected {self.rule} at column {self.column}"


class GameParseError(ValueError):
    """Raised by the strict entry points; wraps the ``ParseFailure``."""

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.message())
        self.failure = failure


def _position(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _labels(names: Iterable[str]) -> tuple[str, ...]:
    wanted = set(names)
    ordered = [label for name, label in TERMINAL_LABELS.items() if name in wanted]
    ordered.extend(sorted(name for name in wanted if name not in TERMINAL_LABELS))
    return tuple(dict.fromkeys(ordered))


def _acceptable_terminals(prefix: str, rule: str) -> set[str]:
    # Error sets from lark come from merged LALR states and can name terminals
    # that are not legal here; replaying the prefix gives the exact set.
    interactive = GAMES_PARSER.parse_interactive(prefix, start=rule)
    interactive.exhaust_lexer()
    return set(interactive.accepts())


def failure_from_lark(err: UnexpectedInput, text: str, rule: str) -> ParseFailure:
    """Classify the first point of divergence reported by lark.

    ``rule`` is the start production ``text`` was parsed against.
    """
    if isinstance(err, UnexpectedCharacters):
        at_end = False
        offset = err.pos_in_stream
    elif isinstance(err, UnexpectedToken):
        at_end = err.token.type == "$END"
        offset = len(text) if at_end else err.token.start_pos
    elif isinstance(err, UnexpectedEOF):
        at_end = True
        offset = len(text)
    else:
        raise TypeError(f"Unsupported lark error: {type(err).__name__}")

    names = _acceptable_terminals(text[:offset], rule)
    if at_end:
        kind = FailureKind.INCOMPLETE_INPUT if offset > 0 else FailureKind.STRUCTURAL_MISMATCH
    elif "POSITIVE_INTEGER" in names:
        kind = FailureKind.MALFORMED_INTEGER
    elif names & COLOR_TERMINALS:
        kind = FailureKind.UNKNOWN_COLOR
    else:
        kind = FailureKind.STRUCTURAL_MISMATCH

    expected = _labels(names) or (TERMINAL_LABELS["$END"],)
    line, column = _position(text, offset)
    return ParseFailure(
        kind=kind,
        rule=" or ".join(expected),
        offset=offset,
        line=line,
        column=column,
        expected=expected,
    )

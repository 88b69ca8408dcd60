"""Parse cube game lines into ``Game`` records.

``GameLineParser`` is stateless apart from its config: each call runs the shared
LALR parser from ``cubeparse.grammar`` over the prepared text and builds fresh
records. Malformed input either raises ``GameParseError`` (strict entry points)
or comes back as a ``ParseFailure`` (``try_*`` entry points).
"""

from __future__ import annotations

import logging
from typing import Any

from lark.exceptions import UnexpectedInput

from cubeparse.config import DEFAULT_CONFIG, ParserConfig
from cubeparse.errors import GameParseError, ParseFailure, failure_from_lark
from cubeparse.grammar import GAMES_PARSER, START_RULES
from cubeparse.models import Game, GameList

log = logging.getLogger("cubeparse.parser")


class GameLineParser:
    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def parse_rule(self, rule: str, text: str) -> Any:
        """Match ``text`` in full against one named production."""
        if rule not in START_RULES:
            raise ValueError(f"Unknown rule '{rule}'. Choose from {list(START_RULES)}.")
        prepared = self.config.prepare(text)
        try:
            return GAMES_PARSER.parse(prepared, start=rule)
        except UnexpectedInput as err:
            failure = failure_from_lark(err, prepared, rule)
            log.debug("Rejected %s input: %s", rule, failure.message())
            raise GameParseError(failure) from err

    def parse_game(self, text: str) -> Game:
        return self.parse_rule("game", text)

    def parse_games(self, text: str) -> GameList:
        return self.parse_rule("games", text)

    def try_parse_game(self, text: str) -> Game | ParseFailure:
        try:
            return self.parse_game(text)
        except GameParseError as err:
            return err.failure

    def try_parse_games(self, text: str) -> GameList | ParseFailure:
        try:
            return self.parse_games(text)
        except GameParseError as err:
            return err.failure


def parse_rule(rule: str, text: str, config: ParserConfig | None = None) -> Any:
    return GameLineParser(config).parse_rule(rule, text)


def parse_game(text: str, config: ParserConfig | None = None) -> Game:
    """Parse a single ``Game <N>: ...`` line."""
    return GameLineParser(config).parse_game(text)


def parse_games(text: str, config: ParserConfig | None = None) -> GameList:
    """Parse newline-separated game lines, preserving their order."""
    return GameLineParser(config).parse_games(text)


def try_parse_game(text: str, config: ParserConfig | None = None) -> Game | ParseFailure:
    return GameLineParser(config).try_parse_game(text)


def try_parse_games(text: str, config: ParserConfig | None = None) -> GameList | ParseFailure:
    return GameLineParser(config).try_parse_games(text)

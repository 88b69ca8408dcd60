"""Read puzzle files and parse them one line at a time."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from cubeparse.config import DEFAULT_CONFIG, ParserConfig
from cubeparse.errors import GameParseError, ParseFailure
from cubeparse.models import Game, GameList
from cubeparse.parser import GameLineParser

log = logging.getLogger("cubeparse.loader")


@dataclass
class LineResult:
    line_number: int
    game: Game | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def iter_game_lines(path: Path, config: ParserConfig | None = None) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, text)`` pairs, 1-based, without line terminators."""
    cfg = config or DEFAULT_CONFIG
    with path.open(encoding=cfg.encoding, newline="") as f:
        for line_number, raw in enumerate(f, start=1):
            text = raw.rstrip("\r\n")
            if cfg.skip_blank_lines and not text.strip():
                continue
            yield line_number, text


def _parse_line(parser: GameLineParser, line_number: int, text: str) -> LineResult:
    try:
        return LineResult(line_number=line_number, game=parser.parse_game(text))
    except GameParseError as err:
        # Offsets stay relative to the line; only the reported line moves.
        failure = dataclasses.replace(err.failure, line=line_number)
        return LineResult(line_number=line_number, failure=failure)


def parse_file(path: Path, config: ParserConfig | None = None) -> list[LineResult]:
    """Parse every game line in ``path`` independently of the others."""
    if not path.is_file():
        raise FileNotFoundError(f"Puzzle input not found: {path}")
    parser = GameLineParser(config)
    results = [_parse_line(parser, n, text) for n, text in iter_game_lines(path, config)]
    failures = sum(1 for r in results if not r.ok)
    log.info("Parsed %d lines from %s (%d malformed)", len(results), path, failures)
    for result in results:
        if result.failure is not None:
            log.debug("%s: %s", path, result.failure.message())
    return results


def load_games(path: Path, config: ParserConfig | None = None) -> GameList:
    """Like ``parse_file`` but all-or-nothing: the first bad line raises."""
    games: list[Game] = []
    for result in parse_file(path, config):
        if result.failure is not None:
            raise GameParseError(result.failure)
        if result.game is not None:
            games.append(result.game)
    return GameList(games=games)

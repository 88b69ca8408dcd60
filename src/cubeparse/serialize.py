"""Plain-dict and JSON views of parsed games for downstream consumers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import orjson

from cubeparse.errors import ParseFailure
from cubeparse.models import Game


def game_to_dict(game: Game) -> dict[str, Any]:
    return {
        "number": game.number,
        "draws": [
            {"entries": [{"amount": e.amount, "color": e.color.value} for e in draw.entries]}
            for draw in game.draws
        ],
    }


def failure_to_dict(failure: ParseFailure) -> dict[str, Any]:
    return {
        "kind": failure.kind.value,
        "rule": failure.rule,
        "offset": failure.offset,
        "line": failure.line,
        "column": failure.column,
        "expected": list(failure.expected),
        "message": failure.message(),
    }


def dumps_games(games: Iterable[Game], indent: bool = False) -> bytes:
    payload = [game_to_dict(game) for game in games]
    if indent:
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2)
    return orjson.dumps(payload)

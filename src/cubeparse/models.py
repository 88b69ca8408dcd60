"""Typed records produced by the game line parser.

A puzzle line such as ``Game 3: 3 blue, 4 red; 1 red, 2 green`` becomes a
``Game`` holding one ``CubeDraw`` per ``;``-separated set, each draw holding its
``CubeCount`` entries in source order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class CubeColor(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass(frozen=True)
class CubeCount:
    amount: int
    color: CubeColor


@dataclass
class CubeDraw:
    """One handful of cubes; repeated colors are kept as written."""

    entries: list[CubeCount]


@dataclass
class Game:
    number: int
    draws: list[CubeDraw]


@dataclass
class GameList:
    games: list[Game] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.games)

    def __iter__(self) -> Iterator[Game]:
        return iter(self.games)

    def __getitem__(self, index: int) -> Game:
        return self.games[index]

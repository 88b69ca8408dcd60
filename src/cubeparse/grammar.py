"""Grammar for cube game lines and the shared LALR parser built from it.

Every production can be used as a start rule, so callers can parse a lone
``cube_draw`` or ``cube_color`` as easily as a whole block of games.
"""

from __future__ import annotations

from lark import Lark, Token, Transformer

from cubeparse.models import CubeColor, CubeCount, CubeDraw, Game, GameList

GRAMMAR = r"""
games: game (_NEWLINE game)*
game: _GAME_TAG game_number _NUMBER_SEP sets_of_cube_draws
game_number: positive_integer
sets_of_cube_draws: cube_draw (_DRAW_SEP cube_draw)*
cube_draw: amount_and_color (_PAIR_SEP amount_and_color)*
amount_and_color: positive_integer _SPACE cube_color
positive_integer: POSITIVE_INTEGER
cube_color: RED | GREEN | BLUE

POSITIVE_INTEGER: /[1-9][0-9]*/
RED: "red"
GREEN: "green"
BLUE: "blue"
_GAME_TAG: "Game "
_NUMBER_SEP: ": "
_DRAW_SEP: "; "
_PAIR_SEP: ", "
_SPACE: " "
_NEWLINE: /\r?\n/
"""

START_RULES: tuple[str, ...] = (
    "games",
    "game",
    "game_number",
    "sets_of_cube_draws",
    "cube_draw",
    "amount_and_color",
    "cube_color",
    "positive_integer",
)

# Human-readable names for terminals, used in failure messages.
TERMINAL_LABELS: dict[str, str] = {
    "POSITIVE_INTEGER": "positive_integer",
    "RED": "cube_color",
    "GREEN": "cube_color",
    "BLUE": "cube_color",
    "_GAME_TAG": '"Game "',
    "_NUMBER_SEP": '": "',
    "_DRAW_SEP": '"; "',
    "_PAIR_SEP": '", "',
    "_SPACE": '" "',
    "_NEWLINE": "newline",
    "$END": "end of input",
}
COLOR_TERMINALS = frozenset({"RED", "GREEN", "BLUE"})
# int() refuses longer digit strings under the interpreter's default limit.
DIGIT_CHUNK = 1000


def digits_to_int(digits: str) -> int:
    """Convert a decimal digit string of any length to an int."""
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start : start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


class GameBuilder(Transformer):
    """Turn matched productions into model records, bottom-up."""

    def positive_integer(self, children: list[Token]) -> int:
        return digits_to_int(str(children[0]))

    def game_number(self, children: list[int]) -> int:
        return children[0]

    def cube_color(self, children: list[Token]) -> CubeColor:
        return CubeColor(str(children[0]))

    def amount_and_color(self, children: list) -> CubeCount:
        amount, color = children
        return CubeCount(amount=amount, color=color)

    def cube_draw(self, children: list[CubeCount]) -> CubeDraw:
        return CubeDraw(entries=list(children))

    def sets_of_cube_draws(self, children: list[CubeDraw]) -> list[CubeDraw]:
        return list(children)

    def game(self, children: list) -> Game:
        number, draws = children
        return Game(number=number, draws=draws)

    def games(self, children: list[Game]) -> GameList:
        return GameList(games=list(children))


GAMES_PARSER = Lark(
    GRAMMAR,
    parser="lalr",
    start=list(START_RULES),
    transformer=GameBuilder(),
)

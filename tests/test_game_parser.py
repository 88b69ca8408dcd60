from concurrent.futures import ThreadPoolExecutor

import pytest

from cubeparse.config import ParserConfig
from cubeparse.models import CubeColor, CubeCount, CubeDraw, Game
from cubeparse.parser import GameLineParser, parse_game, parse_games, parse_rule

RED, GREEN, BLUE = CubeColor.RED, CubeColor.GREEN, CubeColor.BLUE


def _draw(*pairs: tuple[int, CubeColor]) -> CubeDraw:
    return CubeDraw(entries=[CubeCount(amount=a, color=c) for a, c in pairs])


def test_parse_game_with_three_draws():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game == Game(
        number=1,
        draws=[
            _draw((3, BLUE), (4, RED)),
            _draw((1, RED), (2, GREEN), (6, BLUE)),
            _draw((2, GREEN)),
        ],
    )


def test_parse_game_with_single_draw():
    game = parse_game("Game 2: 1 blue, 2 green")
    assert game == Game(number=2, draws=[_draw((1, BLUE), (2, GREEN))])


def test_parse_game_keeps_colors_per_draw_unmerged():
    game = parse_game("Game 5: 6 red, 1 blue, 3 green; 3 green, 6 red")
    assert game.number == 5
    assert game.draws == [_draw((6, RED), (1, BLUE), (3, GREEN)), _draw((3, GREEN), (6, RED))]


def test_duplicate_color_within_draw_is_accepted_as_written():
    game = parse_game("Game 4: 3 red, 2 red")
    assert game.draws[0].entries == [CubeCount(3, RED), CubeCount(2, RED)]


def test_large_game_numbers_and_amounts_have_no_upper_bound():
    game = parse_game("Game 123456789012: 98765432109876 blue")
    assert game.number == 123456789012
    assert game.draws[0].entries[0].amount == 98765432109876


def test_parse_games_preserves_input_order():
    lines = [
        "Game 7: 1 red",
        "Game 3: 2 green; 4 blue",
        "Game 9: 5 blue, 6 red",
    ]
    games = parse_games("\n".join(lines))
    assert len(games) == 3
    assert [g.number for g in games] == [7, 3, 9]
    assert games[1].draws[1] == _draw((4, BLUE))


def test_parse_games_accepts_crlf_and_trailing_newline():
    games = parse_games("Game 1: 1 red\r\nGame 2: 2 blue\r\n")
    assert [g.number for g in games] == [1, 2]


def test_single_game_trailing_whitespace_is_trimmed_by_default():
    assert parse_game("Game 1: 3 red  \n").draws == [_draw((3, RED))]


@pytest.mark.parametrize("amount", [1, 9, 10, 407, 999999])
@pytest.mark.parametrize("color", ["red", "green", "blue"])
def test_amount_and_color_reads_back_the_written_pair(amount: int, color: str):
    assert parse_rule("amount_and_color", f"{amount} {color}") == CubeCount(amount, CubeColor(color))


def test_individual_rules_can_be_parsed():
    assert parse_rule("positive_integer", "42") == 42
    assert parse_rule("game_number", "7") == 7
    assert parse_rule("cube_color", "green") is GREEN
    assert parse_rule("cube_draw", "7 blue, 6 green, 3 red") == _draw((7, BLUE), (6, GREEN), (3, RED))
    sets = parse_rule("sets_of_cube_draws", "1 red; 2 blue")
    assert sets == [_draw((1, RED)), _draw((2, BLUE))]


def test_unknown_rule_is_rejected():
    with pytest.raises(ValueError, match="Unknown rule"):
        parse_rule("cube_colour", "red")


def test_parser_instance_reuses_config():
    parser = GameLineParser(ParserConfig(trim_trailing_whitespace=False))
    assert parser.parse_game("Game 8: 2 blue").number == 8
    assert parser.parse_games("Game 8: 2 blue\nGame 9: 1 red")[1].number == 9


def test_each_parse_returns_fresh_records():
    first = parse_game("Game 1: 1 red")
    second = parse_game("Game 1: 1 red")
    assert first == second
    assert first is not second
    assert first.draws is not second.draws


def test_integers_longer_than_int_conversion_limit():
    digits = "9" * 5000
    game = parse_game(f"Game {digits}: {digits} red")
    assert game.number == 10**5000 - 1
    assert game.draws[0].entries[0] == CubeCount(10**5000 - 1, RED)
    assert parse_rule("positive_integer", "1" + "0" * 4400) == 10**4400


def test_concurrent_parses_keep_results_separate():
    lines = [f"Game {n}: {n} red; {n + 1} blue" for n in range(1, 201)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        games = list(pool.map(parse_game, lines))
    assert [g.number for g in games] == list(range(1, 201))
    assert all(g.draws[1].entries == [CubeCount(g.number + 1, BLUE)] for g in games)

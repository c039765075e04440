"""Tests for ludo_rules/simulate.py - headless automated matches."""

import pytest

from ludo_rules.config.settings import Settings
from ludo_rules.engine.base import Color
from ludo_rules.events.events import GameEvent
from ludo_rules.simulate import main, parse_args, run_match


class TestRunMatch:
    @pytest.mark.parametrize("num_players", [2, 3, 4])
    def test_match_concludes(self, num_players):
        result = run_match(num_players=num_players, seed=1)
        assert isinstance(result.winner, Color)
        assert result.rolls > 0
        assert result.event_counts[GameEvent.GAME_WON] == 1
        assert result.event_counts[GameEvent.DICE_ROLLED] == result.rolls

    def test_two_players_only_opposite_seats_win(self):
        result = run_match(num_players=2, seed=5)
        assert result.winner in (Color.BLUE, Color.GREEN)

    def test_seed_is_reproducible(self):
        first = run_match(seed=21)
        second = run_match(seed=21)
        assert (first.winner, first.rolls, first.captures) == (second.winner, second.rolls, second.captures)

    def test_roll_limit(self):
        with pytest.raises(RuntimeError, match="did not finish"):
            run_match(seed=1, max_rolls=3)


class TestCli:
    def test_parse_args_defaults_from_settings(self):
        settings = Settings(_env_file=None, num_players=3, dice_seed=8, max_rolls=100)
        args = parse_args([], settings)
        assert args.players == 3
        assert args.seed == 8
        assert args.max_rolls == 100
        assert args.games == 1
        assert args.verbose is False

    def test_parse_args_overrides(self):
        args = parse_args(["--players", "2", "--games", "5", "--verbose"], Settings(_env_file=None))
        assert args.players == 2
        assert args.games == 5
        assert args.verbose is True

    def test_main_prints_results(self, capsys):
        assert main(["--players", "2", "--seed", "4", "--games", "2"]) == 0
        out = capsys.readouterr().out
        assert "Game 1:" in out
        assert "Game 2:" in out
        assert "wins" in out

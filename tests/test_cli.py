"""Tests for the command-line interface."""

import argparse

import pytest

from connectfour.interfaces.cli import SimpleCLI, main, parse_moves, parse_player
from connectfour.utils import Mark


def scripted(*answers):
    """An input() replacement that replays answers, then raises EOFError."""
    remaining = list(answers)

    def fake_input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


class TestParsing:
    def test_parse_moves(self):
        assert parse_moves("3,3, 4,") == [3, 3, 4]

    def test_parse_moves_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_moves("3,x")

    def test_parse_player_with_color(self):
        player = parse_player("Ann:red", Mark.ONE)
        assert (player.mark, player.name, player.color) == (Mark.ONE, "Ann", "red")

    def test_parse_player_without_color(self):
        assert parse_player("Bob", Mark.TWO).color is None

    def test_parse_player_missing_name(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_player(":red", Mark.ONE)


class TestCheckCommand:
    def test_reports_win(self, capsys):
        assert main(['check', '--moves', '0,0,1,1,2,2,3']) == 0
        out = capsys.readouterr().out
        assert "Result: Player 1 wins after 7 moves" in out

    def test_reports_in_progress(self, capsys):
        assert main(['check', '--moves', '3']) == 0
        assert "Result: in progress, Player 2 to move" in capsys.readouterr().out

    def test_reports_full_column(self, capsys):
        assert main(['check', '--width', '2', '--height', '1', '--moves', '0,0,1']) == 0
        out = capsys.readouterr().out
        assert "Move 2: column 0 is full, skipped" in out
        assert "Result: draw after 2 moves" in out

    def test_moves_after_game_over(self, capsys):
        assert main(['check', '--moves', '0,0,1,1,2,2,3,4']) == 2
        assert "Error: Game is over" in capsys.readouterr().err

    def test_out_of_range_column(self, capsys):
        assert main(['check', '--moves', '9']) == 2
        assert "column 9 out of range" in capsys.readouterr().err

    def test_invalid_board(self, capsys):
        assert main(['check', '--connect', '1', '--moves', '0']) == 2
        assert "victory_condition" in capsys.readouterr().err

    def test_bad_move_list_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['check', '--moves', 'a,b'])
        assert excinfo.value.code == 2


class TestPlayCommand:
    def test_game_to_win(self, capsys):
        cli = SimpleCLI(['play', '--player1', 'Ann:red', '--player2', 'Bob'],
                        input_func=scripted('0', '0', '1', '1', '2', '2', '3'))
        assert cli.run() == 0
        out = capsys.readouterr().out
        assert "Game over!" in out
        assert "Result: Ann (red) wins after 7 moves" in out

    def test_invalid_input_reprompts(self, capsys):
        cli = SimpleCLI(['play'], input_func=scripted('x', '9', 'q'))
        assert cli.run() == 0
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Column must be between 0 and 6." in out
        assert "Quitting game." in out

    def test_full_column_and_draw(self, capsys):
        cli = SimpleCLI(['play', '--width', '2', '--height', '1'],
                        input_func=scripted('0', '0', '1'))
        assert cli.run() == 0
        out = capsys.readouterr().out
        assert "Column 0 is full, pick another." in out
        assert "Result: draw after 2 moves" in out

    def test_restart(self, capsys):
        cli = SimpleCLI(['play'], input_func=scripted('0', 'r', 'q'))
        assert cli.run() == 0
        assert "Game restarted." in capsys.readouterr().out

    def test_end_of_input_quits(self, capsys):
        cli = SimpleCLI(['play'], input_func=scripted())
        assert cli.run() == 0
        assert "Quitting game." in capsys.readouterr().out


class TestOtherCommands:
    def test_benchmark(self, capsys):
        assert main(['benchmark', '--iterations', '20', '--seed', '7']) == 0
        out = capsys.readouterr().out
        assert "Board initialization" in out
        assert "Played 2 games" in out

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out

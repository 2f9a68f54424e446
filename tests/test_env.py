"""Tests for the Gymnasium environment wrapper."""

import numpy as np
import pytest

from connectfour.errors import InvalidStateError
from connectfour.game.env import ConnectFourEnv
from connectfour.utils import Mark


def run_actions(env, actions):
    step = None
    for action in actions:
        step = env.step(action)
    return step


class TestReset:
    def test_initial_observation(self):
        env = ConnectFourEnv()
        observation, info = env.reset(seed=0)

        assert observation.shape == (6, 7)
        assert observation.dtype == np.int8
        assert not observation.any()
        assert env.observation_space.contains(observation)
        assert info['valid_moves'] == list(range(7))
        assert info['current_player'] == Mark.ONE.value
        assert info['game_result'] == 'IN_PROGRESS'
        assert info['last_move'] is None

    def test_custom_dimensions(self):
        env = ConnectFourEnv(width=5, height=4, victory_condition=3)
        observation, _ = env.reset()
        assert observation.shape == (4, 5)
        assert env.action_space.n == 5

    def test_reset_clears_previous_episode(self):
        env = ConnectFourEnv()
        env.reset()
        run_actions(env, [0, 0, 1, 1, 2, 2, 3])
        observation, info = env.reset()
        assert not observation.any()
        assert info['moves_made'] == 0


class TestStep:
    def test_regular_move(self):
        env = ConnectFourEnv()
        env.reset()
        observation, reward, terminated, truncated, info = env.step(3)

        assert observation[0, 3] == Mark.ONE.value
        assert reward == env.reward_step
        assert terminated is False
        assert truncated is False
        assert info['last_move'] == (3, 0)
        assert info['current_player'] == Mark.TWO.value

    def test_player_one_win(self):
        env = ConnectFourEnv()
        env.reset()
        _, reward, terminated, _, info = run_actions(env, [0, 0, 1, 1, 2, 2, 3])
        assert reward == env.reward_win
        assert terminated is True
        assert info['game_result'] == 'WON'
        assert info['winning_line'] == [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert info['valid_moves'] == []

    def test_player_two_win(self):
        env = ConnectFourEnv()
        env.reset()
        _, reward, terminated, _, _ = run_actions(env, [0, 1, 0, 1, 0, 1, 2, 1])
        assert reward == env.reward_lose
        assert terminated is True

    def test_draw(self):
        env = ConnectFourEnv(width=2, height=1, victory_condition=3)
        env.reset()
        _, reward, terminated, _, info = run_actions(env, [0, 1])
        assert reward == env.reward_draw
        assert terminated is True
        assert info['game_result'] == 'DRAW'

    def test_full_column_truncates(self):
        env = ConnectFourEnv(width=2, height=1, victory_condition=3)
        env.reset()
        env.step(0)
        observation, reward, terminated, truncated, info = env.step(0)
        assert reward == env.reward_invalid_move
        assert terminated is False
        assert truncated is True
        assert info['invalid_move'] is True
        assert info['moves_made'] == 1

    def test_step_after_termination(self):
        env = ConnectFourEnv()
        env.reset()
        run_actions(env, [0, 0, 1, 1, 2, 2, 3])
        with pytest.raises(InvalidStateError):
            env.step(4)

    def test_numpy_action(self):
        env = ConnectFourEnv()
        env.reset()
        observation, *_ = env.step(np.int64(6))
        assert observation[0, 6] == Mark.ONE.value


class TestRender:
    def test_ascii(self):
        env = ConnectFourEnv(render_mode='ascii')
        env.reset()
        env.step(0)
        assert "| X . . . . . . |" in env.render()

    def test_human_prints(self, capsys):
        env = ConnectFourEnv(render_mode='human')
        env.reset()
        assert "0 1 2 3 4 5 6" in capsys.readouterr().out

    def test_no_render_mode(self):
        env = ConnectFourEnv()
        env.reset()
        assert env.render() is None

    def test_unsupported_mode(self):
        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode='rgb_array')

"""
env.py - Gymnasium environment wrapping a GameBoard

Exposes one game as a gymnasium.Env so agents written against the Gymnasium
API can drive the engine. Rewards are given from player one's point of view.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.board import GameBoard
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_VICTORY_CONDITION, DEFAULT_WIDTH,
                               GRID_DTYPE, GameStatus, Mark)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Actions are column indices; observations are copies of the grid
    (row 0 at the bottom) holding 0 for empty, 1 and 2 for the players.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 victory_condition: int = DEFAULT_VICTORY_CONDITION):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.board = GameBoard(width, height, victory_condition)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.board.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.board.height, self.board.width), dtype=GRID_DTYPE
        )

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")
        self.board.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Drop a piece for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.board.drop_piece(int(action))

        if not result.accepted:
            debug.warning(f"Invalid action: column {action} is full", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = result.state.is_terminal()
        if result.state.status is GameStatus.WON:
            reward = self.reward_win if result.state.winner.mark is Mark.ONE else self.reward_lose
        elif result.state.status is GameStatus.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode finished: {result.state}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_columns = self.board.valid_columns()
        last_move = self.board.last_move
        return {
            'valid_moves': valid_columns,
            'num_valid_moves': len(valid_columns),
            'current_player': self.board.current_player.mark.value,
            'game_result': self.board.state.status.name,
            'moves_made': self.board.move_count,
            'winning_line': self.board.winning_line(),
            'last_move': (last_move.column, last_move.row) if last_move else None,
        }

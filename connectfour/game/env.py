"""
env.py - Gymnasium environment for Connect Four

Exposes a GameSession through the Gymnasium interface so agents can drive the
same engine the terminal interface uses. Both players act through step(); the
reward is from the point of view of the player who just moved.
"""

from typing import Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.config import GameConfig
from connectfour.debug import debug
from connectfour.game.events import MoveRejected
from connectfour.game.session import GameSession
from connectfour.utils import COLS, ROWS, GameResult


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observation: the board grid (0 empty, 1 player one, 2 player two).
    Action: the column to drop into.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_tie = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01  # Small negative reward to encourage faster solutions

    def __init__(self, width: int = COLS, height: int = ROWS, render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            width: Number of columns
            height: Number of rows
            render_mode: One of metadata['render_modes'] or None
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        debug.debug("Initializing ConnectFourEnv", "env")

        self.session = GameSession(GameConfig(width=width, height=height))
        self.render_mode = render_mode
        self._last_rejection: Optional[MoveRejected] = None
        self.session.subscribe(MoveRejected, self._on_rejected)

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(low=0, high=2, shape=(height, width), dtype=np.int8)

    def _on_rejected(self, event: MoveRejected):
        self._last_rejection = event

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.session.restart()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player whose turn it is.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        self._last_rejection = None

        if not self.session.play_move(int(action)):
            reason = self._last_rejection.reason if self._last_rejection else "invalid_move"
            debug.warning(f"Invalid action {action}: {reason}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['reason'] = reason
            return self._get_observation(), self.reward_invalid_move, self.session.is_game_over(), True, info

        result = self.session.result
        terminated = result.is_game_over()
        if result == GameResult.TIE:
            debug.info("Game over: tie", "env")
            reward = self.reward_tie
        elif terminated:
            debug.info(f"Game over: {result.name}", "env")
            reward = self.reward_win
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        valid_moves = self.session.valid_columns()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.session.current_player.value,
            'game_result': self.session.result.name,
            'moves_made': self.session.moves_made,
            'winning_line': self.session.winning_line(),
            'last_move': self.session.last_move,
        }

    def close(self):
        self.session.unsubscribe(MoveRejected, self._on_rejected)

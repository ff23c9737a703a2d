"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard reset/step interface so that
scripted players and agents play the same rules as the presentation layer.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, Position
from .cell import COVERED_CODE, MINE_CODE
from .session import GameSession, GameStatus


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        (rows, columns) array of session display codes:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size columns * rows.
        Action i reveals the cell at (i % columns, i // columns).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session: Optional[GameSession] = None

        self.observation_space = spaces.Box(
            low=COVERED_CODE,
            high=MINE_CODE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(self.config, rng=self.np_random)
        self._steps = 0
        return self.session.view().grid, self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell selected by the action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.session is None:
            raise RuntimeError("Call reset() before step()")

        column, row = self._action_to_position(int(action))
        self._steps += 1

        revealed = self.session.reveal_at(column, row)
        reward = self._calculate_reward(revealed)

        observation = self.session.view().grid
        terminated = self.session.is_over
        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (column, row) position."""
        return action % self.config.columns, action // self.config.columns

    def _calculate_reward(self, revealed: list) -> float:
        if not revealed:
            return -0.1
        if self.session.status == GameStatus.WON:
            return 10.0
        if self.session.status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.session.status.name,
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session is None or self.session.is_over:
            return mask
        for column, row in self.session.board.positions():
            if self.session.board.cell(column, row).is_hidden:
                mask[row * self.config.columns + column] = True
        return mask

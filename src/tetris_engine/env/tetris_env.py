from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_engine.game import BOARD_HEIGHT, BOARD_WIDTH, Command, GameConfig, TetrisGame, TetrominoType
from tetris_engine.visualization.palette import color_for_value


# Agent-facing actions; pause and reset stay with the host.
ACTIONS: Tuple[Command, ...] = (
    Command.NONE,
    Command.LEFT,
    Command.RIGHT,
    Command.DOWN,
    Command.ROTATE,
)


class TetrisEnv(gym.Env):
    """Gymnasium view of the engine.

    Each step applies one command and then one gravity tick, matching a
    player who presses at most one key per timer interval. The reward is
    the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        self.observation_space = spaces.Box(
            low=0, high=len(TetrominoType), shape=(BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_renderable_board()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.catalogue.rng.seed(seed)
        self.game.reset()
        self.game.ensure_piece()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.execute(ACTIONS[int(action)])
        self.game.tick()
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            board = self.game.get_renderable_board()
            cell = 12
            h, w = board.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(board[y, x]))
            return img
        return None

    def close(self) -> None:
        pass

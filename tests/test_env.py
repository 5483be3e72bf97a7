import gymnasium as gym
import numpy as np

import tetris_engine.env  # noqa: F401
from tetris_engine.env.tetris_env import ACTIONS, TetrisEnv
from tetris_engine.game import Command


def test_registered_env_resets_with_a_piece():
    env = gym.make("Tetris-10x20-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (20, 10)
    assert obs.dtype == np.int8
    assert int(np.count_nonzero(obs)) == 4
    assert info["score"] == 0
    env.close()


def test_step_applies_action_then_gravity():
    env = TetrisEnv()
    env.reset(seed=1)
    game = env.game
    x, y = game.position.x, game.position.y

    obs, reward, terminated, truncated, info = env.step(ACTIONS.index(Command.LEFT))

    assert (game.position.x, game.position.y) == (x - 1, y + 1)
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["steps"] == 1


def test_dropping_in_place_ends_episode_without_score():
    env = TetrisEnv()
    env.reset(seed=2)
    down = ACTIONS.index(Command.DOWN)
    total = 0.0
    terminated = False
    for _ in range(2000):
        _, reward, terminated, truncated, info = env.step(down)
        total += reward
        if terminated or truncated:
            break
    assert terminated
    assert total == 0.0
    assert info["pieces_locked"] > 0


def test_truncates_after_max_steps():
    env = TetrisEnv(max_episode_steps=3)
    env.reset(seed=0)
    results = [env.step(0) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_rgb_render():
    env = TetrisEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8
    assert TetrisEnv().render() is None

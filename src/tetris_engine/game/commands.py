from __future__ import annotations

import queue
from typing import List

from .core import Command, TetrisGame


class GravityClock:
    """Turns elapsed host time into due gravity ticks.

    The host passes its own millisecond clock to ``update``; the clock never
    reads time itself.
    """

    def __init__(self, interval_ms: int = 1000, start_ms: int = 0) -> None:
        self.interval_ms = max(1, int(interval_ms))
        self.last_ms = int(start_ms)

    def restart(self, now_ms: int) -> None:
        self.last_ms = int(now_ms)

    def update(self, now_ms: int) -> int:
        elapsed = int(now_ms) - self.last_ms
        if elapsed < self.interval_ms:
            return 0
        due = elapsed // self.interval_ms
        self.last_ms += due * self.interval_ms
        return due


class CommandQueue:
    """Ordered command stream with a single consumer.

    Any number of producers (gravity clock, key handler, agent) may ``put``;
    only the owner of the game calls ``process_pending``, so commands are
    applied one at a time in arrival order.
    """

    def __init__(self, game: TetrisGame) -> None:
        self.game = game
        self._pending: "queue.SimpleQueue[Command]" = queue.SimpleQueue()

    def put(self, command: Command) -> None:
        self._pending.put(Command(command))

    def put_ticks(self, count: int) -> None:
        for _ in range(count):
            self.put(Command.DOWN)

    def pending(self) -> int:
        return self._pending.qsize()

    def process_pending(self) -> List[Command]:
        applied: List[Command] = []
        while True:
            try:
                command = self._pending.get_nowait()
            except queue.Empty:
                break
            self.game.execute(command)
            if command == Command.RESET:
                self.game.ensure_piece()
            applied.append(command)
        return applied

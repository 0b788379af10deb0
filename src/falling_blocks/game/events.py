from __future__ import annotations

from typing import Callable, List

ScoreListener = Callable[[int], None]
NextPieceListener = Callable[[], None]
GameOverListener = Callable[[int], None]


class GameEvents:
    """Synchronous observer lists for the notifications a UI consumes.

    Listeners run inside the command that triggered them, in registration
    order. Registration methods return the callback so they work as decorators.
    """

    def __init__(self) -> None:
        self.score_listeners: List[ScoreListener] = []
        self.next_piece_listeners: List[NextPieceListener] = []
        self.game_over_listeners: List[GameOverListener] = []

    def on_score_changed(self, callback: ScoreListener) -> ScoreListener:
        self.score_listeners.append(callback)
        return callback

    def on_next_piece_changed(self, callback: NextPieceListener) -> NextPieceListener:
        self.next_piece_listeners.append(callback)
        return callback

    def on_game_over(self, callback: GameOverListener) -> GameOverListener:
        self.game_over_listeners.append(callback)
        return callback

    def emit_score_changed(self, score: int) -> None:
        for callback in self.score_listeners:
            callback(score)

    def emit_next_piece_changed(self) -> None:
        for callback in self.next_piece_listeners:
            callback()

    def emit_game_over(self, final_score: int) -> None:
        for callback in self.game_over_listeners:
            callback(final_score)

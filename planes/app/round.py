import random
from typing import List, Optional

from PyQt5 import QtCore

from planes.domain.grid import PlaneGrid
from planes.domain.types import GuessPoint
from planes.engine.computer_logic import ComputerLogic
from planes.layouts.definition import GameLayout
from planes.utils.debug import debug_event


class PlaneRound(QtCore.QObject):
    """
    Coordinates one round: the player probes the computer's grid, the engine
    probes the player's grid. Views listen to the signals and never touch
    the engine directly.
    """

    computer_move_generated = QtCore.pyqtSignal(int, int, str)
    player_guess_evaluated = QtCore.pyqtSignal(int, int, str)
    plane_confirmed = QtCore.pyqtSignal(object)
    round_ended = QtCore.pyqtSignal(bool)  # True when the player wins

    def __init__(
        self,
        layout: GameLayout,
        player_grid: Optional[PlaneGrid] = None,
        computer_grid: Optional[PlaneGrid] = None,
        rng: Optional[random.Random] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.layout = layout
        self.rng = rng if rng is not None else random.Random()
        self.player_grid = player_grid if player_grid is not None else PlaneGrid.from_layout(layout)
        self.computer_grid = computer_grid if computer_grid is not None else PlaneGrid.from_layout(layout)
        self.computer = ComputerLogic.from_layout(layout, rng=self.rng)
        self.player_guesses: List[GuessPoint] = []
        self._winner: Optional[bool] = None

    def start(self) -> None:
        """Fill whichever grids are still incomplete and clear the round state."""
        for grid in (self.player_grid, self.computer_grid):
            if not grid.is_complete():
                if not grid.init_random(self.rng):
                    raise ValueError(f"could not place {grid.plane_count} planes on a {grid.rows}x{grid.cols} grid")
        self.reset()

    def reset(self) -> None:
        self.computer.initialize(self.layout.rows, self.layout.cols, self.layout.plane_count)
        self.player_guesses = []
        self._winner = None

    @property
    def is_over(self) -> bool:
        return self._winner is not None

    @property
    def player_won(self) -> Optional[bool]:
        return self._winner

    def player_guess(self, row: int, col: int) -> Optional[GuessPoint]:
        if self.is_over:
            return None
        gp = self.computer_grid.guess(row, col)
        self.player_guesses.append(gp)
        self.player_guess_evaluated.emit(gp.row, gp.col, gp.outcome)
        if self.computer_grid.all_dead(self.player_guesses):
            self._end(True)
        return gp

    def play_computer_move(self) -> Optional[GuessPoint]:
        if self.is_over:
            return None
        cell = self.computer.select_move()
        if cell is None:
            debug_event(
                "Round",
                "engine has no move left",
                self.player_grid.render(self.computer.guesses),
                level="warning",
            )
            return None

        gp = self.player_grid.guess(*cell)
        self.computer_move_generated.emit(gp.row, gp.col, gp.outcome)
        for plane in self.computer.submit_probe(gp.row, gp.col, gp.outcome):
            self.plane_confirmed.emit(plane)
        if self._computer_won():
            self._end(False)
        return gp

    def undo_computer_moves(self, n: int = 1) -> None:
        self.computer.revert(n)
        if self._winner is False and not self._computer_won():
            self._winner = None

    def _computer_won(self) -> bool:
        # Every head dead ends the round, resolved orientation or not.
        return self.computer.is_solved() or self.player_grid.all_dead(self.computer.guesses)

    def _end(self, player_wins: bool) -> None:
        self._winner = player_wins
        debug_event("Round", "player wins" if player_wins else "computer wins")
        self.round_ended.emit(player_wins)

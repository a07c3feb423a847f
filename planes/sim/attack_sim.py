import random
import time
from typing import Dict, Optional, Tuple

from planes.domain.grid import PlaneGrid
from planes.engine.computer_logic import ComputerLogic
from planes.layouts.definition import GameLayout
from planes.utils.debug import debug_event


class SimProfiler:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.games = 0
        self.probes = 0
        self.unsolved = 0
        self.layout_time = 0.0
        self.selection_time = 0.0
        self.update_time = 0.0
        self.strategy_counts: Dict[str, int] = {}

    def record_layout_time(self, dt: float) -> None:
        self.layout_time += float(dt)

    def record_selection(self, dt: float, strategy: Optional[str]) -> None:
        self.selection_time += float(dt)
        if strategy is not None:
            self.strategy_counts[strategy] = self.strategy_counts.get(strategy, 0) + 1

    def record_update(self, dt: float) -> None:
        self.update_time += float(dt)
        self.probes += 1

    def record_game(self, solved: bool) -> None:
        self.games += 1
        if not solved:
            self.unsolved += 1

    def format_summary(self, label: str) -> str:
        games = max(1, self.games)
        probes = max(1, self.probes)
        mix = ", ".join(
            f"{key}={100.0 * count / probes:.1f}%"
            for key, count in sorted(self.strategy_counts.items())
        )
        return (
            f"[SIM_PROFILE] {label}\n"
            f"  games={self.games} probes={self.probes} unsolved={self.unsolved}\n"
            f"  layout_time={self.layout_time / games:.4f}s/game\n"
            f"  selection_time={self.selection_time:.4f}s ({self.selection_time / probes:.6f}s/probe)\n"
            f"  update_time={self.update_time:.4f}s ({self.update_time / probes:.6f}s/probe)\n"
            f"  strategy_mix: {mix or 'n/a'}"
        )


def _simulate_engine_game(
    layout: GameLayout,
    rng: random.Random,
    grid: Optional[PlaneGrid] = None,
    profiler: Optional[SimProfiler] = None,
) -> Tuple[int, bool]:
    # 1. Hidden board
    layout_start = time.perf_counter()
    if grid is None:
        grid = PlaneGrid.from_layout(layout)
        if not grid.init_random(rng):
            raise ValueError(f"could not place {layout.plane_count} planes on layout {layout.layout_id}")
    if profiler is not None:
        profiler.record_layout_time(time.perf_counter() - layout_start)

    # 2. Engine
    engine = ComputerLogic.from_layout(layout, rng=rng)
    total_cells = layout.rows * layout.cols
    probes = 0

    # 3. Game loop
    while not engine.is_solved() and probes < total_cells:
        selection_start = time.perf_counter()
        cell = engine.select_move()
        if profiler is not None:
            profiler.record_selection(time.perf_counter() - selection_start, engine.last_strategy)
        if cell is None:
            break

        update_start = time.perf_counter()
        outcome = grid.evaluate(*cell)
        engine.submit_probe(cell[0], cell[1], outcome)
        probes += 1
        if profiler is not None:
            profiler.record_update(time.perf_counter() - update_start)

    solved = engine.is_solved()
    if not solved:
        debug_event(
            "Simulation",
            f"engine stopped after {probes} probes with {len(engine.confirmed_planes)}/{layout.plane_count} planes",
            grid.render(engine.guesses),
            level="warning",
        )
    if profiler is not None:
        profiler.record_game(solved)
    return probes, solved


def simulate_engine_game(
    layout: GameLayout,
    rng: Optional[random.Random] = None,
    grid: Optional[PlaneGrid] = None,
    profiler: Optional[SimProfiler] = None,
) -> int:
    if rng is None:
        rng = random.Random()
    probes, _ = _simulate_engine_game(layout, rng, grid=grid, profiler=profiler)
    return probes

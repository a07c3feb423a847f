#!/usr/bin/env python3
import argparse
import hashlib
import random
import statistics
import time
from typing import Iterable, List

from planes.domain.config import SIM_GAMES
from planes.layouts.builtins import builtin_layouts, classic_layout, mini_layout
from planes.sim.attack_sim import SimProfiler, simulate_engine_game
from planes.strategies.registry import strategy_defs
from planes.utils import debug


def _stable_seed(global_seed: int, layout_id: str, game_index: int) -> int:
    payload = f"{int(global_seed)}|{layout_id}|{int(game_index)}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "little") & 0x7FFFFFFF


def _percentile(values: List[int], pct: float) -> float:
    if not values:
        return 0.0
    if pct <= 0:
        return float(values[0])
    if pct >= 100:
        return float(values[-1])
    k = (len(values) - 1) * (pct / 100.0)
    f = int(k)
    c = min(f + 1, len(values) - 1)
    if f == c:
        return float(values[f])
    d0 = values[f] * (c - k)
    d1 = values[c] * (k - f)
    return float(d0 + d1)


def _resolve_layout(name: str):
    name = (name or "classic").strip().lower()
    if name in {"classic", "10x10", "standard"}:
        return classic_layout()
    if name in {"mini", "6x6"}:
        return mini_layout()
    for layout in builtin_layouts():
        if layout.layout_id == name:
            return layout
    raise ValueError(f"Unknown layout '{name}'. Use classic or mini.")


def main(argv: Iterable[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Engine harness: play seeded games against random boards.")
    parser.add_argument("--layout", default="classic", help="Layout id (classic|mini)")
    parser.add_argument("--games", type=int, default=SIM_GAMES, help="Games to play")
    parser.add_argument("--seed", type=int, default=1337, help="Global seed")
    parser.add_argument("--debug", action="store_true", help="Write debug events to the debug log")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.debug:
        debug.DEBUG_ENABLED = True

    layout = _resolve_layout(args.layout)
    profiler = SimProfiler()

    print(f"Layout: {layout.name} ({layout.rows}x{layout.cols}, {layout.plane_count} planes)")
    print(f"Games: {args.games}, Seed: {args.seed}")
    print()

    probes: List[int] = []
    start = time.perf_counter()
    for i in range(args.games):
        rng = random.Random(_stable_seed(args.seed, layout.layout_id, i))
        probes.append(simulate_engine_game(layout, rng=rng, profiler=profiler))
    elapsed = time.perf_counter() - start

    probes_sorted = sorted(probes)
    header = f"{'Mean':>6} {'Median':>6} {'P90':>6} {'P95':>6} {'Min':>5} {'Max':>5} {'Time(s)':>8}"
    print(header)
    print("-" * len(header))
    if probes_sorted:
        print(
            f"{statistics.mean(probes):>6.2f} {statistics.median(probes_sorted):>6.0f} "
            f"{_percentile(probes_sorted, 90.0):>6.0f} {_percentile(probes_sorted, 95.0):>6.0f} "
            f"{probes_sorted[0]:>5} {probes_sorted[-1]:>5} {elapsed:>8.2f}"
        )
    print()

    names = {d["key"]: d["name"] for d in strategy_defs()}
    total = max(1, sum(profiler.strategy_counts.values()))
    for key, count in sorted(profiler.strategy_counts.items()):
        print(f"{names.get(key, key):<24} {100.0 * count / total:>6.1f}%")
    print()
    print(profiler.format_summary(layout.layout_id))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

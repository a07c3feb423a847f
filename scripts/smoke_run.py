import random

from planes.layouts.builtins import tee_shape
from planes.layouts.definition import GameLayout
from planes.sim.attack_sim import simulate_engine_game


def main() -> None:
    layout = GameLayout(
        "smoke_tiny",
        "Smoke Tiny",
        5,
        5,
        1,
        tee_shape(),
    )

    probes = simulate_engine_game(layout, rng=random.Random(0))
    print(f"Smoke OK: probes={probes}")


if __name__ == "__main__":
    main()

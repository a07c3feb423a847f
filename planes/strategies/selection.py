import random
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from planes.domain.config import BLEND_WEIGHTS
from planes.domain.types import Cell

if TYPE_CHECKING:
    from planes.engine.choice_map import ChoiceMap
    from planes.engine.head_data import HeadData

STRATEGY_HEAD = "find_head"
STRATEGY_POSITION = "find_position"
STRATEGY_RANDOM = "random_zero"


def choose_head_seeking(choice_map: "ChoiceMap", rng: random.Random) -> Optional[Cell]:
    """Head of a random candidate among those tied for the highest score."""
    best_score: Optional[int] = None
    best_indices: List[int] = []
    for idx, score in enumerate(choice_map.scores):
        if best_score is None or score > best_score:
            best_score = score
            best_indices = [idx]
        elif score == best_score:
            best_indices.append(idx)

    if best_score is None or best_score < 0:
        return None
    return choice_map.head_of(rng.choice(best_indices))


def choose_orientation_completion(heads: Sequence["HeadData"], rng: random.Random) -> Optional[Cell]:
    """
    Probe an untested body cell of a found head.

    Picks a random unresolved head, then its live orientation with the most
    untested cells (first found on ties), then one of those cells at random.
    """
    if not heads:
        return None

    hd = rng.choice(list(heads))

    max_not_tested = 0
    best = None
    for pod in hd.options:
        if pod.discarded:
            continue
        if len(pod.points_not_tested) > max_not_tested:
            max_not_tested = len(pod.points_not_tested)
            best = pod

    if best is None:
        return None
    return rng.choice(best.points_not_tested)


def choose_exploration(choice_map: "ChoiceMap", rng: random.Random) -> Optional[Cell]:
    """Head of the first untouched candidate (score 0) scanning circularly from a random index."""
    total = len(choice_map)
    if total == 0:
        return None
    start = rng.randrange(total)
    for step in range(total):
        idx = (start + step) % total
        if choice_map[idx] == 0:
            return choice_map.head_of(idx)
    return None


def blend_weights(completion_ok: bool, exploration_ok: bool) -> Tuple[int, int, int]:
    return BLEND_WEIGHTS[(completion_ok, exploration_ok)]


def choose_next_probe(
    choice_map: "ChoiceMap",
    heads: Sequence["HeadData"],
    rng: random.Random,
) -> Optional[Tuple[str, Cell]]:
    """
    Blend the three strategies into one probe.

    Returns (strategy key, cell), or None when head seeking has nothing left,
    which ends the game for the engine.
    """
    head_cell = choose_head_seeking(choice_map, rng)
    position_cell = choose_orientation_completion(heads, rng)
    random_cell = choose_exploration(choice_map, rng)

    if head_cell is None:
        return None

    weights = blend_weights(position_cell is not None, random_cell is not None)
    options = [
        (STRATEGY_HEAD, head_cell),
        (STRATEGY_POSITION, position_cell),
        (STRATEGY_RANDOM, random_cell),
    ]
    return rng.choices(options, weights=weights, k=1)[0]

from typing import Dict, List

from planes.domain.config import BLEND_WEIGHTS

from .selection import STRATEGY_HEAD, STRATEGY_POSITION, STRATEGY_RANDOM


def strategy_defs() -> List[Dict[str, object]]:
    # Keep in sync with the strategies blended by strategies.selection.
    return [
        {
            "key": STRATEGY_HEAD,
            "name": "Head Seeking",
            "description": "Probes the head of a placement tied for the highest heat score.",
            "notes": "Always available while any placement is viable; when it fails the engine has no move left.",
        },
        {
            "key": STRATEGY_POSITION,
            "name": "Orientation Completion",
            "description": "Probes an untested body cell of the most open orientation of a found head.",
            "notes": "Only available while some head is unresolved. Narrows the head down to one orientation.",
        },
        {
            "key": STRATEGY_RANDOM,
            "name": "Exploration",
            "description": "Probes the head of a placement nothing is known about yet.",
            "notes": "Keeps the engine from fixating on the same area once heat builds up.",
        },
    ]


def blend_table() -> List[Dict[str, object]]:
    rows = []
    for (completion_ok, exploration_ok), weights in BLEND_WEIGHTS.items():
        rows.append(
            {
                "completion": completion_ok,
                "exploration": exploration_ok,
                STRATEGY_HEAD: weights[0],
                STRATEGY_POSITION: weights[1],
                STRATEGY_RANDOM: weights[2],
            }
        )
    return rows

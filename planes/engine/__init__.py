from .choice_map import ChoiceMap
from .head_data import HeadData, PlaneOrientationData
from .history import ProbeHistory
from .computer_logic import ComputerLogic

__all__ = [
    "ChoiceMap",
    "ComputerLogic",
    "HeadData",
    "PlaneOrientationData",
    "ProbeHistory",
]

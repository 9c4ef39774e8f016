from enum import Enum
from typing import Dict, Optional, Tuple


class Choice(str, Enum):
    COOPERATE = 'C'
    DEFECT = 'D'

    @classmethod
    def parse(cls, value) -> Optional['Choice']:
        """Map a wire value ('C', 'D', 'cooperate', 'defect') to a Choice.

        Returns None for anything else so callers can drop the payload.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        token = value.strip().upper()
        for choice in cls:
            if token in (choice.value, choice.name):
                return choice
        return None


# Classic Prisoner's Dilemma: reward 3, temptation 5, sucker 0, punishment 1
PAYOFF_MATRIX: Dict[Tuple[Choice, Choice], Tuple[int, int]] = {
    (Choice.COOPERATE, Choice.COOPERATE): (3, 3),
    (Choice.COOPERATE, Choice.DEFECT): (0, 5),
    (Choice.DEFECT, Choice.COOPERATE): (5, 0),
    (Choice.DEFECT, Choice.DEFECT): (1, 1),
}


def payoff(first: Choice, second: Choice) -> Tuple[int, int]:
    """Points for (participant 1, participant 2) given their choices."""
    return PAYOFF_MATRIX[(first, second)]

from typing import Any, Dict
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class DeckDefaults:
    # Deck shape
    deck_size: int = 60
    land: int = 24
    reserved: int = 12  # removal, tempo, finishers kept outside the curve
    hand_size: int = 7

    # Curve building
    raise_curve: int = 6
    max_cost: int = 6  # 0 => everything goes to the zero-cost slot
    variance: int = 1  # declared for front ends, not read by the builder

    # Mana ceiling used when a deck runs no land at all
    hs_mana_max: int = 10

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def clamp(low: int, value: int, high: int) -> int:
    """Pin value into [low, high]; low wins when the bounds cross."""
    return max(low, min(value, high))


DEFAULTS = DeckDefaults()

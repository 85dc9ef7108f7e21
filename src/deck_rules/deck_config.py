from dataclasses import dataclass
from typing import Optional

from .defaults import DEFAULTS, clamp


@dataclass(frozen=True)
class DeckConfig:
    """Immutable, already-clamped input to a single curve build"""

    deck_size: int
    land: int
    raise_curve: int
    max_cost: int
    reserved: int
    hand_size: int

    @property
    def spells(self) -> int:
        return self.deck_size - self.land - self.reserved

    @property
    def total_committed(self) -> int:
        """Cards spoken for before any curve slot is filled"""
        return self.land + self.reserved

    @classmethod
    def from_values(
        cls,
        land: Optional[int] = None,
        raise_curve: Optional[int] = None,
        max_cost: Optional[int] = None,
        reserved: Optional[int] = None,
        deck_size: Optional[int] = None,
        hand_size: Optional[int] = None,
    ) -> "DeckConfig":
        """Build a config, filling gaps from DEFAULTS and clamping the rest.

        Negative counts become 0, land never exceeds the deck and reserved
        never exceeds what the land leaves over. max_cost is kept as given
        since anything <= 0 already means "route everything to slot 0".
        """
        deck_size = _pick(deck_size, DEFAULTS.deck_size)
        land = _pick(land, DEFAULTS.land)
        reserved = _pick(reserved, DEFAULTS.reserved)

        deck_size = max(0, deck_size)
        land = clamp(0, land, deck_size)
        reserved = clamp(0, reserved, deck_size - land)

        return cls(
            deck_size=deck_size,
            land=land,
            raise_curve=max(0, _pick(raise_curve, DEFAULTS.raise_curve)),
            max_cost=_pick(max_cost, DEFAULTS.max_cost),
            reserved=reserved,
            hand_size=max(0, _pick(hand_size, DEFAULTS.hand_size)),
        )

    def __str__(self) -> str:
        return (
            f"{self.deck_size} cards: {self.land} land, {self.reserved} reserved, "
            f"max cost {self.max_cost}, raise {self.raise_curve}, hand {self.hand_size}"
        )


def _pick(value: Optional[int], default: int) -> int:
    return default if value is None else int(value)

"""
Greedy mana curve construction.

Phase 1 builds a grid of probability-optimal pool sizes for every
(turn, cards already assigned) pair. Phase 2 walks the turns, works out how
much mana is most likely available, and turns grid lookups into curve slot
increments once the raise-curve budget has been spent.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from deck_rules.defaults import DEFAULTS, clamp
from deck_rules.deck_config import DeckConfig
from curve_engine.hypergeometric import HypergeometricEngine, DEFAULT_ENGINE
from curve_engine.mode_selection import optimal

Grid = List[List[int]]


@dataclass(frozen=True)
class CurveReport:
    """Result of one curve build. curve[cost] is the card count at that cost."""

    lands: int
    spells: int
    extra: int
    deck_size: int
    curve: Tuple[int, ...]

    @property
    def curve_total(self) -> int:
        return sum(self.curve)

    @property
    def unallocated(self) -> int:
        """Deck slots left over after lands, reserved cards and the curve"""
        return self.deck_size - self.lands - self.extra - self.curve_total

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["curve"] = list(self.curve)
        return data


class CurveBuilder:
    """Builds curves from a hypergeometric engine; holds no per-call state."""

    def __init__(self, engine: Optional[HypergeometricEngine] = None):
        self.engine = engine or DEFAULT_ENGINE

    def build_grid(
        self,
        deck_size: int,
        hand_size: int,
        *,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> Grid:
        """
        grid[turn][cards] = pool size that makes drawing exactly `cards`
        by `turn` most likely. Turn 0 sees hand_size - 2 draws and each
        later turn one more, up to the whole deck.
        """
        first_draws = hand_size - 2
        total_rows = max(0, deck_size - first_draws + 1)
        grid: Grid = []

        turn = 0
        draws = first_draws
        while draws <= deck_size:
            grid.append([
                optimal(self.engine.pool_chance(cards, draws, deck_size))
                for cards in range(turn + hand_size)
            ])

            turn += 1
            draws += 1
            if progress_callback:
                progress_callback(turn, total_rows)

        return grid

    def deck_stats(
        self,
        config: DeckConfig,
        *,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> CurveReport:
        grid = self.build_grid(
            config.deck_size, config.hand_size, progress_callback=progress_callback
        )
        curve = self._allocate(config, grid)

        return CurveReport(
            lands=config.land,
            spells=config.spells,
            extra=config.reserved,
            deck_size=config.deck_size,
            curve=tuple(curve),
        )

    def mana_available(self, land: int, turn: int, draws: int, deck_size: int) -> int:
        """Most likely mana on `turn`, capped by the land count and the turn."""
        if land > 0:
            return min(land, turn, optimal(self.engine.card_chance(land, draws, deck_size)))
        return min(turn, DEFAULTS.hs_mana_max)

    @staticmethod
    def cost_slots(mana: int, max_cost: int) -> List[int]:
        """Slots credited this turn; mana above max_cost spills into a second slot."""
        if max_cost <= 0:
            return [0]
        if mana <= max_cost:
            return [mana]
        return sorted([max_cost, mana - max_cost], reverse=True)

    def _allocate(self, config: DeckConfig, grid: Grid) -> List[int]:
        deck_size = config.deck_size
        raise_curve = config.raise_curve
        total = config.total_committed

        curve = [0]
        cards: Dict[int, int] = {}
        rawpool: Dict[int, int] = {}
        frozen = False

        turn = 1
        draws = config.hand_size - 1
        while draws <= deck_size and total < deck_size:
            mana = self.mana_available(config.land, turn, draws, deck_size)

            # Order matters: slots share cards/rawpool/raise_curve state
            for cost in self.cost_slots(mana, config.max_cost):
                cards[cost] = cards.get(cost, 0) + 1
                while len(curve) <= cost:
                    curve.append(0)

                if frozen:
                    continue

                row = grid[turn]
                if cards[cost] >= len(row):
                    # More cards at this cost than the turn could have drawn;
                    # later turns still open their slots but allocate nothing
                    frozen = True
                    continue

                target = row[cards[cost]]
                previous = rawpool.get(cost, 0)
                pooldiff = clamp(0, target - previous, deck_size - total)
                rawpool[cost] = max(target, previous)

                if pooldiff >= raise_curve:
                    pooldiff -= raise_curve
                    raise_curve = 0
                    total += pooldiff
                    curve[cost] += pooldiff
                else:
                    raise_curve -= pooldiff

            turn += 1
            draws += 1

        return curve


def deck_stats(
    land: Optional[int] = None,
    raise_curve: Optional[int] = None,
    max_cost: Optional[int] = None,
    reserved: Optional[int] = None,
    deck_size: Optional[int] = None,
    hand_size: Optional[int] = None,
) -> CurveReport:
    """Build a curve; any argument left as None comes from DEFAULTS."""
    config = DeckConfig.from_values(
        land=land,
        raise_curve=raise_curve,
        max_cost=max_cost,
        reserved=reserved,
        deck_size=deck_size,
        hand_size=hand_size,
    )
    return CurveBuilder().deck_stats(config)

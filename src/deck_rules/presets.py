"""
Archetype presets for the curve builder.

Fields left as None fall back to DEFAULTS when the preset is turned into a
DeckConfig, so "Midrange" and "Clear" track the defaults table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .deck_config import DeckConfig


class PresetName(Enum):
    AGGRO = "aggro"
    MIDRANGE = "midrange"
    CONTROL = "control"
    LIMITED = "limited"
    CLEAR = "clear"


@dataclass(frozen=True)
class Preset:
    name: PresetName
    deck_size: Optional[int] = None
    land: Optional[int] = None
    raise_curve: Optional[int] = None
    reserved: Optional[int] = None
    max_cost: Optional[int] = None
    tooltip: str = ""

    @property
    def title(self) -> str:
        return self.name.value.capitalize()

    def to_config(self, **overrides: Optional[int]) -> DeckConfig:
        """Resolve to a DeckConfig; non-None overrides win over preset fields."""
        values = {
            "deck_size": self.deck_size,
            "land": self.land,
            "raise_curve": self.raise_curve,
            "reserved": self.reserved,
            "max_cost": self.max_cost,
            "hand_size": None,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown preset field: {key}")
            if value is not None:
                values[key] = value
        return DeckConfig.from_values(**values)


PRESETS: Dict[PresetName, Preset] = {
    PresetName.AGGRO: Preset(
        name=PresetName.AGGRO,
        deck_size=60,
        land=20,
        raise_curve=0,
        reserved=7,
        max_cost=2,
        tooltip=(
            "Aggro Decks (Fast and Aggressive)\n"
            " *Mulligans for explosive hands.\n"
            " *Uses small amounts of removal.\n"
            " *Strong against control, and weak to midrange.\n"
            " *Reserves cards for removal or tempo."
        ),
    ),
    PresetName.MIDRANGE: Preset(
        name=PresetName.MIDRANGE,
        tooltip=(
            "Midrange Decks (Consistent and Powerful)\n"
            " *Usually combines a balance of creatures and controlling spells.\n"
            " *May take hands without first-turn plays.\n"
            " *Strong against aggro, and weak to control.\n"
            " *Reserves cards for removal, tempo, or utility."
        ),
    ),
    PresetName.CONTROL: Preset(
        name=PresetName.CONTROL,
        deck_size=60,
        land=27,
        raise_curve=3,
        reserved=7,
        tooltip=(
            "Control Decks (Slow and Inevitable)\n"
            " *Controls the game with counterspells and kill spells.\n"
            " *Uses very strong creatures or combos to win.\n"
            " *Strong against midrange, weak to aggro.\n"
            " *Reserves cards for ending the game."
        ),
    ),
    PresetName.LIMITED: Preset(
        name=PresetName.LIMITED,
        deck_size=40,
        land=15,
        raise_curve=4,
        reserved=2,
        tooltip=(
            "Limited Decks (formats with 40 card deck limits)\n"
            " *Uses few one cost creatures, or none.\n"
            " *Keeps the mana curve high due to limited card access.\n"
            " *Usually plays a midrange strategy.\n"
            " *Reserves cards for ending the game."
        ),
    ),
    PresetName.CLEAR: Preset(name=PresetName.CLEAR, tooltip="Clear All Fields"),
}


def get_preset(name: str) -> Preset:
    """Look up a preset by case-insensitive name."""
    key = name.strip().lower()
    for preset_name, preset in PRESETS.items():
        if preset_name.value == key:
            return preset
    valid = [p.value for p in PresetName]
    raise ValueError(f"Unknown preset: {name}. Valid: {valid}")


def preset_config(name: str) -> DeckConfig:
    return get_preset(name).to_config()

import dataclasses
import unittest

from deck_rules.defaults import DEFAULTS, DeckDefaults, clamp
from deck_rules.deck_config import DeckConfig
from deck_rules.presets import PRESETS, PresetName, get_preset, preset_config


class TestDefaults(unittest.TestCase):

    def test_values(self):
        self.assertEqual(
            DEFAULTS.as_dict(),
            {
                "deck_size": 60,
                "land": 24,
                "reserved": 12,
                "hand_size": 7,
                "raise_curve": 6,
                "max_cost": 6,
                "variance": 1,
                "hs_mana_max": 10,
            },
        )

    def test_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULTS.land = 17  # type: ignore[misc]

    def test_instances_equal(self):
        self.assertEqual(DeckDefaults(), DEFAULTS)

    def test_clamp(self):
        self.assertEqual(clamp(0, 5, 10), 5)
        self.assertEqual(clamp(0, -5, 10), 0)
        self.assertEqual(clamp(0, 15, 10), 10)
        self.assertEqual(clamp(0, 5, -1), 0)


class TestDeckConfig(unittest.TestCase):

    def test_defaults_fill_gaps(self):
        config = DeckConfig.from_values()
        self.assertEqual(config.deck_size, 60)
        self.assertEqual(config.land, 24)
        self.assertEqual(config.raise_curve, 6)
        self.assertEqual(config.max_cost, 6)
        self.assertEqual(config.reserved, 12)
        self.assertEqual(config.hand_size, 7)
        self.assertEqual(config.spells, 24)
        self.assertEqual(config.total_committed, 36)

    def test_negative_values_clamped(self):
        config = DeckConfig.from_values(land=-3, raise_curve=-2, reserved=-1, deck_size=-10, hand_size=-7)
        self.assertEqual(config.deck_size, 0)
        self.assertEqual(config.land, 0)
        self.assertEqual(config.reserved, 0)
        self.assertEqual(config.raise_curve, 0)
        self.assertEqual(config.hand_size, 0)

    def test_max_cost_kept(self):
        self.assertEqual(DeckConfig.from_values(max_cost=-4).max_cost, -4)
        self.assertEqual(DeckConfig.from_values(max_cost=0).max_cost, 0)

    def test_land_and_reserved_fit_deck(self):
        config = DeckConfig.from_values(land=70, reserved=5, deck_size=60)
        self.assertEqual(config.land, 60)
        self.assertEqual(config.reserved, 0)

        config = DeckConfig.from_values(land=50, reserved=20)
        self.assertEqual(config.reserved, 10)
        self.assertEqual(config.spells, 0)

    def test_str(self):
        self.assertIn("60 cards", str(DeckConfig.from_values()))


class TestPresets(unittest.TestCase):

    def test_all_names_present(self):
        self.assertEqual(set(PRESETS), set(PresetName))

    def test_aggro(self):
        config = preset_config("aggro")
        self.assertEqual(
            (config.deck_size, config.land, config.raise_curve, config.reserved, config.max_cost),
            (60, 20, 0, 7, 2),
        )

    def test_midrange_and_clear_match_defaults(self):
        self.assertEqual(preset_config("midrange"), DeckConfig.from_values())
        self.assertEqual(preset_config("clear"), DeckConfig.from_values())

    def test_control_uses_default_max_cost(self):
        config = preset_config("Control")
        self.assertEqual(config.land, 27)
        self.assertEqual(config.raise_curve, 3)
        self.assertEqual(config.max_cost, 6)

    def test_limited(self):
        config = preset_config(" LIMITED ")
        self.assertEqual((config.deck_size, config.land, config.raise_curve, config.reserved), (40, 15, 4, 2))

    def test_unknown(self):
        with self.assertRaises(ValueError):
            get_preset("tempo")

    def test_overrides(self):
        preset = get_preset("aggro")
        self.assertEqual(preset.to_config(land=22).land, 22)
        self.assertEqual(preset.to_config(land=None).land, 20)
        with self.assertRaises(ValueError):
            preset.to_config(colors=2)

    def test_tooltips(self):
        self.assertTrue(get_preset("aggro").tooltip.startswith("Aggro Decks"))
        self.assertEqual(get_preset("aggro").title, "Aggro")


if __name__ == "__main__":
    unittest.main()

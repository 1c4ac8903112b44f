import unittest

from ludo_chat.engine.config import Config, StrategyConfig, config, strategy_config


class TestConfig(unittest.TestCase):
    def test_derived_values(self):
        self.assertEqual(config.FINISH_INDEX, 4)
        self.assertEqual(config.LAST_TRACK_STEP, 51)
        self.assertEqual(config.START_OFFSETS, [0, 13, 26, 39])

    def test_start_offsets_must_cover_every_seat(self):
        with self.assertRaises(ValueError):
            Config(START_OFFSETS=[0, 13])

    def test_strategy_defaults(self):
        self.assertEqual(strategy_config.exit_base_bonus, 100)
        self.assertEqual(strategy_config.home_stretch_bonus, 75)
        self.assertEqual(strategy_config.capture_bonus, 50)
        self.assertEqual(strategy_config.danger_penalty, 25)
        self.assertEqual(StrategyConfig(danger_range=5).danger_range, 5)


if __name__ == "__main__":
    unittest.main()

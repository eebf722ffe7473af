import tempfile
import unittest
from pathlib import Path

from gesture_text.config import (
    Config,
    ConfigurationError,
    FingerStateMethod,
    GesturesConfig,
    SingleHandConfig,
    StabilizerConfig,
)
from gesture_text.gestures import Gestures


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp_dir.name) / "config.json"

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.fingers.method, FingerStateMethod.ANGLE)
        self.assertEqual(config.stabilizer.stable_threshold, 15)
        self.assertEqual(config.stabilizer.cooldown_ms, 1500)
        self.assertEqual(config.feedback.window, 5)
        self.assertEqual(config.feedback.confidence_threshold, 0.6)
        self.assertEqual(config.gestures.single.fist_max_tip_palm_distance, 0.15)
        self.assertEqual(config.gestures.two_hands.praying_min_extended_fingers, 5)
        self.assertEqual(config.composer.space_label, "SPACE")
        self.assertEqual(config.composer.delete_label, "DELETE")

    def test_missing_file(self):
        self.assertEqual(Config.load(self.path), Config())

    def test_save_and_load(self):
        config = Config.build(stabilizer={"stable_threshold": 5}, gestures={"disabled": ["Horns"]})
        self.assertEqual(config.save(self.path), self.path.resolve())
        loaded = Config.load(str(self.path))
        self.assertEqual(loaded, config)
        self.assertEqual(loaded.gestures.disabled, [Gestures.HORNS])

    def test_invalid_file(self):
        self.path.write_text('{"stabilizer": {"stable_threshold": 0}}')
        with self.assertRaises(ConfigurationError):
            Config.load(self.path)

        self.path.write_text('{"unknown": 1}')
        with self.assertRaises(ConfigurationError):
            Config.load(self.path)

    def test_path_is_a_directory(self):
        with self.assertRaises(ConfigurationError):
            Config.load(self.tmp_dir.name)

    def test_invalid_assignment(self):
        config = Config()
        with self.assertRaises(ConfigurationError):
            config.stabilizer.stable_threshold = 0
        self.assertEqual(config.stabilizer.stable_threshold, 15)

    def test_invalid_direct_construction(self):
        with self.assertRaises(ConfigurationError):
            StabilizerConfig(stable_threshold=0)
        with self.assertRaises(ConfigurationError):
            Config(stabilizer={"cooldown_ms": -1})
        with self.assertRaises(ConfigurationError):
            SingleHandConfig(unknown=1)

    def test_canonical_gestures_cannot_be_disabled(self):
        with self.assertRaises(ConfigurationError):
            GesturesConfig.build(disabled=["Fist"])

    def test_disabled_gestures(self):
        config = GesturesConfig(disable_secondary=True)
        self.assertTrue(config.is_gesture_disabled(Gestures.HORNS))
        self.assertFalse(config.is_gesture_disabled(Gestures.CLOSED_HAND))
        self.assertFalse(config.is_gesture_disabled(Gestures.FIST))

    def test_fallbacks_cannot_be_disabled(self):
        with self.assertRaises(ConfigurationError):
            GesturesConfig.build(disabled=["Unknown"])

import unittest

from gesture_text.classifier import Classification
from gesture_text.config import ConfigurationError, FeedbackConfig, StabilizerConfig
from gesture_text.smoothing import AcceptedSymbol, MajorityVoteSmoother, Stabilizer


class TestStabilizer(unittest.TestCase):
    def setUp(self):
        self.stabilizer = Stabilizer(StabilizerConfig(stable_threshold=3, cooldown_ms=1000))

    def feed(self, labels, start=0.0, step=0.1):
        return [self.stabilizer.update(label, start + position * step) for position, label in enumerate(labels)]

    def test_short_runs_are_suppressed(self):
        self.assertEqual(self.feed(["A", "A"]), [None, None])

    def test_stable_label_is_accepted_once_per_run(self):
        results = self.feed(["A", "A", "A"])
        self.assertEqual(results, [None, None, AcceptedSymbol("A", 0.2)])
        self.assertEqual(self.stabilizer.state.run_length, 0)

    def test_cooldown_blocks_next_acceptance(self):
        self.feed(["A", "A", "A"])
        # Same gesture held: a full run, but still in the cooldown
        self.assertEqual(self.feed(["A", "A", "A"], start=0.3), [None, None, None])
        # Run keeps growing until the cooldown is over
        self.assertEqual(self.stabilizer.update("A", 1.3), AcceptedSymbol("A", 1.3))

    def test_other_label_after_cooldown(self):
        self.feed(["A", "A", "A"])
        self.assertEqual(self.feed(["B", "B", "B"], start=1.5)[-1].label, "B")

    def test_flicker_restarts_the_run(self):
        self.assertEqual(self.feed(["A", "A", "B", "A", "A"]), [None] * 5)
        self.assertEqual(self.stabilizer.update("A", 0.5), AcceptedSymbol("A", 0.5))

    def test_hand_loss_resets_the_run(self):
        self.assertEqual(self.feed(["A", "A", None]), [None] * 3)
        self.assertIsNone(self.stabilizer.state.last_label)
        self.assertEqual(self.stabilizer.state.run_length, 0)

        self.assertEqual(self.feed(["A", "A"], start=0.3), [None, None])
        self.assertEqual(self.stabilizer.state.run_length, 2)

    def test_hand_loss_keeps_the_cooldown(self):
        self.feed(["A", "A", "A"])
        self.stabilizer.update(None, 0.3)
        self.assertEqual(self.feed(["A", "A", "A"], start=0.4), [None, None, None])
        self.assertEqual(self.stabilizer.state.last_accepted_at, 0.2)

    def test_held_gesture_repeats_without_cooldown(self):
        stabilizer = Stabilizer(StabilizerConfig(stable_threshold=2, cooldown_ms=0))
        results = [stabilizer.update("A", position * 0.1) for position in range(6)]
        self.assertEqual([result is not None for result in results], [False, True, False, True, False, True])

    def test_reset_cooldown(self):
        self.feed(["A", "A", "A"])
        self.stabilizer.reset(cooldown=True)
        self.assertIsNone(self.stabilizer.state.last_accepted_at)
        self.assertEqual(self.feed(["A", "A", "A"], start=0.3)[-1].label, "A")

    def test_cooldown_in_seconds(self):
        self.assertEqual(self.stabilizer.cooldown, 1.0)

    def test_invalid_threshold(self):
        with self.assertRaises(ConfigurationError):
            StabilizerConfig.build(stable_threshold=0)
        with self.assertRaises(ConfigurationError):
            StabilizerConfig.build(cooldown_ms=-1)
        with self.assertRaises(ConfigurationError):
            Stabilizer(StabilizerConfig(stable_threshold=0))


class TestMajorityVoteSmoother(unittest.TestCase):
    def setUp(self):
        self.smoother = MajorityVoteSmoother(FeedbackConfig(window=5, vote_threshold=0.7))

    def test_no_classification(self):
        self.assertIsNone(self.smoother.update(None))
        self.assertEqual(len(self.smoother.history), 0)

    def test_majority_label_with_its_share(self):
        for label in ["Fist", "Fist", "Fist", "Fist"]:
            self.smoother.update(Classification(label, 0.95))
        self.assertEqual(self.smoother.update(Classification("Open Palm", 0.9)), Classification("Fist", 0.8))

    def test_no_majority_returns_the_raw_classification(self):
        for label in ["Fist", "Fist", "Open Palm"]:
            result = self.smoother.update(Classification(label, 0.9))
        self.assertEqual(result, Classification("Open Palm", 0.9))

    def test_window_is_bounded(self):
        for _ in range(5):
            self.smoother.update(Classification("Fist", 0.95))
        for _ in range(4):
            result = self.smoother.update(Classification("Open Palm", 0.9))
        self.assertEqual(len(self.smoother.history), 5)
        self.assertEqual(result, Classification("Open Palm", 0.8))

    def test_reset(self):
        self.smoother.update(Classification("Fist", 0.95))
        self.smoother.reset()
        self.assertEqual(len(self.smoother.history), 0)

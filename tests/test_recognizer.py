import unittest
from types import SimpleNamespace

from gesture_text.models.landmarks import Handedness, Point3
from gesture_text.recognizer import Recognizer, StreamInfo, observations_from_result


def landmark(x, y, z=0.0):
    return SimpleNamespace(x=x, y=y, z=z)


class TestObservationsFromResult(unittest.TestCase):
    def setUp(self):
        self.result = SimpleNamespace(
            hand_landmarks=[[landmark(0.2, 0.5, -0.1)] * 21, [landmark(0.7, 0.4)] * 21],
            handedness=[[SimpleNamespace(category_name="Left")], []],
        )

    def test_conversion(self):
        first, second = observations_from_result(self.result)
        self.assertTrue(first.is_complete)
        self.assertEqual(first[0], Point3(0.2, 0.5, -0.1))
        self.assertEqual(first.handedness, Handedness.LEFT)
        self.assertEqual(second.handedness, Handedness.UNKNOWN)

    def test_mirroring(self):
        first, second = observations_from_result(self.result, mirroring=True)
        self.assertAlmostEqual(first[0].x, 0.8)
        self.assertAlmostEqual(second[0].x, 0.3)
        self.assertEqual(first[0].y, 0.5)

    def test_no_hands(self):
        self.assertEqual(observations_from_result(SimpleNamespace(hand_landmarks=[], handedness=[])), [])


class TestStreamInfo(unittest.TestCase):
    def test_to_dict(self):
        info = StreamInfo(frames_count=10, recognized_frames_count=8, frames_fps=30.0, recognition_fps=24.0, latency=0.05)
        self.assertEqual(info.to_dict()["recognized_frames_count"], 8)


class TestClosedRecognizer(unittest.TestCase):
    def test_recognize_after_close(self):
        recognizer = Recognizer.__new__(Recognizer)
        recognizer.landmarker = None
        recognizer.close()
        with self.assertRaises(RuntimeError):
            recognizer.recognize_image(object(), 0.0)

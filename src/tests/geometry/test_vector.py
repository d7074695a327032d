import dataclasses
import unittest

from sprintify.dragselect.geometry import Point, Rect, Vector


class TestVector(unittest.TestCase):
    def test_diagonal_length(self):
        self.assertEqual(Vector(0, 0, 3, 4).diagonal_length(), 5)
        self.assertEqual(Vector(7, 9, -3, -4).diagonal_length(), 5)
        self.assertEqual(Vector(7, 9).diagonal_length(), 0)

    def test_to_rect_positive_extent(self):
        self.assertEqual(Vector(5, 5, 20, 20).to_rect(), Rect(5, 5, 20, 20))

    def test_to_rect_negative_extent(self):
        self.assertEqual(Vector(25, 25, -20, -20).to_rect(), Rect(5, 5, 20, 20))
        self.assertEqual(Vector(25, 5, -20, 20).to_rect(), Rect(5, 5, 20, 20))

    def test_drag_direction_does_not_change_rect(self):
        for mx in (-30, -1, 0, 1, 30):
            for my in (-12.5, 0, 12.5):
                forward = Vector(10, 10, mx, my)
                backward = Vector(10 + mx, 10 + my, -mx, -my)
                rect = forward.to_rect()
                self.assertGreaterEqual(rect.width, 0)
                self.assertGreaterEqual(rect.height, 0)
                self.assertEqual(rect, backward.to_rect())

    def test_add(self):
        drag = Vector(5, 6, 10, -4)
        scroll = Vector(100, 200, 3, 7)
        self.assertEqual(drag.add(scroll), Vector(105, 206, 13, 3))
        self.assertEqual(drag + scroll, drag.add(scroll))

    def test_clamp_caps_far_edge(self):
        bounds = Rect(0, 0, 100, 80)
        clamped = Vector(90, 70, 50, 50).clamp(bounds)
        self.assertEqual(clamped, Vector(90, 70, 10, 10))
        self.assertEqual(clamped.terminal_point(), Point(100, 80))

    def test_clamp_leaves_negative_extent(self):
        bounds = Rect(0, 0, 100, 80)
        self.assertEqual(Vector(50, 50, -70, -20).clamp(bounds), Vector(50, 50, -70, -20))

    def test_clamp_never_exceeds_bounds(self):
        bounds = Rect(0, 0, 200, 150)
        for x in (0, 50, 199, 200):
            for y in (0, 75, 150):
                for mx in (-500, 0, 10, 500):
                    for my in (-500, 0, 10, 500):
                        end = Vector(x, y, mx, my).clamp(bounds).terminal_point()
                        self.assertLessEqual(end.x, bounds.width)
                        self.assertLessEqual(end.y, bounds.height)

    def test_terminal_point(self):
        self.assertEqual(Vector(5, 5, 20, -3).terminal_point(), Point(25, 2))

    def test_with_extent_keeps_origin(self):
        self.assertEqual(Vector(5, 5, 1, 1).with_extent(-4, 9), Vector(5, 5, -4, 9))

    def test_immutable(self):
        vector = Vector(1, 2, 3, 4)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            vector.x = 10


if __name__ == '__main__':
    unittest.main()

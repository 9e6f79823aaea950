"""Unit tests for keypad layout."""

import unittest

from padcalc_pkg.layout import BUTTON_LABELS, build_buttons, button_region
from padcalc_pkg.types import Rect


class TestButtonRegion(unittest.TestCase):
    """Test the index-to-region grid formula."""

    def test_first_button(self):
        self.assertEqual(button_region(0), Rect(20, 150, 80, 80))

    def test_grid_positions(self):
        self.assertEqual(button_region(1), Rect(110, 150, 80, 80))
        self.assertEqual(button_region(4), Rect(20, 240, 80, 80))
        self.assertEqual(button_region(15), Rect(290, 420, 80, 80))

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            button_region(16)
        with self.assertRaises(IndexError):
            button_region(-1)


class TestBuildButtons(unittest.TestCase):
    """Test the full keypad catalog."""

    def test_catalog_order(self):
        buttons = build_buttons()
        self.assertEqual(len(buttons), 16)
        self.assertEqual(tuple(b.label for b in buttons), BUTTON_LABELS)
        self.assertEqual(
            "".join(BUTTON_LABELS), "789/456*123-C0=+"
        )

    def test_regions_do_not_overlap(self):
        buttons = build_buttons()
        for i, a in enumerate(buttons):
            for b in buttons[i + 1 :]:
                with self.subTest(a=a.label, b=b.label):
                    separated = (
                        a.rect.x + a.rect.width < b.rect.x
                        or b.rect.x + b.rect.width < a.rect.x
                        or a.rect.y + a.rect.height < b.rect.y
                        or b.rect.y + b.rect.height < a.rect.y
                    )
                    self.assertTrue(separated)

    def test_buttons_fit_the_window(self):
        from padcalc_pkg.config import SCREEN_HEIGHT, SCREEN_WIDTH

        for button in build_buttons():
            self.assertLessEqual(button.rect.x + button.rect.width, SCREEN_WIDTH)
            self.assertLessEqual(button.rect.y + button.rect.height, SCREEN_HEIGHT)


class TestRect(unittest.TestCase):
    """Test inclusive hit testing."""

    def test_edges_are_inclusive(self):
        rect = Rect(10, 20, 5, 5)
        self.assertTrue(rect.contains(10, 20))
        self.assertTrue(rect.contains(15, 25))
        self.assertTrue(rect.contains(12, 22))

    def test_outside(self):
        rect = Rect(10, 20, 5, 5)
        self.assertFalse(rect.contains(9, 22))
        self.assertFalse(rect.contains(16, 22))
        self.assertFalse(rect.contains(12, 26))


if __name__ == "__main__":
    unittest.main()

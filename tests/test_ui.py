import unittest

from simulation import Pointer
from state import GameState
from ui import UIButton, apply_hover, handle_ui, point_in_rect

SKINS = ("munch_cat", "munch_cat_white", "munch_cat_black")


class HoverTests(unittest.TestCase):
    def setUp(self):
        self.button = UIButton("new cat", (200, 10, 40, 10))

    def test_edges_are_inclusive(self):
        for mx, my in ((200, 10), (240, 20), (200, 20), (240, 10), (220, 15)):
            with self.subTest(pos=(mx, my)):
                self.assertTrue(apply_hover(self.button, mx, my))
                self.assertTrue(self.button.hovered)

    def test_outside_clears_hover(self):
        apply_hover(self.button, 220, 15)
        for mx, my in ((199, 15), (241, 15), (220, 9), (220, 21)):
            with self.subTest(pos=(mx, my)):
                self.assertFalse(apply_hover(self.button, mx, my))
                self.assertFalse(self.button.hovered)

    def test_point_in_rect(self):
        self.assertTrue(point_in_rect((0, 0, 0, 0), 0, 0))
        self.assertFalse(point_in_rect((0, 0, 0, 0), 1, 0))


class ClickTests(unittest.TestCase):
    def test_skin_cycles_and_wraps(self):
        state = GameState()
        click = Pointer(210, 15, True)
        seen = []
        for _ in range(6):
            handle_ui(state, click, SKINS)
            seen.append(state.cat_id)
        self.assertEqual(seen, [1, 2, 0, 1, 2, 0])

    def test_click_outside_button_does_nothing(self):
        state = GameState()
        handle_ui(state, Pointer(0, 0, True), SKINS)
        self.assertEqual(state.cat_id, 0)
        self.assertFalse(state.mute_toggle)

    def test_hover_without_click_only_sets_hover(self):
        state = GameState()
        handle_ui(state, Pointer(210, 15, False), SKINS)
        self.assertTrue(state.skin_change_button.hovered)
        self.assertFalse(state.mute_button.hovered)
        self.assertEqual(state.cat_id, 0)

    def test_mute_toggle_flips(self):
        state = GameState()
        click = Pointer(235, 140, True)
        handle_ui(state, click, SKINS)
        self.assertTrue(state.mute_toggle)
        handle_ui(state, click, SKINS)
        self.assertFalse(state.mute_toggle)

    def test_hover_is_recomputed_every_frame(self):
        state = GameState()
        handle_ui(state, Pointer(225, 135, False), SKINS)
        self.assertTrue(state.mute_button.hovered)
        handle_ui(state, Pointer(0, 0, False), SKINS)
        self.assertFalse(state.mute_button.hovered)


if __name__ == "__main__":
    unittest.main()

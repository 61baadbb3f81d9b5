import json
import os
import tempfile
import unittest

from state import GameState, JsonStateStore, Pancake, StateStore
from ui import UIButton


class GameStateTests(unittest.TestCase):
    def test_defaults(self):
        state = GameState()
        self.assertEqual((state.cat_x, state.cat_y, state.cat_r), (128.0, 112.0, 8.0))
        self.assertEqual(state.skin_change_button, UIButton("new cat", (200, 10, 40, 10)))
        self.assertEqual(state.mute_button, UIButton("sound", (220, 130, 30, 10)))
        self.assertFalse(state.mute_toggle)

    def test_dict_round_trip(self):
        state = GameState(frame=900, last_munch_at=850, cat_id=2, cat_x=40.0, score=12, mute_toggle=True)
        state.pancakes.append(Pancake(x=3.0, y=40.0, vel=2.0, radius=9.0))
        state.mute_button.hovered = True
        self.assertEqual(GameState.from_dict(state.to_dict()), state)

    def test_out_of_range_cat_id_is_reset(self):
        self.assertEqual(GameState.from_dict({"cat_id": 7}).cat_id, 0)
        self.assertEqual(GameState.from_dict({"cat_id": 1}, skin_count=2).cat_id, 1)

    def test_missing_keys_use_defaults(self):
        self.assertEqual(GameState.from_dict({}), GameState())


class StateStoreTests(unittest.TestCase):
    def test_load_returns_independent_copies(self):
        store = StateStore()
        state = store.load()
        state.score = 5
        state.pancakes.append(Pancake(1.0, 2.0, 1.0, 5.0))
        self.assertEqual(store.load(), GameState())
        store.save(state)
        state.score = 99
        self.assertEqual(store.load().score, 5)
        self.assertEqual(len(store.load().pancakes), 1)

    def test_reset(self):
        store = StateStore(GameState(score=3))
        store.reset()
        self.assertEqual(store.load().score, 0)


class JsonStateStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "saves", "state.json")

    def tearDown(self):
        self.tmp.cleanup()

    def test_flush_then_restore(self):
        store = JsonStateStore(self.path)
        state = GameState(frame=42, score=3, cat_id=1)
        store.save(state)
        store.flush()

        other = JsonStateStore(self.path)
        self.assertTrue(other.restore())
        self.assertEqual(other.load(), state)

    def test_missing_file_keeps_new_game(self):
        store = JsonStateStore(self.path)
        self.assertFalse(store.restore())
        self.assertEqual(store.load(), GameState())

    def test_corrupt_file_falls_back_to_new_game(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.write("{not json")
        store = JsonStateStore(self.path)
        self.assertFalse(store.restore())
        self.assertEqual(store.load(), GameState())

    def test_non_object_json_falls_back_to_new_game(self):
        os.makedirs(os.path.dirname(self.path))
        for payload in ("[]", "null", "\"x\"", "3"):
            with self.subTest(payload=payload):
                with open(self.path, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                store = JsonStateStore(self.path)
                self.assertFalse(store.restore())
                self.assertEqual(store.load(), GameState())

    def test_restore_uses_store_skin_count(self):
        store = JsonStateStore(self.path, skin_count=5)
        store.save(GameState(cat_id=4))
        store.flush()
        other = JsonStateStore(self.path, skin_count=5)
        self.assertTrue(other.restore())
        self.assertEqual(other.load().cat_id, 4)

    def test_saved_file_is_plain_json(self):
        store = JsonStateStore(self.path)
        store.flush()
        with open(self.path, encoding="utf-8") as handle:
            data = json.load(handle)
        self.assertEqual(data["cat_x"], 128.0)
        self.assertEqual(data["pancakes"], [])


if __name__ == "__main__":
    unittest.main()

import unittest

from exp_core import (
    NO_SELECTION_MESSAGE,
    Mode,
    StateStore,
    coerce_number,
)


class TestCoercion(unittest.TestCase):
    def test_numbers_pass_through(self):
        self.assertEqual(coerce_number(12), 12.0)
        self.assertEqual(coerce_number(-3.5), -3.5)

    def test_invalid_text_is_zero(self):
        for raw in ("", "   ", "abc", None, "-", ".", True, float("nan"), "Infinity"):
            with self.subTest(raw=raw):
                self.assertEqual(coerce_number(raw), 0.0)

    def test_leading_numeric_prefix_is_used(self):
        self.assertEqual(coerce_number("12abc"), 12.0)
        self.assertEqual(coerce_number(" 1.5e2 "), 150.0)
        self.assertEqual(coerce_number("-.5"), -0.5)
        self.assertEqual(coerce_number("7e"), 7.0)


class TestStateStore(unittest.TestCase):
    def setUp(self):
        self.store = StateStore()

    def test_all_modes_exist_from_start(self):
        for mode in Mode:
            state = self.store.state(mode)
            self.assertEqual(len(state.characters), 5)
            self.assertEqual(state.book, 1)
            self.assertEqual(len(state.characters[0].exp_stats), 9)
        self.assertEqual(self.store.state(Mode.FOUR_PLAYER).coop_count, 4)
        self.assertEqual(self.store.state(Mode.TWO_PLAYER).coop_count, 2)

    def test_initial_outcomes(self):
        self.assertEqual(len(self.store.last_outcome(Mode.FOUR_PLAYER).results), 5)
        self.assertTrue(self.store.last_outcome("2p").no_selection)
        self.assertTrue(self.store.last_outcome("solo").no_selection)

    def test_set_field_coerces_and_recalculates(self):
        outcome = self.store.set_field(Mode.FOUR_PLAYER, "base_exp", "100")
        self.assertEqual(outcome.results[0].exp, 300)
        outcome = self.store.set_field(Mode.FOUR_PLAYER, "baseExp", "oops")
        self.assertEqual(self.store.state(Mode.FOUR_PLAYER).base_exp, 0.0)
        self.assertEqual(outcome.results[0].exp, 0)

    def test_negative_values_are_accepted(self):
        self.store.set_field("4p", "base_bp", "-20")
        self.assertEqual(self.store.state("4p").base_bp, -20.0)

    def test_two_player_coop_count_is_capped(self):
        self.store.set_field(Mode.TWO_PLAYER, "coop_count", "4")
        self.assertEqual(self.store.state(Mode.TWO_PLAYER).coop_count, 2)
        self.store.set_field(Mode.FOUR_PLAYER, "coop_count", "6")
        self.assertEqual(self.store.state(Mode.FOUR_PLAYER).coop_count, 6)

    def test_character_stat_updates_row_total(self):
        outcome = self.store.set_character_stat(Mode.FOUR_PLAYER, 1, "exp", 3, "12.5")
        self.assertEqual(outcome.row_totals.exp[1], 12.5)
        outcome = self.store.set_character_stat(Mode.FOUR_PLAYER, 1, "bp", 8, "x")
        self.assertEqual(outcome.row_totals.bp[1], 0.0)

    def test_selection_drives_aggregate(self):
        self.store.set_field(Mode.SOLO, "base_exp", 1000)
        self.store.set_field(Mode.SOLO, "lsExp", 10)
        self.store.set_field(Mode.SOLO, "friendLs", 5)
        self.store.set_field(Mode.SOLO, "book", 2)
        self.store.set_character_stat(Mode.SOLO, 0, "exp", 0, 15)
        outcome = self.store.set_character_selected(Mode.SOLO, 0, True)
        self.assertFalse(outcome.no_selection)
        self.assertEqual(outcome.results[0].exp, 2600)
        self.assertEqual(outcome.results[0].bp, 0)
        self.assertEqual(len(outcome.projection), 100)

        outcome = self.store.set_character_selected(Mode.SOLO, 0, False)
        self.assertTrue(outcome.no_selection)
        self.assertEqual(outcome.results, ())
        self.assertEqual(outcome.projection, ())
        self.assertTrue(NO_SELECTION_MESSAGE)

    def test_modes_are_isolated(self):
        before = self.store.last_outcome(Mode.TWO_PLAYER)
        self.store.set_field(Mode.FOUR_PLAYER, "base_exp", 500)
        self.store.set_character_selected(Mode.FOUR_PLAYER, 0, True)
        self.assertIs(self.store.last_outcome(Mode.TWO_PLAYER), before)
        self.assertEqual(self.store.state(Mode.TWO_PLAYER).base_exp, 0.0)
        self.assertFalse(self.store.state(Mode.TWO_PLAYER).characters[0].selected)

    def test_select_mode_changes_nothing(self):
        self.store.set_field(Mode.TWO_PLAYER, "base_exp", 100)
        cached = self.store.last_outcome(Mode.TWO_PLAYER)
        outcome = self.store.select_mode("2p")
        self.assertIs(outcome, cached)
        self.assertEqual(self.store.active_mode, Mode.TWO_PLAYER)
        self.assertEqual(self.store.state(Mode.TWO_PLAYER).base_exp, 100)
        self.store.select_mode(Mode.FOUR_PLAYER)
        self.assertIs(self.store.last_outcome(Mode.TWO_PLAYER), cached)

    def test_listeners_receive_each_change(self):
        received = []
        listener = lambda mode, outcome: received.append((mode, outcome))
        self.store.subscribe(listener)
        self.store.set_field(Mode.SOLO, "base_exp", 10)
        self.store.set_character_selected(Mode.TWO_PLAYER, 4, True)
        self.assertEqual([mode for mode, _ in received], [Mode.SOLO, Mode.TWO_PLAYER])
        self.assertIs(received[-1][1], self.store.last_outcome(Mode.TWO_PLAYER))

        self.store.unsubscribe(listener)
        self.store.set_field(Mode.SOLO, "base_exp", 20)
        self.assertEqual(len(received), 2)

    def test_unknown_routes_raise(self):
        with self.assertRaises(ValueError):
            self.store.set_field("8p", "base_exp", 1)
        with self.assertRaises(ValueError):
            self.store.set_field(Mode.SOLO, "bonus", 1)
        with self.assertRaises(ValueError):
            self.store.set_character_stat(Mode.SOLO, 5, "exp", 0, 1)
        with self.assertRaises(ValueError):
            self.store.set_character_stat(Mode.SOLO, 0, "exp", 9, 1)
        with self.assertRaises(ValueError):
            self.store.set_character_stat(Mode.SOLO, 0, "hp", 0, 1)


if __name__ == "__main__":
    unittest.main()

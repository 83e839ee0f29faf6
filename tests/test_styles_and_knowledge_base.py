import unittest

from dance_verify.services.knowledge_base import KNOWN_KRUMP_MOVES, lookup_attribution
from dance_verify.services.styles import CATCH_ALL_STYLE, DANCE_STYLES, resolve_style, validate_style


class TestStyleValidator(unittest.TestCase):
    def test_case_and_whitespace_insensitive(self):
        self.assertEqual(validate_style("  KRUMP "), "krump")
        self.assertEqual(validate_style("  KRUMP "), validate_style("krump"))

    def test_idempotent(self):
        for style in DANCE_STYLES:
            self.assertEqual(validate_style(validate_style(style)), style)

    def test_unrecognized_and_non_string(self):
        self.assertIsNone(validate_style("not-a-style"))
        self.assertIsNone(validate_style(""))
        self.assertIsNone(validate_style(None))
        self.assertIsNone(validate_style(42))

    def test_resolve_falls_back_to_catch_all(self):
        self.assertEqual(resolve_style(None), CATCH_ALL_STYLE)
        self.assertEqual(resolve_style("moonwalk-only"), CATCH_ALL_STYLE)
        self.assertEqual(resolve_style("House"), "house")

    def test_style_set(self):
        self.assertEqual(len(DANCE_STYLES), 20)
        self.assertEqual(DANCE_STYLES[0], "krump")
        self.assertEqual(DANCE_STYLES[-1], "other")


class TestKnowledgeBase(unittest.TestCase):
    def test_known_move_matching_creator(self):
        match = lookup_attribution("chest pop", "krump", "Tight Eyez")
        self.assertEqual(match, {
            "known_origin": {"creator": "Tight Eyez", "era": "2000-2004"},
            "match": True,
        })

    def test_creator_comparison_is_case_insensitive(self):
        self.assertTrue(lookup_attribution("Stomp", "krump", "big mijo")["match"])

    def test_known_move_other_creator(self):
        match = lookup_attribution("chest pop", "krump", "Someone Else")
        self.assertIsNotNone(match)
        self.assertFalse(match["match"])

    def test_only_specialty_style(self):
        self.assertIsNone(lookup_attribution("chest pop", "breaking", "Tight Eyez"))

    def test_unknown_move(self):
        self.assertIsNone(lookup_attribution("windmill", "krump", "Tight Eyez"))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KNOWN_KRUMP_MOVES["new move"] = {"creator": "x", "era": "y"}


if __name__ == "__main__":
    unittest.main()

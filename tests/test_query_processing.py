"""
Unit tests for query preprocessing and search variations.
"""

import unittest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from query_processing import (
    SEARCH_CORRECTIONS,
    CHARACTER_SUBSTITUTIONS,
    preprocess_search_term,
    generate_search_variations
)

class TestPreprocessSearchTerm(unittest.TestCase):

    def test_known_corrections(self):
        """Test typo and alias corrections."""
        self.assertEqual(preprocess_search_term("spiderman"), "spider-man")
        self.assertEqual(preprocess_search_term("xmen"), "x-men")
        self.assertEqual(preprocess_search_term("ironman"), "iron man")
        self.assertEqual(preprocess_search_term("kerate"), "karate")
        self.assertEqual(preprocess_search_term("deamon"), "demon")

    def test_lookup_ignores_case_and_whitespace(self):
        self.assertEqual(preprocess_search_term("  SpiderMan "), "spider-man")
        self.assertEqual(preprocess_search_term("XMEN"), "x-men")

    def test_unknown_term_returned_unchanged(self):
        """Unmatched terms keep their original case and spacing."""
        self.assertEqual(preprocess_search_term("The Matrix"), "The Matrix")
        self.assertEqual(preprocess_search_term(" Inception "), " Inception ")

    def test_empty_string(self):
        self.assertEqual(preprocess_search_term(""), "")

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            SEARCH_CORRECTIONS["matrx"] = "matrix"
        with self.assertRaises(TypeError):
            CHARACTER_SUBSTITUTIONS["q"] = ("k",)

class TestGenerateSearchVariations(unittest.TestCase):

    def test_term_comes_first(self):
        for term in ["inception", "Iron Man", "x-men", "Zz", "1917"]:
            with self.subTest(term=term):
                self.assertEqual(generate_search_variations(term)[0], term)

    def test_order_of_first_appearance(self):
        """Substitutions are applied position by position."""
        variations = generate_search_variations("iron man")
        self.assertEqual(variations[:4], ["iron man", "eron man", "aron man", "irun man"])

    def test_single_position_substitution(self):
        variations = generate_search_variations("zzz")
        self.assertEqual(variations, ["zzz", "szz", "zsz", "zzs"])

    def test_no_duplicates_or_unchanged_copies(self):
        term = "Inception"
        variations = generate_search_variations(term)
        self.assertEqual(len(variations), len(set(variations)))
        self.assertNotIn(term.lower(), variations[1:])

    def test_variations_are_lowercased(self):
        variations = generate_search_variations("Alien")
        self.assertEqual(variations[0], "Alien")
        for variation in variations[1:]:
            self.assertEqual(variation, variation.lower())

    def test_multi_character_substitutions(self):
        """Digraph and suffix entries replace the whole matched pattern."""
        self.assertIn("fone", generate_search_variations("phone"))
        self.assertIn("nasion", generate_search_variations("nation"))
        self.assertIn("phear", generate_search_variations("fear"))

    def test_substitution_can_grow_term(self):
        self.assertIn("ckat", generate_search_variations("kat"))

    def test_no_substitutable_characters(self):
        self.assertEqual(generate_search_variations("1917"), ["1917"])
        self.assertEqual(generate_search_variations(""), [""])

    def test_corrected_term_variations(self):
        """Variations of a corrected term start from the correction."""
        processed = preprocess_search_term("xmen")
        self.assertEqual(generate_search_variations(processed), ["x-men", "x-min", "x-man"])

if __name__ == '__main__':
    unittest.main()

from unittest import TestCase

from letterboxed.letter_box import InvalidGroupLength, LetterBox, LetterGroup, is_legal
from tests import GROUPS, create_box


class LetterGroupTest(TestCase):

    def test_three_letters(self):
        group = LetterGroup("abc")
        self.assertIn("b", group)
        self.assertNotIn("d", group)
        self.assertEqual("abc", str(group))

    def test_wrong_length(self):
        for letters in ["", "ab", "abcd"]:
            with self.subTest(letters=letters):
                with self.assertRaises(InvalidGroupLength):
                    LetterGroup(letters)

    def test_invalid_length_is_value_error(self):
        self.assertTrue(issubclass(InvalidGroupLength, ValueError))

    def test_duplicates_within_group_allowed(self):
        self.assertEqual("aab", LetterGroup("aab").letters)


class LetterBoxTest(TestCase):

    def test_allowed_letters(self):
        box = create_box()
        self.assertSetEqual(set("abcdefghijkl"), set(box.allowed_letters))
        self.assertEqual(tuple("abcdefghijkl"), box.alphabet)
        self.assertTrue(box.no_duplicate_letters)

    def test_duplicate_letters(self):
        box = create_box(["aab", "def", "ghi", "jkl"])
        self.assertEqual(11, len(box.allowed_letters))
        self.assertFalse(box.no_duplicate_letters)

    def test_letter_shared_between_sides(self):
        box = create_box(["abc", "ade", "fgh", "ijk"])
        self.assertFalse(box.no_duplicate_letters)
        self.assertTrue(box.same_group("a", "b"))
        self.assertTrue(box.same_group("a", "d"))
        self.assertFalse(box.same_group("b", "d"))

    def test_bad_group_aborts_box(self):
        with self.assertRaises(InvalidGroupLength):
            LetterBox.from_strings(["abc", "de", "ghi", "jkl"])

    def test_wrong_group_count(self):
        with self.assertRaises(ValueError):
            LetterBox.from_strings(GROUPS[:3])

    def test_letter_mask(self):
        box = create_box()
        mask = box.letter_mask("adz")
        self.assertEqual(12, len(mask))
        self.assertEqual(2, mask.count(1))
        self.assertTrue(mask[0])
        self.assertTrue(mask[3])
        self.assertEqual(0, box.letter_mask("").count(1))


class IsLegalTest(TestCase):

    def setUp(self):
        self.box = create_box()

    def test_alternating_sides(self):
        self.assertTrue(is_legal("adg", self.box))
        self.assertTrue(is_legal("adgjbehkcfil", self.box))
        self.assertTrue(is_legal("jad", self.box))

    def test_same_side_twice(self):
        self.assertFalse(is_legal("abd", self.box))
        self.assertFalse(is_legal("dab", self.box))
        self.assertFalse(is_legal("adgjkl", self.box))

    def test_doubled_letter(self):
        self.assertFalse(is_legal("add", self.box))

    def test_short_words(self):
        self.assertTrue(is_legal("", self.box))
        self.assertTrue(is_legal("a", self.box))
        self.assertTrue(is_legal("ad", self.box))
        self.assertFalse(is_legal("ab", self.box))

    def test_letters_off_the_box(self):
        # membership is the dictionary builder's concern
        self.assertTrue(is_legal("xyz", self.box))

    def test_shared_letter(self):
        box = create_box(["abc", "ade", "fgh", "ijk"])
        self.assertTrue(is_legal("af", box))
        self.assertFalse(is_legal("ad", box))
        self.assertFalse(is_legal("ea", box))

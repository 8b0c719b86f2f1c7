"""Tokenizer and normalizer behavior for raw path strings."""

from __future__ import annotations

import unittest

from treepath import InvalidPath, POSIX_POLICY, WINDOWS_POLICY, SegmentTokenizer, normalize_segments, split_tokens


class SegmentTokenizerTests(unittest.TestCase):
    def test_split_keeps_empty_tokens_for_repeated_and_trailing_separators(self) -> None:
        self.assertEqual(split_tokens("/a//b/", "/"), ["", "a", "", "b", ""])

    def test_split_without_separator_returns_whole_string(self) -> None:
        self.assertEqual(split_tokens("abc", "/"), ["abc"])
        self.assertEqual(split_tokens("", "/"), [""])

    def test_tokenizer_restarts_from_last_stop_position(self) -> None:
        tokenizer = SegmentTokenizer("a/b/c", "/")
        self.assertEqual(next(tokenizer), "a")
        self.assertEqual(tokenizer.position, 2)

        resumed = SegmentTokenizer("a/b/c", "/", position=tokenizer.position)
        self.assertEqual(list(resumed), ["b", "c"])
        self.assertIsNone(resumed.position)

    def test_drive_letter_separators_split_on_either_slash(self) -> None:
        self.assertEqual(split_tokens("C:\\Users/me\\x", WINDOWS_POLICY.separators), ["C:", "Users", "me", "x"])


class NormalizeSegmentsTests(unittest.TestCase):
    def test_dot_and_dotdot_tokens_collapse(self) -> None:
        self.assertEqual(normalize_segments("/a/./b/../c", POSIX_POLICY), ("a", "c"))
        self.assertEqual(normalize_segments("/a/./b/../c", POSIX_POLICY), normalize_segments("/a/c", POSIX_POLICY))

    def test_duplicate_and_trailing_separators_are_absorbed(self) -> None:
        self.assertEqual(normalize_segments("//a///b/", POSIX_POLICY), ("a", "b"))

    def test_root_normalizes_to_empty_sequence(self) -> None:
        self.assertEqual(normalize_segments("/", POSIX_POLICY), ())

    def test_dotdot_at_root_is_rejected(self) -> None:
        with self.assertRaises(InvalidPath):
            normalize_segments("/../x", POSIX_POLICY)

    def test_empty_input_is_rejected(self) -> None:
        with self.assertRaises(InvalidPath):
            normalize_segments("", POSIX_POLICY)

    def test_relative_input_is_rejected(self) -> None:
        with self.assertRaises(InvalidPath):
            normalize_segments("a/b", POSIX_POLICY)
        with self.assertRaises(InvalidPath):
            normalize_segments("/a/b", WINDOWS_POLICY)
        with self.assertRaises(InvalidPath):
            normalize_segments("/:/x", WINDOWS_POLICY)
        with self.assertRaises(InvalidPath):
            normalize_segments("\\:\\x", WINDOWS_POLICY)

    def test_drive_segment_cannot_be_popped(self) -> None:
        self.assertEqual(normalize_segments("C:\\a\\..", WINDOWS_POLICY), ("C:",))
        with self.assertRaises(InvalidPath):
            normalize_segments("C:/a/../..", WINDOWS_POLICY)

    def test_invalid_path_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            normalize_segments("", POSIX_POLICY)


if __name__ == "__main__":
    unittest.main()

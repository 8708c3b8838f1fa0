"""Tests for build_search_vector and generate_snippet."""

from pinkbeam.application.services.search_text import (
    build_search_vector,
    generate_snippet,
)

# "w00 w01 ... w39": word i starts at offset 4 * i; 159 characters.
NUMBERED_WORDS = " ".join(f"w{i:02d}" for i in range(40))


class TestBuildSearchVector:
    def test_joins_with_single_spaces(self) -> None:
        assert build_search_vector("Acme", "site", "redesign") == "Acme site redesign"

    def test_none_values_dropped(self) -> None:
        assert build_search_vector("Acme", None, "redesign", None) == "Acme redesign"

    def test_whitespace_runs_collapsed_and_trimmed(self) -> None:
        assert build_search_vector("  Acme\t\tsite ", "\nredesign  ") == "Acme site redesign"

    def test_empty_strings_leave_no_gaps(self) -> None:
        assert build_search_vector("Acme", "", "   ", "site") == "Acme site"

    def test_nothing_to_index(self) -> None:
        assert build_search_vector() == ""
        assert build_search_vector(None, None) == ""


class TestGenerateSnippet:
    def test_short_content_without_match_returned_unchanged(self) -> None:
        assert generate_snippet("Short text", "missing") == "Short text"

    def test_long_content_without_match_truncated(self) -> None:
        content = "word " * 40
        expected = ("word " * 30).strip() + "..."
        assert generate_snippet(content, "missing") == expected

    def test_match_in_short_content_returns_whole_content(self) -> None:
        content = "The quick brown fox jumps over the lazy dog"
        assert generate_snippet(content, "fox") == content

    def test_match_is_case_insensitive(self) -> None:
        assert generate_snippet("Hello World", "WORLD") == "Hello World"

    def test_window_snaps_to_word_boundaries_with_ellipses(self) -> None:
        # Match "w20" at 80; window starts after the space at 27 and is
        # extended from 108 to the space at 111.
        expected = "..." + " ".join(f"w{i:02d}" for i in range(7, 28)) + "..."
        assert generate_snippet(NUMBERED_WORDS, "w20", max_length=80) == expected

    def test_no_leading_ellipsis_when_window_starts_at_zero(self) -> None:
        # Window 0..20 extended to the space at 23.
        assert generate_snippet(NUMBERED_WORDS, "w02", max_length=20) == (
            "w00 w01 w02 w03 w04 w05..."
        )

    def test_no_trailing_ellipsis_when_window_reaches_end(self) -> None:
        expected = "..." + " ".join(f"w{i:02d}" for i in range(26, 40))
        assert generate_snippet(NUMBERED_WORDS, "w39") == expected

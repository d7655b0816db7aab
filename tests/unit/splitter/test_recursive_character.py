"""Unit tests for RecursiveCharacterChunker."""

import re

import pytest

from kbchunker.splitter import RecursiveCharacterChunker


def squash(text: str) -> str:
    return re.sub(r"\s+", "", text)


class TestBasicSplitting:

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t \n"])
    def test_blank_input_yields_no_chunks(self, text):
        chunker = RecursiveCharacterChunker(chunk_size=10, chunk_overlap=2)
        assert chunker.split_text(text) == []

    def test_paragraph_sentences(self):
        chunker = RecursiveCharacterChunker(chunk_size=6, chunk_overlap=0)
        chunks = chunker.split_text("Paragraph one text. Paragraph two text.")

        assert [c.content for c in chunks] == ["Paragraph one text.", "Paragraph two text."]
        assert [c.index for c in chunks] == [0, 1]
        assert [c.token_count for c in chunks] == [5, 5]
        assert (chunks[0].metadata.start_char, chunks[0].metadata.end_char) == (0, 19)
        assert (chunks[1].metadata.start_char, chunks[1].metadata.end_char) == (20, 39)

    def test_short_input_is_single_trimmed_chunk(self):
        chunker = RecursiveCharacterChunker(chunk_size=100, chunk_overlap=0)
        chunks = chunker.split_text("  Hello world.  ")

        assert len(chunks) == 1
        assert chunks[0].content == "Hello world."
        assert chunks[0].metadata.start_char == 2
        assert chunks[0].metadata.end_char == 14

    def test_character_fallback(self):
        chunker = RecursiveCharacterChunker(chunk_size=2, chunk_overlap=0)
        chunks = chunker.split_text("x" * 30)

        assert [len(c.content) for c in chunks] == [8, 8, 8, 6]
        assert all(c.token_count <= 2 for c in chunks)

    def test_oversized_atomic_unit_is_kept_whole(self):
        chunker = RecursiveCharacterChunker(chunk_size=5, chunk_overlap=0, separators=[" "])
        chunks = chunker.split_text("a" * 40 + " b")

        assert [c.content for c in chunks] == ["a" * 40, "b"]
        assert chunks[0].token_count == 10

    def test_custom_separators(self):
        chunker = RecursiveCharacterChunker(chunk_size=2, chunk_overlap=0, separators=["|", ""])
        chunks = chunker.split_text("aaaa|bbbb|cccc")

        assert [c.content for c in chunks] == ["aaaa|", "bbbb|", "cccc"]

    def test_empty_separator_list_uses_defaults(self):
        chunker = RecursiveCharacterChunker(chunk_size=10, separators=[])
        assert chunker.separators == RecursiveCharacterChunker.DEFAULT_SEPARATORS

    def test_drop_separator_variant(self):
        chunker = RecursiveCharacterChunker(chunk_size=6, chunk_overlap=0, keep_separator=False)
        chunks = chunker.split_text("Paragraph one text. Paragraph two text.")

        assert [c.content for c in chunks] == ["Paragraph one text", "Paragraph two text."]

    def test_separator_placement_changes_word_boundaries(self):
        text = "aaa bbbb ccc"

        dropped = RecursiveCharacterChunker(chunk_size=2, chunk_overlap=0, keep_separator=False)
        kept = RecursiveCharacterChunker(chunk_size=2, chunk_overlap=0)

        # Dropped separators are not counted against the budget
        assert [c.content for c in dropped.split_text(text)] == ["aaa bbbb", "ccc"]
        assert [c.content for c in kept.split_text(text)] == ["aaa", "bbbb ccc"]

    def test_repeated_text_offsets_advance(self):
        chunker = RecursiveCharacterChunker(chunk_size=5, chunk_overlap=0)
        chunks = chunker.split_text("Hello there. Hello there.")

        assert [c.content for c in chunks] == ["Hello there.", "Hello there."]
        assert chunks[0].metadata.start_char == 0
        assert chunks[1].metadata.start_char == 13
        assert chunks[1].metadata.end_char == 25


class TestInvariants:

    def test_coverage_without_overlap(self, sample_article):
        chunker = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=0)
        chunks = chunker.split_text(sample_article)

        assert len(chunks) > 1
        assert squash("".join(c.content for c in chunks)) == squash(sample_article)

    def test_budget_without_overlap(self, sample_article):
        chunker = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=0)
        chunks = chunker.split_text(sample_article)

        assert all(c.token_count <= 40 for c in chunks)

    def test_no_empty_chunks(self):
        chunker = RecursiveCharacterChunker(chunk_size=2, chunk_overlap=0)
        chunks = chunker.split_text("one\n\n\n\n   \n\ntwo\n\n\n\nsix")

        assert [c.content for c in chunks] == ["one", "two", "six"]
        assert [c.index for c in chunks] == [0, 1, 2]

    def test_offsets_point_at_content(self, sample_article):
        chunker = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=0)
        for chunk in chunker.split_text(sample_article):
            start, end = chunk.metadata.start_char, chunk.metadata.end_char
            assert sample_article[start:end] == chunk.content

    def test_deterministic(self, sample_article):
        chunker = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=8)
        assert chunker.split_text(sample_article) == chunker.split_text(sample_article)

    def test_token_count_matches_content(self, sample_article):
        chunker = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=8)
        for chunk in chunker.split_text(sample_article):
            assert chunk.token_count == -(-len(chunk.content) // 4)


class TestOverlap:

    TEXT = "Alpha beta gamma delta. Epsilon zeta eta theta. Iota kappa lambda mu."

    def test_tail_of_previous_chunk_is_prepended(self):
        chunker = RecursiveCharacterChunker(chunk_size=10, chunk_overlap=2)
        chunks = chunker.split_text(self.TEXT)

        assert [c.content for c in chunks] == [
            "Alpha beta gamma delta.",
            "a delta. Epsilon zeta eta theta.",
            "a theta. Iota kappa lambda mu.",
        ]
        assert [c.token_count for c in chunks] == [6, 8, 8]

    def test_offsets_ignore_overlap(self):
        chunker = RecursiveCharacterChunker(chunk_size=10, chunk_overlap=2)
        chunks = chunker.split_text(self.TEXT)

        assert [(c.metadata.start_char, c.metadata.end_char) for c in chunks] == [
            (0, 23),
            (24, 47),
            (48, 69),
        ]

    def test_overlap_matches_unoverlapped_tails(self, sample_article):
        plain = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=0).split_text(sample_article)
        overlapped = RecursiveCharacterChunker(chunk_size=40, chunk_overlap=6).split_text(sample_article)

        assert len(plain) == len(overlapped)
        assert overlapped[0].content == plain[0].content
        for previous, current in zip(plain, overlapped[1:]):
            tail = previous.content[-24:]
            assert tail.strip() in current.content

    def test_naturally_present_tail_is_not_duplicated(self):
        chunker = RecursiveCharacterChunker(chunk_size=5, chunk_overlap=1)
        chunks = chunker.split_text("Hello there. Hello there.")

        assert [c.content for c in chunks] == ["Hello there.", "Hello there."]

    def test_overlap_larger_than_chunk_does_not_snowball(self):
        chunker = RecursiveCharacterChunker(chunk_size=1, chunk_overlap=3)
        chunks = chunker.split_text("ab cd ef gh")

        assert [c.content for c in chunks] == ["ab", "ab cd", "cd ef", "ef gh"]
        assert [c.metadata.start_char for c in chunks] == [0, 3, 6, 9]

    def test_single_chunk_is_untouched(self):
        chunker = RecursiveCharacterChunker(chunk_size=100, chunk_overlap=20)
        chunks = chunker.split_text("Just one short sentence.")

        assert [c.content for c in chunks] == ["Just one short sentence."]


class TestValidation:

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError, match="chunk_size must be positive"):
            RecursiveCharacterChunker(chunk_size=size, chunk_overlap=0)

    def test_rejects_negative_overlap(self):
        with pytest.raises(ValueError, match="chunk_overlap must be non-negative"):
            RecursiveCharacterChunker(chunk_size=10, chunk_overlap=-1)

    def test_overlap_not_smaller_than_size_is_accepted(self):
        chunker = RecursiveCharacterChunker(chunk_size=4, chunk_overlap=4)
        assert chunker.chunk_overlap == 4

"""Recursive character-based text chunker with token budgets.

This chunker implements a hierarchical splitting strategy similar to LangChain's
RecursiveCharacterTextSplitter, prioritizing natural boundaries, and then
stitches a tail of each chunk onto the head of the next for retrieval
continuity.
"""

from loguru import logger

from ...core.chunk import Chunk, ChunkMetadata
from ..base import BaseChunker
from ..tokens import CHARS_PER_TOKEN, estimate_token_count

# Length of the overlap tail searched for in the next chunk before prepending
OVERLAP_PROBE_CHARS = 50


class RecursiveCharacterChunker(BaseChunker):
    """Recursively chunks text using a hierarchy of separators.

    Boundaries are tried in order of preference:
    1. Double newlines (paragraphs)
    2. Single newlines (lines)
    3. Sentences (periods, exclamation marks, question marks)
    4. Clauses (semicolons, commas)
    5. Spaces (words)
    6. Characters (last resort)

    Sizes are estimated tokens (see estimate_token_count), not characters.

    Attributes:
        chunk_size: Maximum estimated tokens per chunk
        chunk_overlap: Estimated tokens to carry over between chunks
        separators: List of separator strings in order of preference
        keep_separator: Whether the separator stays attached to the segment before it
    """

    # Default separators in order of semantic significance
    DEFAULT_SEPARATORS = [
        "\n\n",  # Paragraphs
        "\n",  # Lines
        ". ",  # Sentences
        "! ",  # Exclamations
        "? ",  # Questions
        "; ",  # Semicolons
        ", ",  # Commas
        " ",  # Spaces (words)
        "",  # Characters (fallback)
    ]

    def __init__(
        self,
        chunk_size: int = 512,
        chunk_overlap: int = 64,
        separators: list[str] | None = None,
        keep_separator: bool = True,
    ):
        """Initialize the recursive character chunker.

        Args:
            chunk_size: Maximum estimated tokens per chunk
            chunk_overlap: Estimated tokens to overlap between chunks
            separators: Custom separator list (uses defaults if None or empty)
            keep_separator: Keep separators attached to the preceding segment.
                When False, separators at chunk boundaries are dropped.

        Raises:
            ValueError: If chunk_size <= 0 or chunk_overlap < 0
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap must be non-negative")
        if chunk_overlap >= chunk_size:
            logger.warning(
                f"chunk_overlap ({chunk_overlap}) >= chunk_size ({chunk_size}); "
                f"overlapped chunks will exceed the size budget"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = list(separators) if separators else list(self.DEFAULT_SEPARATORS)
        self.keep_separator = keep_separator

        logger.debug(
            f"Initialized RecursiveCharacterChunker: "
            f"size={chunk_size}, overlap={chunk_overlap}, "
            f"separators={len(self.separators)}"
        )

    def split_text(self, text: str) -> list[Chunk]:
        """Split text into overlapping, token-budgeted chunks.

        Args:
            text: Text to split

        Returns:
            Ordered chunks; empty when text is empty or whitespace only
        """
        if not text or not text.strip():
            return []

        raw_chunks = self._split_text_recursive(text, self.separators)
        chunks = self._locate_chunks(text, raw_chunks)

        if self.chunk_overlap > 0 and len(chunks) > 1:
            chunks = self._apply_overlap(chunks)

        logger.debug(
            f"Split {len(text)} chars into {len(chunks)} chunks "
            f"(max tokens: {max(c.token_count for c in chunks) if chunks else 0})"
        )
        return chunks

    def _split_text_recursive(self, text: str, separators: list[str]) -> list[str]:
        """Recursively split text using a hierarchy of separators.

        Args:
            text: Text to split
            separators: List of separators to try in order

        Returns:
            List of raw, non-overlapping text chunks in source order
        """
        final_chunks = []

        # Base case: empty separators means split by character
        separator = separators[0] if separators else ""
        new_separators = separators[1:]

        current_chunk = ""

        for split in self._split_by_separator(text, separator):
            potential_chunk = self._merge(current_chunk, split, separator)

            if estimate_token_count(potential_chunk) <= self.chunk_size:
                current_chunk = potential_chunk
                continue

            # Current chunk is full, save it
            if current_chunk:
                final_chunks.append(current_chunk)

            if estimate_token_count(split) > self.chunk_size and new_separators:
                final_chunks.extend(self._split_text_recursive(split, new_separators))
                current_chunk = ""
            else:
                # Either fits on its own or is an atomic unit that cannot shrink further
                current_chunk = split

        if current_chunk:
            final_chunks.append(current_chunk)

        return final_chunks

    def _split_by_separator(self, text: str, separator: str) -> list[str]:
        """Split text by a separator.

        Args:
            text: Text to split
            separator: Separator string ("" splits into characters)

        Returns:
            List of split pieces
        """
        if separator == "":
            return list(text)

        splits = text.split(separator)
        if not self.keep_separator:
            return splits

        # Keep separator at the end of each piece but the last
        result = [split + separator for split in splits[:-1]]
        if splits[-1]:
            result.append(splits[-1])
        return result

    def _merge(self, current: str, split: str, separator: str) -> str:
        if not current:
            return split
        if self.keep_separator:
            # Pieces already carry their separators
            return current + split
        return current + separator + split

    def _locate_chunks(self, text: str, raw_chunks: list[str]) -> list[Chunk]:
        """Trim raw chunks, drop empty ones and attach source offsets.

        Offsets come from a forward scan that never moves back past
        ``end - overlap`` of the previous chunk.
        """
        chunks: list[Chunk] = []
        char_offset = 0

        for raw in raw_chunks:
            content = raw.strip()
            if not content:
                continue

            start_char = text.find(content, char_offset)
            end_char = start_char + len(content)

            chunks.append(
                Chunk(
                    content=content,
                    index=len(chunks),
                    token_count=estimate_token_count(content),
                    metadata=ChunkMetadata(start_char=start_char, end_char=end_char),
                )
            )
            char_offset = max(char_offset, end_char - self.chunk_overlap * CHARS_PER_TOKEN)

        return chunks

    def _apply_overlap(self, chunks: list[Chunk]) -> list[Chunk]:
        """Prepend the tail of each previous chunk to the next one.

        The tail always comes from the previous chunk's own content, never
        from text already prepended to it, so overlap cannot snowball. The
        prefix is skipped when the last OVERLAP_PROBE_CHARS of the tail
        already occur in the chunk.
        """
        overlap_chars = self.chunk_overlap * CHARS_PER_TOKEN
        overlapped = [chunks[0]]

        for previous, chunk in zip(chunks, chunks[1:]):
            content = chunk.content
            overlap_text = previous.content[-overlap_chars:]

            if overlap_text[-OVERLAP_PROBE_CHARS:] not in content:
                content = f"{overlap_text} {content}"

            content = content.strip()
            overlapped.append(
                chunk.model_copy(
                    update={"content": content, "token_count": estimate_token_count(content)}
                )
            )

        return overlapped

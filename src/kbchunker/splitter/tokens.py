"""Token estimation used for every chunk size comparison."""

import math

# Fixed heuristic, not a real tokenizer
CHARS_PER_TOKEN = 4


def estimate_token_count(text: str) -> int:
    """Estimate tokens as ceil(len(text) / 4)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)

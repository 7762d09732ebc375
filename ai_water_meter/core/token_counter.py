"""
Token counting and usage tracking.

Approximates how many tokens a production tokenizer would produce for a
piece of text, and carries prompt/response token pairs.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import tiktoken

# Average tokens per word for English text
TOKENS_PER_WORD = 1.3

# Ideographs, kana and hangul are tokenized roughly one character at a time
_CJK_CHAR = re.compile(
    "[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uac00-\ud7af\uf900-\ufaff]"
)


class TokenizerMethod(Enum):
    """Available token counting strategies."""
    HEURISTIC = "heuristic"
    TIKTOKEN = "tiktoken"


@dataclass(frozen=True)
class TokenUsage:
    """Token counts for a single prompt and its (estimated) response."""
    prompt_tokens: int
    response_tokens: int

    def __post_init__(self):
        """Validate token counts are not negative."""
        if self.prompt_tokens < 0:
            raise ValueError("prompt_tokens cannot be negative")
        if self.response_tokens < 0:
            raise ValueError("response_tokens cannot be negative")

    @property
    def total_tokens(self) -> int:
        """Total tokens used (prompt + response)."""
        return self.prompt_tokens + self.response_tokens


def count_tokens(text: Optional[str]) -> int:
    """Approximate the token count of text with a word-based heuristic.

    Each whitespace-delimited word counts as 1.3 tokens; CJK characters
    count as one word each since those scripts do not separate words
    with spaces.

    Args:
        text: Arbitrary text, may be empty

    Returns:
        Non-negative token count (0 for empty or whitespace-only text)
    """
    if not text:
        return 0

    cjk_chars = len(_CJK_CHAR.findall(text))
    words = len(_CJK_CHAR.sub(" ", text).split())
    units = words + cjk_chars
    if units == 0:
        return 0
    return math.ceil(units * TOKENS_PER_WORD)


class TokenCounter:
    """Counts prompt tokens using the configured strategy.

    The heuristic strategy is deterministic and works offline. The tiktoken
    strategy loads a BPE encoding on first use.
    """

    def __init__(
        self,
        method: TokenizerMethod = TokenizerMethod.HEURISTIC,
        encoding_name: str = "cl100k_base"
    ):
        self.method = method
        self.encoding_name = encoding_name
        self._encoding = None

    def count(self, text: Optional[str]) -> int:
        """Count tokens in text, clamped to a non-negative integer."""
        if not text:
            return 0
        if self.method == TokenizerMethod.TIKTOKEN:
            if self._encoding is None:
                self._encoding = tiktoken.get_encoding(self.encoding_name)
            return max(0, len(self._encoding.encode(text, disallowed_special=())))
        return max(0, count_tokens(text))

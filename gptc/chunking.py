"""Split document text into words and group them into fixed-size chunks."""

import re
from pathlib import Path
from typing import List, Sequence

from gptc.config import CHUNK_SIZE
from gptc.exceptions import InputFileError
from gptc.models.chunk import Chunk

_WHITESPACE = re.compile(r"\s")


def split_words(text: str) -> List[str]:
    """
    Split text on spaces and strip every whitespace character from each token.

    Tokens joined by a newline or tab without a space (e.g. "end.\\nNext") become a
    single word. Empty tokens are dropped.
    """
    words = (_WHITESPACE.sub("", token) for token in text.split(" "))
    return [word for word in words if word]


def chunk_words(words: Sequence[str], chunk_size: int = CHUNK_SIZE) -> List[Chunk]:
    """
    Group words into contiguous chunks of at most chunk_size words.

    Args:
        words: Document words in order.
        chunk_size: Maximum words per chunk.

    Returns:
        List of Chunk with index 0, 1, ... in order; empty for no words.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    return [
        Chunk(index=index, words=tuple(words[start:start + chunk_size]))
        for index, start in enumerate(range(0, len(words), chunk_size))
    ]


def load_words(file_path: str) -> List[str]:
    """Read a UTF-8 text file and return its words."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Could not read input file {file_path}: {e}") from e
    return split_words(text)


def load_chunks(file_path: str, chunk_size: int = CHUNK_SIZE) -> List[Chunk]:
    """Read a text file and split it into chunks."""
    return chunk_words(load_words(file_path), chunk_size)

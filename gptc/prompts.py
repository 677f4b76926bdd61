"""Prompt construction for chunk summarization requests."""

import math
from typing import Tuple

from langchain_core.prompts import ChatPromptTemplate

from gptc.config import CHUNK_SIZE
from gptc.exceptions import DegenerateRatioError
from gptc.models.chunk import Chunk

SUMMARY_TEMPLATE = """Below is a text composed of {word_count} words (words {start_word}-{end_word} of {total_words}):

{chunk_text}

Summarize and compress this text to 1/{ratio} of the size (exactly {target_words} words). \
The resulting text must be readable and keep the important information. \
This is chunk {chunk_number} of {chunks_count}. \
Do not start with "this text..." or "this paper..." or similar. \
Just translate the contents directly, keeping in mind it is a chunk of a broader text."""


def target_word_count(chunk_word_count: int, compression_ratio: float) -> int:
    """Number of words the model is asked to produce: floor(count / ratio)."""
    if compression_ratio <= 0:
        raise DegenerateRatioError(f"Compression ratio must be positive, got {compression_ratio:g}")
    return math.floor(chunk_word_count / compression_ratio)


def word_range(chunk_index: int, chunk_word_count: int, chunk_size: int = CHUNK_SIZE) -> Tuple[int, int]:
    """
    1-based start/end word positions announced in the prompt.

    The end position is bounded by the chunk's own length, not by the document
    length, so for every chunk after the first it is smaller than the start.
    """
    start_word = chunk_index * chunk_size + 1
    end_word = min((chunk_index + 1) * chunk_size, chunk_word_count)
    return start_word, end_word


def format_ratio(compression_ratio: float) -> str:
    """Render 4.0 as "4" and 2.5 as "2.5"."""
    return f"{compression_ratio:g}"


def build_prompt(
    chunk: Chunk,
    chunks_count: int,
    compression_ratio: float,
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """
    Render the summarization instruction for one chunk.

    Args:
        chunk: The chunk to summarize.
        chunks_count: Total number of chunks in the document.
        compression_ratio: Divisor applied to the chunk's word count.
        chunk_size: Configured chunk size, used for the announced word positions.

    Returns:
        Instruction text ready to be sent as the human message.
    """
    start_word, end_word = word_range(chunk.index, chunk.size, chunk_size)
    return SUMMARY_TEMPLATE.format(
        word_count=chunk.size,
        start_word=start_word,
        end_word=end_word,
        total_words=chunk.size,
        chunk_text=chunk.text,
        ratio=format_ratio(compression_ratio),
        target_words=target_word_count(chunk.size, compression_ratio),
        chunk_number=chunk.index + 1,
        chunks_count=chunks_count,
    )


def build_chat_prompt(system_message: str) -> ChatPromptTemplate:
    """Chat template pairing the persona with a rendered chunk prompt.

    The prompt goes in as a variable so braces in the document are left alone.
    """
    return ChatPromptTemplate.from_messages([
        ("system", system_message.replace("{", "{{").replace("}", "}}")),
        ("human", "{prompt}"),
    ])

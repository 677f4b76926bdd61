"""Chunked, streaming document summarizer backed by LangChain chat models."""

from .chunking import chunk_words, load_chunks, load_words, split_words
from .completion import CompletionClient, iter_deltas
from .prompts import build_prompt, target_word_count
from .summarizer import ChunkSummarizer

__all__ = [
    "ChunkSummarizer",
    "CompletionClient",
    "build_prompt",
    "chunk_words",
    "iter_deltas",
    "load_chunks",
    "load_words",
    "split_words",
    "target_word_count",
]

"""Data models for chunks and completion client configuration."""

from .chunk import Chunk
from .completion_config import CompletionConfig

__all__ = ["Chunk", "CompletionConfig"]

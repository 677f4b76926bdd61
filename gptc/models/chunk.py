"""Chunk model for fixed-size runs of document words."""

from typing import Tuple
from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """An ordered, contiguous run of words sent to the model as one unit."""

    index: int = Field(ge=0, description="Zero-based order in the document")
    words: Tuple[str, ...] = Field(description="Words of the chunk, in document order")

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        """Number of words in the chunk."""
        return len(self.words)

    @property
    def text(self) -> str:
        """Chunk words joined by single spaces."""
        return " ".join(self.words)

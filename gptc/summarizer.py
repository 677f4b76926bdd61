"""Sequential chunk orchestration: one streamed request per chunk, in order."""

import sys
from typing import List, Sequence, TextIO

from gptc.completion import CompletionClient
from gptc.config import CHUNK_SIZE
from gptc.exceptions import DegenerateRatioError
from gptc.models.chunk import Chunk
from gptc.prompts import build_prompt, target_word_count


class ChunkSummarizer:
    """Streams a summary of every chunk to an output stream, one chunk at a time."""

    def __init__(
        self,
        client: CompletionClient,
        compression_ratio: float,
        output: TextIO = None,
        chunk_size: int = CHUNK_SIZE,
    ):
        """
        Initialize the summarizer.

        Args:
            client: Completion client used for every chunk.
            compression_ratio: Divisor applied to each chunk's word count.
            output: Stream receiving the summaries (default: sys.stdout).
            chunk_size: Chunk size the chunks were built with.
        """
        self.client = client
        self.compression_ratio = compression_ratio
        self.output = output if output is not None else sys.stdout
        self.chunk_size = chunk_size

    def validate(self, chunks: Sequence[Chunk]) -> None:
        """Reject a ratio that would ask for zero words on any chunk."""
        for chunk in chunks:
            target = target_word_count(chunk.size, self.compression_ratio)
            if target < 1:
                raise DegenerateRatioError(
                    f"Compression ratio {self.compression_ratio:g} leaves chunk {chunk.index + 1} "
                    f"({chunk.size} words) with a target of {target} words. Use a smaller ratio."
                )

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def summarize_chunk(self, chunk: Chunk, chunks_count: int) -> str:
        """Stream one chunk's summary to the output and return its full text."""
        prompt = build_prompt(chunk, chunks_count, self.compression_ratio, self.chunk_size)
        return self.client.complete(prompt, on_delta=self._write)

    def summarize(self, chunks: Sequence[Chunk]) -> List[str]:
        """
        Summarize all chunks sequentially.

        Each chunk's request starts only after the previous stream has finished.
        A newline separator follows every chunk. Any failure aborts the rest.

        Args:
            chunks: Chunks in document order.

        Returns:
            The full summary text of each chunk, in order.
        """
        self.validate(chunks)
        summaries = []
        for chunk in chunks:
            summaries.append(self.summarize_chunk(chunk, len(chunks)))
            print(file=self.output, flush=True)
        return summaries

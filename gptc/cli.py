"""Command-line entry point: gptc <input_file> <compression_ratio>."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from gptc.chunking import load_chunks
from gptc.completion import CompletionClient
from gptc.config import build_completion_config, get_provider, get_token_path
from gptc.credentials import load_token
from gptc.exceptions import GptcError
from gptc.summarizer import ChunkSummarizer

USAGE = "gptc source.txt compression_ratio [-o OUTPUT]"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _compression_ratio(value: str) -> float:
    try:
        ratio = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"compression ratio must be a number, got '{value}'")
    if not ratio > 0 or ratio == float("inf"):
        raise argparse.ArgumentTypeError(f"compression ratio must be a positive number, got '{value}'")
    return ratio


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="gptc",
        usage=USAGE,
        description="Summarize a text file chunk by chunk with an LLM, streaming the result to stdout",
    )
    parser.add_argument("input_file", help="Path to the text file to summarize")
    parser.add_argument(
        "compression_ratio",
        type=_compression_ratio,
        help="Divisor applied to each 1024-word chunk (4 asks for a quarter of the length)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Also write the per-chunk summaries to this file once all chunks are done",
    )
    return parser


def _write_summaries(output_path: str, summaries: List[str]) -> None:
    try:
        Path(output_path).write_text("\n\n".join(summaries) + "\n", encoding="utf-8")
    except OSError as e:
        raise GptcError(f"Could not write summaries to {output_path}: {e}") from e


def run(args: argparse.Namespace) -> List[str]:
    """Load credentials and input, then stream every chunk's summary to stdout."""
    provider = get_provider()
    token = load_token(get_token_path(provider))
    client = CompletionClient(build_completion_config(token, provider))

    chunks = load_chunks(args.input_file)
    summarizer = ChunkSummarizer(client, args.compression_ratio, output=sys.stdout)
    summaries = summarizer.summarize(chunks)

    if args.output:
        _write_summaries(args.output, summaries)
    return summaries


def main(argv: Optional[List[str]] = None) -> None:
    """Main function to run the summarizer."""
    args = build_parser().parse_args(argv)

    # Load environment variables
    load_dotenv()

    try:
        run(args)
    except GptcError as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        sys.stdout.flush()
        print(f"Error: unexpected failure: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

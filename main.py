"""Main entry point for the chunked summarizer."""

from gptc.cli import main


if __name__ == "__main__":
    main()

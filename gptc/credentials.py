"""Loading of the API token from the per-user configuration directory."""

from pathlib import Path

from gptc.exceptions import CredentialError


def load_token(token_path: Path) -> str:
    """
    Read the API token file and return its trimmed contents.

    Args:
        token_path: Path to the single-line token file.

    Returns:
        The API credential.

    Raises:
        CredentialError: If the file is missing, unreadable or empty.
    """
    try:
        token = Path(token_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as e:
        raise CredentialError(
            f"{token_path.name} file not found in {token_path.parent}/\n"
            f"Please make sure {token_path} exists and contains your API token."
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialError(f"Error reading {token_path.name} file: {e}") from e

    if not token:
        raise CredentialError(f"{token_path} is empty. Put your API token on its first line.")
    return token

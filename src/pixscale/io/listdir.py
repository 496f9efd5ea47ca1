from pathlib import Path

from ..config import SUPPORTED_EXTENSIONS


def list_jpeg_files(directory: str | Path) -> list[Path]:
    """
    List the JPEG files directly inside ``directory``, sorted by name.

    Extensions are matched case-insensitively.

    Raises
    ------
    NotADirectoryError
        If ``directory`` does not exist or is not a directory.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Invalid directory: {directory}")

    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix.lower() in SUPPORTED_EXTENSIONS
    )

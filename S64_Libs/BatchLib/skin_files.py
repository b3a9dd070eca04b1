"""
Skin file I/O and discovery.

Functions:
    is_skin_file: Check whether a path has the skin file extension
    load_skin: Decode a PNG file into a SkinCanvas
    save_skin: Encode a SkinCanvas to a PNG file
    find_skin_files: Recursively collect skin files, skipping output directories
    build_output_path: Derive the output file path for a processed skin
"""

from pathlib import Path
from typing import List
import os
import tempfile

from S64_Libs.constants import DEFAULT_OUTPUT_FORMAT, SKIN_EXTENSION
from S64_Libs.pillow_compat import Image
from S64_Libs.SkinEditingLib.skin_models import SkinCanvas


def is_skin_file(file_path: Path) -> bool:
    return file_path.suffix.lower() == SKIN_EXTENSION


def load_skin(file_path: Path) -> SkinCanvas:
    """
    Load a skin image from disk.

    Args:
        file_path: Path to a PNG file

    Returns:
        SkinCanvas holding the decoded image in RGBA mode

    Raises:
        FileNotFoundError: If the file does not exist
        PIL.UnidentifiedImageError: If the file cannot be decoded
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Skin file not found: {file_path}")

    with Image.open(file_path) as img:
        return SkinCanvas.from_image(img.convert("RGBA"))


def save_skin(canvas: SkinCanvas, file_path: Path) -> Path:
    """
    Save a skin canvas as PNG.

    The image is encoded to a temporary file in the target directory and
    then moved over file_path, so concurrent saves to the same path leave
    one complete PNG.

    Raises:
        OSError: If the file cannot be written
    """
    file_path = Path(file_path)
    fd, temp_name = tempfile.mkstemp(
        prefix=f".{file_path.stem}.", suffix=".tmp", dir=file_path.parent
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            canvas.image.save(handle, format=DEFAULT_OUTPUT_FORMAT)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, file_path)
    except Exception:
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise
    return file_path


def find_skin_files(root: Path, skip_dir_name: str) -> List[Path]:
    """
    Recursively collect skin files under a directory.

    Any subdirectory named skip_dir_name (at any depth) is not entered,
    so previously produced output is never reprocessed. Symlinked
    directories are not followed.

    Args:
        root: Directory to walk
        skip_dir_name: Name of output directories to skip

    Returns:
        Sorted list of skin file paths
    """
    root = Path(root)
    found: List[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            if entry.is_symlink() or entry.name == skip_dir_name:
                continue
            found.extend(find_skin_files(entry, skip_dir_name))
        elif entry.is_file() and is_skin_file(entry):
            found.append(entry)
    return found


def build_output_path(input_path: Path, output_dir: Path, suffix: str) -> Path:
    """
    Build '<output_dir>/<stem><suffix>.png' for an input file.

    Example:
        >>> build_output_path(Path("skins/steve.png"), Path("skins/converted"), "_fixed")
        PosixPath('skins/converted/steve_fixed.png')
    """
    return Path(output_dir) / f"{Path(input_path).stem}{suffix}{SKIN_EXTENSION}"

"""
Image reading and writing for masks and signed distance fields.

Masks are decoded with Pillow and converted to RGBA so the classifier always
samples the same channel layout. Fields are written as RGBA PNGs with the
intensity on every color channel.
"""

import glob
import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np
from PIL import Image

from sdfgen.field import SignedDistanceImage

logger = logging.getLogger(__name__)

VALID_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")

PathLike = Union[str, Path]


def load_image(path: PathLike) -> np.ndarray:
    """
    Decode an image file into an RGBA array.

    Args:
        path: Image file path

    Returns:
        uint8 array of shape [height, width, 4]
    """
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"), dtype=np.uint8)


def save_field(field: SignedDistanceImage, path: PathLike) -> Path:
    """Write a field as an RGBA image; the format follows the file extension."""
    path = Path(path)
    Image.fromarray(field.to_rgba()).save(path)
    return path


def load_field(path: PathLike) -> SignedDistanceImage:
    """Read a field written by save_field() (or any image; red channel is used)."""
    return SignedDistanceImage.from_rgba(load_image(path))


def output_path_for(input_path: PathLike, output_dir: PathLike, suffix: str = ".sdf.png") -> Path:
    """Output file for an input image: <output_dir>/<stem><suffix>."""
    return Path(output_dir) / (Path(input_path).stem + suffix)


def _matches_for(pattern: str) -> List[str]:
    # Patterns without an extension match every supported image type
    if "." not in os.path.basename(pattern):
        matches = []
        for ext in VALID_EXTENSIONS:
            matches.extend(sorted(glob.glob(pattern + ext)))
        return matches
    return sorted(glob.glob(pattern))


def expand_inputs(patterns: Iterable[PathLike], dedupe: bool = True) -> List[Path]:
    """
    Expand shell-style patterns into a list of image files.

    Patterns without an extension are tried with each supported extension.
    Directories and files with unsupported extensions are skipped. Order
    follows the patterns, with each pattern's matches sorted.

    Args:
        patterns: Paths or glob patterns
        dedupe: Drop files already matched by an earlier pattern

    Returns:
        Matching image paths

    Raises:
        FileNotFoundError: If nothing matched
    """
    files: List[Path] = []
    seen = set()
    for pattern in patterns:
        pattern = str(pattern)
        matches = _matches_for(pattern)
        if not matches:
            logger.warning(f"No files matched pattern: {pattern}")

        for match in matches:
            path = Path(match)
            if path.suffix.lower() not in VALID_EXTENSIONS:
                continue
            if not path.is_file():
                continue
            if dedupe and path in seen:
                continue
            seen.add(path)
            files.append(path)

    if not files:
        raise FileNotFoundError(
            "No matching image files found, supported formats: "
            + ", ".join(ext.lstrip(".").upper() for ext in VALID_EXTENSIONS)
        )
    return files

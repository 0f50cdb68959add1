# assets.py
# -------------------------------------------------------------
# Asset readers for listing metadata.
# Text files -> trimmed character count.
# Images     -> width/height/format; PNGs are fully decoded so
#               truncated pixel data is caught, and opacity is
#               read from the alpha band when a rule needs it.
# -------------------------------------------------------------

import os
from dataclasses import dataclass

import numpy as np
from PIL import Image, UnidentifiedImageError

# Only these encodings are accepted for listing images
SUPPORTED_FORMATS = ["PNG", "JPEG"]

# Whitespace trimmed around text content. Narrower than str.strip():
# the ASCII separators U+001C..U+001F are kept and counted.
TEXT_WHITESPACE = "\t\n\v\f\r \x85\xa0" + "".join(
    chr(c) for c in [0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
)


class AssetReadError(Exception):
    """Raised when an asset cannot be read or decoded."""


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    format: str  # "png" | "jpeg"


def read_character_count(path: str) -> int:
    """
    Count characters in a UTF-8 text file, ignoring leading/trailing
    whitespace. Bytes that are not valid UTF-8 count as one character each.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise AssetReadError(f'failed to read file "{path}": {e}') from e
    content = data.decode("utf-8", errors="surrogateescape")
    return len(content.strip(TEXT_WHITESPACE))


def _open_image(path: str) -> Image.Image:
    if os.path.isdir(path):
        raise AssetReadError(f'failed to read image "{path}": is a directory')
    try:
        return Image.open(path, formats=SUPPORTED_FORMATS)
    except (OSError, SyntaxError, UnidentifiedImageError, ValueError) as e:
        raise AssetReadError(f'failed to read image "{path}": {e}') from e


def read_image_info(path: str) -> ImageInfo:
    """
    Decode the image header, and for PNG the full pixel data too.
    JPEG pixel data is not touched.
    """
    with _open_image(path) as img:
        width, height = img.size
        fmt = (img.format or "").lower()
        if fmt == "png":
            try:
                img.load()
            except (OSError, SyntaxError, ValueError) as e:
                raise AssetReadError(f'failed to read image "{path}": {e}') from e
    return ImageInfo(width=width, height=height, format=fmt)


def read_opacity(path: str) -> bool:
    """
    Report whether every pixel is fully opaque. Only PNG carries the
    information; any other format raises AssetReadError.
    PNGs without an alpha band or tRNS chunk are opaque by construction.
    """
    with _open_image(path) as img:
        if img.format != "PNG":
            raise AssetReadError(f"unable to determine opacity: unsupported format {img.format}")
        try:
            img.load()
            if "A" not in img.getbands() and "transparency" not in img.info:
                return True
            alpha = np.asarray(img.convert("RGBA").getchannel("A"))
        except (OSError, SyntaxError, ValueError) as e:
            raise AssetReadError(f"unable to determine opacity: {e}") from e
    if alpha.size == 0:
        raise AssetReadError("unable to determine opacity: image has no pixels")
    return bool((alpha == 255).all())

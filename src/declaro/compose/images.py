#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from .errors import InvalidImageData
from .spec import ImageSpec, LayoutConfig

SUPPORTED_FORMATS = frozenset({"PNG", "JPEG", "GIF", "BMP", "TIFF", "WEBP"})


def check_image(field: str, image: ImageSpec) -> str:
    """Decode ``image`` enough to trust it and return its format name."""
    if not image.data:
        raise InvalidImageData(field, "image is empty")
    if image.width_mm <= 0 or image.height_mm <= 0:
        raise InvalidImageData(
            field, f"declared size must be positive, got {image.width_mm}x{image.height_mm} mm"
        )
    try:
        with Image.open(io.BytesIO(image.data)) as handle:
            image_format = handle.format or ""
            handle.verify()
    except (UnidentifiedImageError, OSError, ValueError, SyntaxError) as exc:
        raise InvalidImageData(field, str(exc) or exc.__class__.__name__) from exc
    if image_format.upper() not in SUPPORTED_FORMATS:
        raise InvalidImageData(field, f"unsupported image format: {image_format or 'unknown'}")
    return image_format


def check_layout_images(config: LayoutConfig) -> None:
    if config.header_image is not None:
        check_image("header_image", config.header_image)
    if config.footer_image is not None:
        check_image("footer_image", config.footer_image)

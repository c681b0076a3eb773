from __future__ import annotations
from .bytecursor import Cursor
from ..errors import (
    InvalidImageHeight,
    InvalidImageVersion,
    InvalidImageWidth,
    InvalidImageXHot,
    InvalidImageYHot,
)
from xcur.models.chunk import ChunkHeader
from xcur.models.common import IMAGE_MAX_SIZE, IMAGE_VERSIONS
from xcur.models.image import Image

def decode_image(cur: Cursor, chunk: ChunkHeader) -> Image:
    """
    Image payload: width, height, xhot, yhot, delay (all u32), then
    width*height ARGB words.

    Checks run in a fixed order (version, width, height, xhot, yhot) and all of
    them pass before the pixel array is sized, so the allocation never exceeds
    (IMAGE_MAX_SIZE - 1)**2 words whatever the file claims.
    """
    start = cur.tell()
    if chunk.version not in IMAGE_VERSIONS:
        raise InvalidImageVersion(f"version {chunk.version}", offset=start)

    width = cur.u32()
    height = cur.u32()
    xhot = cur.u32()
    yhot = cur.u32()
    delay = cur.u32()

    if width >= IMAGE_MAX_SIZE:
        raise InvalidImageWidth(f"{width} >= {IMAGE_MAX_SIZE}", offset=start)
    if height >= IMAGE_MAX_SIZE:
        raise InvalidImageHeight(f"{height} >= {IMAGE_MAX_SIZE}", offset=start + 4)
    if xhot >= width:
        raise InvalidImageXHot(f"xhot {xhot} not below width {width}", offset=start + 8)
    if yhot >= height:
        raise InvalidImageYHot(f"yhot {yhot} not below height {height}", offset=start + 12)

    pixels = cur.u32_array(width * height)
    return Image(
        chunk=chunk,
        width=width,
        height=height,
        xhot=xhot,
        yhot=yhot,
        delay_ms=delay,
        pixels=pixels,
    )

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from .codecs.bytecursor import Cursor
from .codecs.file_header import decode_file_header
from .codecs.toc import decode_toc
from .codecs.chunk_header import decode_chunk_header
from .codecs.comment_codec import decode_comment
from .codecs.image_codec import decode_image

from xcur.models.common import ChunkType
from xcur.models.comment import Comment
from xcur.models.file import CursorFile
from xcur.models.file_header import FileHeader, TocEntry
from xcur.models.image import Image

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def _as_buffer(inp: BytesLike, max_bytes: Optional[int] = None) -> memoryview:
    if not isinstance(inp, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like buffer, got {type(inp).__name__}")
    view = memoryview(inp).cast("B")
    if max_bytes is not None and view.nbytes > max_bytes:
        raise ValueError(f"buffer of {view.nbytes} bytes exceeds limit of {max_bytes}")
    return view


def _read_directory(cur: Cursor) -> Tuple[FileHeader, List[TocEntry]]:
    header = decode_file_header(cur)
    logger.debug("header: size=%d version=0x%x ntoc=%d", header.header_size, header.version, header.ntoc)
    toc = decode_toc(cur, header.ntoc)
    return header, toc


# -----------------------------
# Full parse
# -----------------------------

def parse_file(data: BytesLike, *, max_bytes: Optional[int] = None) -> CursorFile:
    """
    Decode a complete Xcursor file held in memory.

    Header, then TOC, then every TOC entry in declaration order: seek to its
    chunk, check the chunk header against the entry, and decode the payload.
    The first error aborts the parse; there is no partial result.
    """
    cur = Cursor(_as_buffer(data, max_bytes))
    _, toc = _read_directory(cur)

    comments: List[Comment] = []
    images: List[Image] = []

    for idx, entry in enumerate(toc):
        logger.debug("toc[%d]: %s subtype=%d at %d", idx, entry.type.name, entry.subtype, entry.position)
        chunk = decode_chunk_header(cur, entry)
        if chunk.type == ChunkType.COMMENT:
            comments.append(decode_comment(cur, chunk))
        else:
            images.append(decode_image(cur, chunk))

    logger.debug("decoded %d comment(s), %d image(s)", len(comments), len(images))
    return CursorFile(comments=comments, images=images)


# -----------------------------
# Directory-only inspection
# -----------------------------

def read_toc(data: BytesLike) -> Tuple[FileHeader, List[TocEntry]]:
    """Header and TOC only; chunk positions are not dereferenced."""
    return _read_directory(Cursor(_as_buffer(data)))


def summarize_file(data: BytesLike) -> Tuple[int, int]:
    """
    Cheap summary: returns (comments_count, images_count) as declared by the TOC.
    Chunk payloads are not decoded or validated.
    """
    _, toc = read_toc(data)
    comments = sum(1 for e in toc if e.type == ChunkType.COMMENT)
    return comments, len(toc) - comments

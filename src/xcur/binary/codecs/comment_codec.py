from __future__ import annotations
from .bytecursor import Cursor
from ..errors import InvalidCommentVersion
from xcur.models.chunk import ChunkHeader
from xcur.models.comment import Comment
from xcur.models.common import COMMENT_VERSIONS

def decode_comment(cur: Cursor, chunk: ChunkHeader) -> Comment:
    """Comment payload: u32 length, then `length` raw bytes (no terminator)."""
    if chunk.version not in COMMENT_VERSIONS:
        raise InvalidCommentVersion(f"version {chunk.version}", offset=cur.tell())
    length = cur.u32()
    data = cur.take(length)
    return Comment(chunk=chunk, length=length, data=data)

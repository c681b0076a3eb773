from __future__ import annotations
from .bytecursor import Cursor
from ..errors import InvalidTOC
from xcur.models.chunk import ChunkHeader
from xcur.models.common import ChunkType
from xcur.models.file_header import TocEntry

def decode_chunk_header(cur: Cursor, entry: TocEntry) -> ChunkHeader:
    """
    Seek to `entry.position` and read the 16-byte chunk preamble
    (size, type, subtype, version). Type and subtype must agree with the TOC.
    Leaves the cursor at the start of the type-specific payload.
    """
    cur.seek(entry.position)
    header_size = cur.u32()
    type_ = cur.u32()
    subtype = cur.u32()
    version = cur.u32()
    if type_ != entry.type or subtype != entry.subtype:
        raise InvalidTOC(
            f"TOC says type 0x{int(entry.type):08X}/subtype {entry.subtype}, "
            f"chunk says 0x{type_:08X}/subtype {subtype}",
            offset=entry.position,
        )
    return ChunkHeader(header_size=header_size, type=ChunkType(type_), subtype=subtype, version=version)

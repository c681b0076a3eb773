from __future__ import annotations
from typing import List
from .bytecursor import Cursor
from ..errors import InvalidTOC
from xcur.models.common import ChunkType
from xcur.models.file_header import TocEntry

_KNOWN_TYPES = {t.value for t in ChunkType}

def decode_toc_entry(cur: Cursor) -> TocEntry:
    start = cur.tell()
    type_ = cur.u32()
    subtype = cur.u32()
    position = cur.u32()
    if type_ not in _KNOWN_TYPES:
        raise InvalidTOC(f"unknown chunk type 0x{type_:08X}", offset=start)
    return TocEntry(type=ChunkType(type_), subtype=subtype, position=position)

def decode_toc(cur: Cursor, ntoc: int) -> List[TocEntry]:
    """
    Read exactly `ntoc` entries in declaration order. Positions are kept as-is;
    they are bounds-checked only when the chunk they point to is decoded.
    """
    # No preallocation: a hostile ntoc runs out of bytes long before memory.
    entries: List[TocEntry] = []
    for _ in range(ntoc):
        entries.append(decode_toc_entry(cur))
    return entries

from __future__ import annotations
from .bytecursor import Cursor
from ..errors import InvalidHeader
from xcur.models.common import MAGIC
from xcur.models.file_header import FileHeader

def decode_file_header(cur: Cursor) -> FileHeader:
    """
    16-byte file header: magic "Xcur", header size, file version, ntoc.
    The magic is checked as soon as its 4 bytes are in hand, so a wrong
    signature wins over a truncated remainder.
    """
    start = cur.tell()
    magic = cur.take(4)
    if magic != MAGIC:
        raise InvalidHeader(f"bad magic {magic!r}, expected {MAGIC!r}", offset=start)
    header_size = cur.u32()
    version = cur.u32()
    ntoc = cur.u32()
    return FileHeader(magic=magic, header_size=header_size, version=version, ntoc=ntoc)

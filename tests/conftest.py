import struct

import pytest

COMMENT = 0xFFFE0001
IMAGE = 0xFFFD0002

HEADER_LEN = 16
TOC_ENTRY_LEN = 12


def u32(*vals: int) -> bytes:
    return struct.pack(f"<{len(vals)}I", *vals)


def header(ntoc: int, *, magic: bytes = b"Xcur", version: int = 0x10000) -> bytes:
    return magic + u32(HEADER_LEN, version, ntoc)


def comment_chunk(text: bytes, *, subtype: int = 1, version: int = 1, length=None) -> bytes:
    n = len(text) if length is None else length
    return u32(20, COMMENT, subtype, version, n) + text


def image_chunk(width: int, height: int, *, subtype=None, version: int = 1,
                xhot: int = 0, yhot: int = 0, delay: int = 0, pixels=None) -> bytes:
    if pixels is None:
        pixels = [(0xFF000000 | i) for i in range(width * height)]
    sub = width if subtype is None else subtype
    return u32(36, IMAGE, sub, version, width, height, xhot, yhot, delay) + u32(*pixels)


def build(chunks) -> bytes:
    """
    Lay out header + TOC + chunks back to back. `chunks` is a list of
    (type, subtype, payload_bytes); TOC positions are computed.
    """
    pos = HEADER_LEN + TOC_ENTRY_LEN * len(chunks)
    toc = b""
    body = b""
    for type_, subtype, payload in chunks:
        toc += u32(type_, subtype, pos)
        body += payload
        pos += len(payload)
    return header(len(chunks)) + toc + body


class XcurBuilder:
    COMMENT = COMMENT
    IMAGE = IMAGE
    u32 = staticmethod(u32)
    header = staticmethod(header)
    comment_chunk = staticmethod(comment_chunk)
    image_chunk = staticmethod(image_chunk)
    build = staticmethod(build)


@pytest.fixture
def xb():
    return XcurBuilder

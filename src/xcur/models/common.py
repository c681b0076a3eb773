from __future__ import annotations
from enum import IntEnum

MAGIC = b"Xcur"

COMMENT_VERSIONS = frozenset({1})
IMAGE_VERSIONS = frozenset({1})

# Image width/height must stay below this.
IMAGE_MAX_SIZE = 0x7FFF

class ChunkType(IntEnum):
    COMMENT = 0xFFFE0001
    IMAGE = 0xFFFD0002

class CommentSubtype(IntEnum):
    COPYRIGHT = 1
    LICENSE = 2
    OTHER = 3

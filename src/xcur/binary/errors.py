"""
Errors raised while decoding an Xcursor buffer.

Every failure is a `ParseError` carrying an `ErrorKind`. The kinds form a flat,
closed set: one subclass per kind and no deeper nesting, so callers may match
either on the class or on `err.kind`.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INCOMPLETE = "incomplete"
    INVALID_HEADER = "invalid_header"
    INVALID_TOC = "invalid_toc"
    INVALID_COMMENT_VERSION = "invalid_comment_version"
    INVALID_IMAGE_VERSION = "invalid_image_version"
    INVALID_IMAGE_WIDTH = "invalid_image_width"
    INVALID_IMAGE_HEIGHT = "invalid_image_height"
    INVALID_IMAGE_XHOT = "invalid_image_xhot"
    INVALID_IMAGE_YHOT = "invalid_image_yhot"


class ParseError(ValueError):
    kind: ErrorKind
    title: str = "Parse error"

    def __init__(self, detail: str = "", *, offset: Optional[int] = None):
        self.detail = detail
        self.offset = offset
        msg = self.title
        if detail:
            msg = f"{msg}: {detail}"
        if offset is not None:
            msg = f"{msg} (at offset {offset})"
        super().__init__(msg)


class Incomplete(ParseError):
    """Not enough bytes were supplied; the bytes that are present may be fine."""
    kind = ErrorKind.INCOMPLETE
    title = "Incomplete data"

    def __init__(self, *, needed: int, available: int, offset: Optional[int] = None):
        self.needed = needed
        self.available = available
        super().__init__(f"need {needed} byte(s), {available} available", offset=offset)


class InvalidHeader(ParseError):
    kind = ErrorKind.INVALID_HEADER
    title = "Invalid header"


class InvalidTOC(ParseError):
    kind = ErrorKind.INVALID_TOC
    title = "Invalid table of contents"


class InvalidCommentVersion(ParseError):
    kind = ErrorKind.INVALID_COMMENT_VERSION
    title = "Invalid comment version"


class InvalidImageVersion(ParseError):
    kind = ErrorKind.INVALID_IMAGE_VERSION
    title = "Invalid image version"


class InvalidImageWidth(ParseError):
    kind = ErrorKind.INVALID_IMAGE_WIDTH
    title = "Invalid image width"


class InvalidImageHeight(ParseError):
    kind = ErrorKind.INVALID_IMAGE_HEIGHT
    title = "Invalid image height"


class InvalidImageXHot(ParseError):
    kind = ErrorKind.INVALID_IMAGE_XHOT
    title = "Invalid image X hot"


class InvalidImageYHot(ParseError):
    kind = ErrorKind.INVALID_IMAGE_YHOT
    title = "Invalid image Y hot"

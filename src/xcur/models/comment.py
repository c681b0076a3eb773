from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .chunk import ChunkHeader
from .common import CommentSubtype

class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    chunk: ChunkHeader
    length: int = Field(..., ge=0)
    data: bytes

    @model_validator(mode="after")
    def _length_matches(self) -> "Comment":
        if len(self.data) != self.length:
            raise ValueError(f"comment length {self.length} != {len(self.data)} bytes")
        return self

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")

    @property
    def subtype_kind(self) -> Optional[CommentSubtype]:
        try:
            return CommentSubtype(self.chunk.subtype)
        except ValueError:
            return None

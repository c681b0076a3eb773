from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from .common import ChunkType

class FileHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    magic: bytes = Field(..., min_length=4, max_length=4)
    header_size: int = Field(..., ge=0)
    version: int = Field(..., ge=0)
    ntoc: int = Field(..., ge=0)

class TocEntry(BaseModel):
    """One directory slot: what lives at `position`, and what size/role it has."""
    model_config = ConfigDict(frozen=True)

    type: ChunkType
    subtype: int = Field(..., ge=0)
    position: int = Field(..., ge=0)

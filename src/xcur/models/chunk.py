from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from .common import ChunkType

class ChunkHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    header_size: int = Field(..., ge=0)
    type: ChunkType
    subtype: int = Field(..., ge=0)
    version: int = Field(..., ge=0)

from __future__ import annotations
from typing import List
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .chunk import ChunkHeader
from .common import IMAGE_MAX_SIZE

class Image(BaseModel):
    """
    One cursor frame. `pixels` are packed ARGB words (alpha in the top byte),
    row-major, `width * height` of them.
    """
    model_config = ConfigDict(frozen=True)

    chunk: ChunkHeader
    width: int = Field(..., ge=1, lt=IMAGE_MAX_SIZE)
    height: int = Field(..., ge=1, lt=IMAGE_MAX_SIZE)
    xhot: int = Field(..., ge=0)
    yhot: int = Field(..., ge=0)
    delay_ms: int = Field(..., ge=0)
    pixels: List[int] = Field(default_factory=list, repr=False)

    @model_validator(mode="after")
    def _check_geometry(self) -> "Image":
        if self.xhot >= self.width or self.yhot >= self.height:
            raise ValueError(f"hot spot ({self.xhot}, {self.yhot}) outside {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(f"expected {self.width * self.height} pixels, got {len(self.pixels)}")
        return self

    @property
    def nominal_size(self) -> int:
        return self.chunk.subtype

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

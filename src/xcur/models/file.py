from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .comment import Comment
from .image import Image

class CursorFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    comments: List[Comment] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "CursorFile":
        from ..binary.reader import parse_file
        return parse_file(data)

    def nominal_sizes(self) -> List[int]:
        """Distinct image nominal sizes, in the order they first appear."""
        seen: List[int] = []
        for img in self.images:
            if img.nominal_size not in seen:
                seen.append(img.nominal_size)
        return seen

    def images_of_size(self, size: int) -> List[Image]:
        """Animation frames authored for one nominal size, in file order."""
        return [img for img in self.images if img.nominal_size == size]

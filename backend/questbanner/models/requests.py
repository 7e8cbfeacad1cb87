"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 150

MAX_DAY = 9999
MAX_NAME_LENGTH = 100


class HeaderRequest(BaseModel):
    """Everything that determines one rendered header."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=0, le=MAX_DAY, description="Alliance Quest day counter")
    channel_name: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="Channel shown in the left pill"
    )
    role_name: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="Role shown in the right pill"
    )
    width: int = Field(default=DEFAULT_WIDTH, gt=0, le=4096, description="Output width in pixels")
    height: int = Field(default=DEFAULT_HEIGHT, gt=0, le=4096, description="Output height in pixels")

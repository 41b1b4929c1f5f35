"""Data models for merging calendars."""

from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class DuplicateHandling(str, Enum):
    """How events sharing a UID across inputs are handled."""

    KEEP_ALL = "keep-all"
    REMOVE = "remove"
    WARN = "warn"


class MergeOptions(BaseModel):
    """Validated options for a merge call."""

    duplicates: DuplicateHandling = Field(
        default=DuplicateHandling.WARN, description="Duplicate handling policy"
    )
    calendar_name: Optional[str] = Field(
        default=None, description="Calendar name for the merged output"
    )

    model_config = ConfigDict(frozen=True)


class DuplicateInfo(BaseModel):
    """An event whose UID already appeared in an earlier position."""

    uid: str = Field(..., description="UID shared by the original and the duplicate")
    summary: str = Field(..., description="Summary of the duplicate event")
    source_index: int = Field(..., description="Input index (0-based) of the duplicate")
    original_index: int = Field(..., description="Input index (0-based) of the first occurrence")

    model_config = ConfigDict(frozen=True)


class MergeMetadata(BaseModel):
    """What happened during a merge."""

    merged_at: datetime = Field(default_factory=datetime.now)
    duplicate_handling: DuplicateHandling
    duplicates_found: int = 0
    duplicates_removed: int = 0
    duplicate_details: list[DuplicateInfo] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_serializer("merged_at")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime to ISO format."""
        return dt.isoformat()


class MergeResult(BaseModel):
    """Result of merging calendars."""

    content: str
    total_events: int
    source_count: int
    metadata: MergeMetadata

    model_config = ConfigDict(frozen=True)


class CleanResult(BaseModel):
    """Result of removing repeated UIDs from a single calendar."""

    content: str
    kept: int
    removed: int
    duplicate_details: list[DuplicateInfo] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


DuplicateReporter = Callable[[list[DuplicateInfo]], None]

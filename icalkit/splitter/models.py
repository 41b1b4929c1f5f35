"""Data models for splitting calendars into chunks."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_serializer

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_FILE_NAME_PATTERN = "calendar_part_{n}_of_{total}.ics"


class SortOrder(str, Enum):
    """Event ordering applied before splitting."""

    DTSTART = "dtstart"
    ORIGINAL = "original"


class SplitOptions(BaseModel):
    """Validated options for a split call."""

    chunk_size: StrictInt = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, description="Maximum number of events per chunk"
    )
    sort_by: SortOrder = Field(default=SortOrder.DTSTART, description="Event order")
    file_name_pattern: Optional[str] = Field(
        default=None, description="File name with {n} and {total} placeholders"
    )

    model_config = ConfigDict(frozen=True)


class EventRange(BaseModel):
    """Half-open ``[start, end)`` offsets into the sequence that was split."""

    start: int
    end: int

    model_config = ConfigDict(frozen=True)


class ICSChunk(BaseModel):
    """One standalone calendar holding a slice of the original events."""

    file_name: str
    content: str
    event_count: int
    event_range: EventRange

    model_config = ConfigDict(frozen=True)


class SplitMetadata(BaseModel):
    """Metadata about a split operation."""

    split_at: datetime = Field(default_factory=datetime.now)
    chunk_size: int
    sort_by: SortOrder

    model_config = ConfigDict(frozen=True)

    @field_serializer("split_at")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime to ISO format."""
        return dt.isoformat()


class SplitResult(BaseModel):
    """Result of splitting raw ICS content."""

    chunks: list[ICSChunk] = Field(default_factory=list)
    total_events: int = 0
    metadata: SplitMetadata

    model_config = ConfigDict(frozen=True)

"""
Note-related Pydantic models for the Notebook API.

A Note is a piece of body text owned by a user, with timestamps and an
optional header image.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.constants import FIELD_INTERNAL_ID, FIELD_MONGO_ID


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the way MongoDB hands it back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class NoteImage(BaseModel):
    """Header image attached to a note."""

    image_size: int = Field(default=0, ge=0, description="Image size in bytes")
    url: Optional[str] = Field(None, description="Image URL")
    thumbnail_url: Optional[str] = Field(None, description="Thumbnail URL")


class NoteBase(BaseModel):
    """Base note model with common fields."""

    body: str = Field(default="", description="Note text")
    user_id: int = Field(default=0, description="ID of the owning user")
    header_image: Optional[NoteImage] = None


class NoteCreate(NoteBase):
    """Model for creating a new note."""

    id: Optional[str] = Field(
        None,
        min_length=1,
        description="Public identifier; generated when omitted",
    )


class NoteBodyUpdate(BaseModel):
    """Model for replacing the body of an existing note."""

    body: str = Field(description="New note text")


class Note(NoteBase):
    """Complete note model with all fields."""

    id: str = Field(default="", description="Public identifier of the note")
    internal_id: Optional[str] = Field(
        None,
        description="Database-assigned ObjectId, as a string",
    )
    created_on: datetime = Field(default_factory=utc_now)
    updated_on: datetime = Field(default_factory=utc_now)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to a database document; the database owns ``_id``."""
        return self.model_dump(exclude={FIELD_INTERNAL_ID})

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Note":
        """Build a note from a stored document."""
        data = dict(document)
        mongo_id = data.pop(FIELD_MONGO_ID, None)
        if mongo_id is not None:
            data[FIELD_INTERNAL_ID] = str(mongo_id)
        return cls.model_validate(data)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "internal_id": "5a8e2c1b9d3f4e0012345678",
                "body": "Test note 1",
                "user_id": 1,
                "created_on": "2023-01-01T00:00:00",
                "updated_on": "2023-01-01T00:00:00",
                "header_image": {
                    "image_size": 10240,
                    "url": "https://example.com/header.png",
                    "thumbnail_url": "https://example.com/header-thumb.png"
                }
            }
        }
    )

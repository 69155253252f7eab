"""
Data models for the TubeTrans application.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from tubetrans.config import config


VIDEO_ID_PATTERN = r"^[a-zA-Z0-9_-]{11}$"


class AppStatus(str, Enum):
    """Lifecycle of a transcript request as seen by the viewer."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ViewTab(str, Enum):
    """Tabs of the transcript viewer."""
    ENGLISH = "english"
    BANGLA = "bangla"
    BOTH = "both"


class VideoDetails(BaseModel):
    """Structured reply of the transcript request, also sent as its response schema."""
    title: str
    author: str
    transcript: str = Field(description="The full transcript text or a very detailed point-by-point summary.")


class TranscriptRecord(BaseModel):
    """Transcript of one video, optionally with its translation."""
    title: str
    author: str
    video_id: str = Field(pattern=VIDEO_ID_PATTERN)
    transcript: str
    translation: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def from_details(cls, details: VideoDetails, video_id: str) -> "TranscriptRecord":
        return cls(video_id=video_id, **details.model_dump())

    def with_translation(self, translation: str) -> "TranscriptRecord":
        """Return a copy of this record carrying the given translation."""
        return self.model_copy(update={"translation": translation})


class TranslationConfig(BaseModel):
    """Configuration for translation requests."""
    model: str = config.DEFAULT_MODEL
    temperature: float = config.TRANSLATION_TEMPERATURE
    target_language: str = config.TARGET_LANGUAGE

    @field_validator('temperature')
    def validate_temperature(cls, v):
        if not 0.0 <= v <= 2.0:
            raise ValueError('temperature must be between 0.0 and 2.0')
        return v


class ViewState(BaseModel):
    """Snapshot of what the viewer shows."""
    status: AppStatus = AppStatus.IDLE
    record: Optional[TranscriptRecord] = None
    error_message: Optional[str] = None
    is_translating: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_consistency(self):
        if (self.record is not None) != (self.status == AppStatus.SUCCESS):
            raise ValueError("record must be present exactly when status is success")
        if (self.error_message is not None) != (self.status == AppStatus.ERROR):
            raise ValueError("error_message must be present exactly when status is error")
        if self.is_translating and self.status != AppStatus.SUCCESS:
            raise ValueError("is_translating requires status success")
        return self


class Notification(BaseModel):
    """Transient, non-blocking message for the user."""
    level: str = "error"
    message: str

from dataclasses import dataclass, field

WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

LANGUAGES = {
    "english": "English",
    "hindi": "हिंदी (Hindi)",
    "kannada": "ಕನ್ನಡ (Kannada)",
}


@dataclass
class Batch:
    batch_name: str
    time: str  # "HH:MM", viewer-local
    days: list[str] = field(default_factory=list)


@dataclass
class Course:
    id: int
    title: str
    description: str
    content: str
    video_id: str
    duration: int  # minutes
    languages: list[str]
    batches: list[Batch]
    status: str = "active"  # active | inactive
    view_stats: dict[str, int] = field(default_factory=dict)
    created_at: str = ""


@dataclass
class CourseDraft:
    """Everything an admin submits for a course; the store assigns the id."""

    title: str
    description: str
    content: str
    video_id: str
    duration: int
    languages: list[str]
    batches: list[Batch]

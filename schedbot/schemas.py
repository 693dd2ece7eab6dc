import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_PATTERN = r"\d{2}-\d{2}-\d{4}"
TIME_PATTERN = r"\d{2}:\d{2}"


class ScheduleEntry(BaseModel):
    """One scheduled activity as stored in the JSON file."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    activity: str = Field(min_length=1)
    date: str
    time: str
    created: str = Field(frozen=True)

    @field_validator("activity")
    def validate_activity(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("empty activity")
        return v

    @field_validator("date")
    def validate_date(cls, v):
        if not re.fullmatch(DATE_PATTERN, v):
            raise ValueError("invalid date")
        return v

    @field_validator("time")
    def validate_time(cls, v):
        if not re.fullmatch(TIME_PATTERN, v):
            raise ValueError("invalid time")
        return v


class StoreSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reminder_enabled: bool = Field(default=True, alias="reminderEnabled")
    default_reminder_minutes: int = Field(default=30, alias="defaultReminderMinutes", ge=1)


class StoreState(BaseModel):
    schedules: List[ScheduleEntry] = Field(default_factory=list)
    settings: StoreSettings = Field(default_factory=StoreSettings)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

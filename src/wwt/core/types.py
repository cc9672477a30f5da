"""Core Pydantic models for wwt."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A remembered command and what it does."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(min_length=1)
    description: str = ""


class Match(BaseModel):
    """A ranked record with its relevance score."""

    record: Record
    score: float = Field(gt=0.0, le=1.0)

    @property
    def command(self) -> str:
        return self.record.command

"""Link-related models."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Provider(str, Enum):
    """Supported Git hosting providers."""

    GITHUB = "github"
    BITBUCKET = "bitbucket"


class LineRange(BaseModel):
    """An inclusive, 1-based range of lines."""

    start: int = Field(ge=1)
    end: int = Field(ge=1)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_order(self) -> "LineRange":
        if self.end < self.start:
            raise ValueError(f"end line {self.end} is before start line {self.start}")
        return self

    @classmethod
    def single(cls, line: int) -> "LineRange":
        return cls(start=line, end=line)


class LinkContext(BaseModel):
    """Editor state needed to build a link.

    Carries the file being viewed and, when a region is active, the lines
    it covers. ``remote_name`` falls back to the configured default.
    """

    current_file_path: str
    selection: LineRange | None = None
    remote_name: str | None = None

    class Config:
        frozen = True

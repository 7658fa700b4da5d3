"""Length of media expressed as hours, minutes and seconds."""

from pydantic import BaseModel, Field, computed_field


class Time(BaseModel):
    """Total length in seconds with a human readable form."""

    length: int = Field(default=0, ge=0, description="Length in seconds")

    @computed_field
    @property
    def formatted(self) -> str:
        """Length formatted as H:MM:SS."""
        hours, remainder = divmod(self.length, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    def __str__(self) -> str:
        return self.formatted

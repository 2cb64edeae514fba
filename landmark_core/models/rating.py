"""Rating summary model"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RatingSummary(BaseModel):
    """Mean and count of the ratings for one landmark"""
    model_config = ConfigDict(frozen=True)

    average: Optional[float] = None  # None iff count == 0
    count: int = Field(default=0, ge=0)

    def display_text(self) -> Optional[str]:
        """Text for the detail sheet, e.g. "4.0 / 5 (3 reviews)"."""
        if self.count == 0 or self.average is None:
            return None
        noun = "review" if self.count == 1 else "reviews"
        return f"{self.average:.1f} / 5 ({self.count} {noun})"

from datetime import datetime

from pydantic import BaseModel


class CountdownResponse(BaseModel):
    """Countdown to the next Christmas plus the house's letter gate."""

    timezone: str
    days: int
    hours: int
    minutes: int
    seconds: int
    has_passed: bool
    target: datetime
    target_year: int
    is_christmas_day: bool
    letters_unlocked: bool
    reveal_at: datetime

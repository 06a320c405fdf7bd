from typing import Optional

from pydantic import BaseModel, Field


class CurrentUser(BaseModel):
    """Identity of the caller, as asserted by the identity provider."""

    id: str = Field(..., description="Identity provider subject")
    email: Optional[str] = None

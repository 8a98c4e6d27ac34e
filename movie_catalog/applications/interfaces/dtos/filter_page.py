from pydantic import BaseModel, Field


class FilterPage(BaseModel):
    """Offset pagination for account listings"""

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, gt=0, le=100)

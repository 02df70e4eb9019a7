from pydantic import BaseModel, Field
from typing import Any, Optional

class PageData(BaseModel):
    news: Optional[Any] = Field(None, description="Parsed news feed, absent if fetch or parse failed")
    phrases: Optional[Any] = Field(None, description="Parsed phrase feed, absent if fetch or parse failed")

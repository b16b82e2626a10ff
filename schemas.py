"""Allow-listed field sets accepted by the models."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class PostFields(BaseModel):
    """Fields of a Post that may be filled in bulk"""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace from the title, the body is kept as given"""
        return value.strip() if value is not None else value

    def merged_fields(self) -> dict:
        """Fields that were supplied with a value"""
        return self.model_dump(exclude_unset=True, exclude_none=True)

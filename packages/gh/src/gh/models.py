"""GitHub API data models."""

from pydantic import BaseModel, Field, field_validator


class ContentsPutRequest(BaseModel):
    """Body of a Contents API create/update call."""

    message: str
    content: str  # Base64 encoded file bytes
    sha: str | None = None  # Blob SHA, required when overwriting
    branch: str | None = None
    path: str = Field(default="", exclude=True)  # URL only, never in the body

    @field_validator("sha", "branch")
    @classmethod
    def empty_as_none(cls, value: str | None) -> str | None:
        return value or None

    def to_json(self) -> str:
        """Serialize the request body, omitting unset optional fields."""
        return self.model_dump_json(exclude_none=True)

"""blog-tool data models."""

from pydantic import BaseModel, ConfigDict, Field


class Configuration(BaseModel):
    """Per-user GitHub identity and defaults, persisted as JSON."""

    model_config = ConfigDict(populate_by_name=True)

    repository: str = Field(default="", alias="repo")
    access_token: str = Field(default="", alias="token")
    username: str = ""
    default_branch: str = ""
    default_path: str = ""

    def to_json(self) -> str:
        """Indented JSON using the persisted key names."""
        return self.model_dump_json(by_alias=True, indent=4)


class PushOptions(BaseModel):
    """Command line overrides for a single push; empty means not given."""

    repository: str = ""
    username: str = ""
    token: str = ""
    branch: str = ""
    path: str = ""
    sha: str = ""
    message: str = ""

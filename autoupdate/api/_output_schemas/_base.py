"""Fields every command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common output fields; a command reports problems here rather than raising."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty when the command succeeded")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems worth showing the user")

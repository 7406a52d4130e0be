"""Common fields of every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Fields shared by all ``keys`` command outputs.

    Undeclared fields are rejected so the YAML/JSON printed by the CLI is
    exactly what the schema documents.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal errors; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal findings such as missing keys")

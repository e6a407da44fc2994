from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from .errors import InvalidOptionsError


class DatabaseOptions(BaseModel):
    """
    Construction options for a Database:
      { "directory": "./data", "name": "users", "raw": false, "filename": null }
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    directory: StrictStr | Path
    name: str = Field(strict=True, min_length=1)
    raw: bool = False
    filename: StrictStr | None = None

    @field_validator("directory", mode="before")
    @classmethod
    def directory_not_blank(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            raise ValueError("The directory path is required")
        return value

    @classmethod
    def parse(cls, **options: Any) -> "DatabaseOptions":
        try:
            return cls.model_validate(options)
        except ValidationError as e:
            raise InvalidOptionsError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "options"
        problems.append(f"{field}: {item.get('msg', 'invalid')}")
    return "Invalid database options (" + "; ".join(problems) + ")"

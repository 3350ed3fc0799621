"""Validated configuration model."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator


class CmdtypeConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    builtin_type_bin: str = ""

    @field_validator("builtin_type_bin", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CmdtypeConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

SortKey = Literal["title", "company", "deadline"]


class AppConfig(BaseModel):
    data_dir: Path = Path("database")
    log_level: str = "INFO"
    default_sort: SortKey = "title"

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)

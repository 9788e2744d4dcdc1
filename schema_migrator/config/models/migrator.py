"""Migrator configuration models.

Controls how migrated values are serialized and how much the engine logs.
"""

from typing import Literal

from pydantic import BaseModel, Field


class MigratorConfig(BaseModel):
    """Engine behavior shared by every migrator built from settings."""

    encode_mode: Literal["python", "json"] = Field(
        default="python",
        description="pydantic dump mode used when encoding the target version",
    )
    by_alias: bool = Field(
        default=False, description="Serialize fields by alias when encoding"
    )
    log_steps: bool = Field(
        default=False, description="Emit a debug event for every applied hop"
    )

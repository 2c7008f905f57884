"""Parsed activity records forwarded to listeners."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActivityInfo(BaseModel):
    """An activity exchanged between two characters.

    ``source_character`` performed ``activity_name`` on
    ``target_character``.  Character ids are opaque; only equality is used.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    activity_name: str = Field(alias="ActivityName")
    source_character: Any = Field(alias="SourceCharacter")
    target_character: Any = Field(alias="TargetCharacter")
    activity_group: str | None = Field(default=None, alias="FocusGroupName")
    asset_name: str | None = Field(default=None, alias="AssetName")

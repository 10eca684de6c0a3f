"""Pydantic argument models for the built-in tools.

These models both validate incoming arguments and produce the JSON schemas
advertised through ``list_tools``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExecuteActionArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action_json: str = Field(
        ...,
        min_length=1,
        description='JSON object describing the action. Example: `{"action":"tap", "coordinates":[x,y]}`',
    )


class RunAiScriptArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str = Field(
        ...,
        min_length=1,
        description="Python code to execute.",
    )


class ExecuteBatchArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    actions_json: str = Field(
        ...,
        min_length=1,
        description=(
            "JSON array of actions. Example: "
            '`[{"action":"tap", "coordinates":[100,200]}, {"action":"type", "text":"hello"}]`'
        ),
    )


class InspectUiArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    device: str | None = Field(
        None,
        description="Optional device ID",
    )


class AdbLogcatArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

    device: str | None = Field(
        None,
        description="Optional device ID",
    )
    lines: int = Field(
        50,
        ge=1,
        description="Number of lines to retrieve",
    )
    filter: str | None = Field(
        None,
        description="Optional logcat filter expression",
    )


class NoArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")

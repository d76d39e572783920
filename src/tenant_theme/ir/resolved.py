"""
Resolution output types.

DerivedValues are recomputed on every resolution and never stored.
ResolvedTheme is the only artifact handed back to callers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DerivedValues(BaseModel):
    """Colors and shadows computed from the editable palette."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    primary_tint: str
    primary_shade: str
    accent_soft: str
    surface_raised: str
    border_subtle: str
    glow_color: str
    glow_shadow: str

    success_soft: str
    success_text: str
    success_border: str
    warning_soft: str
    warning_text: str
    warning_border: str
    error_soft: str
    error_text: str
    error_border: str
    info_soft: str
    info_text: str
    info_border: str

    def to_context(self) -> dict[str, str]:
        """camelCase mapping used as the ``derived`` branch of the context."""
        return self.model_dump(by_alias=True)


class ResolvedTheme(BaseModel):
    """Derived values plus the sanitized CSS variable map."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    derived: DerivedValues
    css_vars: dict[str, str] = Field(default_factory=dict, alias="cssVars")

    def to_dict(self) -> dict[str, Any]:
        return {"derived": self.derived.to_context(), "cssVars": dict(self.css_vars)}

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fieldrules.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fieldrules.domain.messages import CatalogMessageProvider, MessageKey, check_template


class MessagesConfig(BaseModel):
    """[messages] section.

    ``overrides`` replaces default message templates by key name, e.g.
    ``InvalidRange = "Must be within {0} and {1}."``.
    """

    model_config = {"frozen": True}

    overrides: dict[str, str] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def _valid_overrides(cls, value: dict[str, str]) -> dict[str, str]:
        known = {str(key) for key in MessageKey}
        unknown = sorted(set(value) - known)
        if unknown:
            msg = f"Unknown message keys: {unknown}"
            raise ValueError(msg)
        for key, template in value.items():
            check_template(MessageKey(key), template)
        return value

    def provider(self) -> CatalogMessageProvider:
        """Message provider with these overrides applied."""
        return CatalogMessageProvider(self.overrides)


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    schema_path: str | None = None
    fail_on_invalid: bool = True


class FieldrulesConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)

"""Message keys and providers for user-facing and developer-facing text.

Rules never embed display text directly. They ask a :class:`MessageProvider`
for the string behind a :class:`MessageKey`, passing positional arguments
for the ``{0}``/``{1}`` placeholders. The built-in English table is the
fallback for any key a provider does not override.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from enum import StrEnum
from typing import Protocol, runtime_checkable


class MessageKey(StrEnum):
    """Identifiers for every message a rule can produce."""

    INVALID_LENGTH = "InvalidLength"
    INVALID_RANGE = "InvalidRange"
    INVALID_TYPE = "InvalidType"
    PROPERTY_NOT_FOUND = "PropertyNotFound"
    RANGE_IS_NOT_DOUBLE = "RangeIsNotDouble"
    LENGTH_IS_NOT_INTEGER = "LengthIsNotInteger"
    TARGET_PROPERTY_IS_NOT_DOUBLE = "TargetPropertyIsNotDouble"
    TARGET_PROPERTY_IS_NOT_STRING = "TargetPropertyIsNotString"


DEFAULT_MESSAGES: dict[MessageKey, str] = {
    MessageKey.INVALID_LENGTH: "Allowed length between {0} to {1}.",
    MessageKey.INVALID_RANGE: "Allowed range between {0} to {1}.",
    MessageKey.INVALID_TYPE: "Invalid target property type.",
    MessageKey.PROPERTY_NOT_FOUND: "Property {0} not found.",
    MessageKey.RANGE_IS_NOT_DOUBLE: "Range value is not double.",
    MessageKey.LENGTH_IS_NOT_INTEGER: "Length value is not integer.",
    MessageKey.TARGET_PROPERTY_IS_NOT_DOUBLE: "Target property is not double.",
    MessageKey.TARGET_PROPERTY_IS_NOT_STRING: "Target property is not string.",
}

# Positional arguments each key is formatted with.
MESSAGE_ARITY: dict[MessageKey, int] = {
    **dict.fromkeys(MessageKey, 0),
    MessageKey.INVALID_LENGTH: 2,
    MessageKey.INVALID_RANGE: 2,
    MessageKey.PROPERTY_NOT_FOUND: 1,
}


def check_template(key: MessageKey, template: str) -> None:
    """Reject a template that cannot be formatted with *key*'s arguments.

    Only explicit positional fields below the key's arity are allowed
    (``{0}`` and ``{1}`` for ``InvalidRange``), with no nested fields
    inside a format spec.
    """
    arity = MESSAGE_ARITY[key]
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        msg = f"Malformed template for {key}: {exc}"
        raise ValueError(msg) from None
    for _literal, field_name, format_spec, _conversion in parsed:
        if field_name is None:
            continue
        nested = "{" in (format_spec or "")
        if not field_name.isdigit() or int(field_name) >= arity or nested:
            msg = (
                f"Template for {key} has placeholder {{{field_name}}}; "
                f"it is formatted with {arity} positional argument(s)"
            )
            raise ValueError(msg)


@runtime_checkable
class MessageProvider(Protocol):
    """Maps a message key plus positional arguments to display text."""

    def format(self, key: MessageKey, *args: object) -> str: ...


class DefaultMessageProvider:
    """Formats messages from the built-in English table."""

    def template(self, key: MessageKey) -> str:
        return DEFAULT_MESSAGES[key]

    def format(self, key: MessageKey, *args: object) -> str:
        return self.template(key).format(*args)


class CatalogMessageProvider(DefaultMessageProvider):
    """Overlays a catalog of templates on the built-in table.

    Catalog keys may be :class:`MessageKey` members or their string values
    (``"InvalidRange"``), which is how TOML and env configuration spell them.
    Unknown keys are rejected so a typo in a locale table fails loudly, and
    each template must be formattable with its key's arguments.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        catalog: dict[MessageKey, str] = {}
        for raw_key, template in (overrides or {}).items():
            try:
                key = MessageKey(raw_key)
            except ValueError:
                msg = f"Unknown message key: {raw_key!r}"
                raise ValueError(msg) from None
            check_template(key, template)
            catalog[key] = template
        self._catalog = catalog

    def template(self, key: MessageKey) -> str:
        return self._catalog.get(key, DEFAULT_MESSAGES[key])

    def table(self) -> dict[str, str]:
        """Return every key with its effective template."""
        return {str(key): self.template(key) for key in MessageKey}


DEFAULT_PROVIDER = DefaultMessageProvider()

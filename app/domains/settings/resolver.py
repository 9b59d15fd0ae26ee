"""Settings resolution for the completion call.

Precedence is evaluated independently for every field:
request-supplied value, then the stored per-conversation value, then the
configured default. A key present in the request always wins over the
stored row, even with a ``None`` value, which selects the default; only an
absent key falls through. Stored ``None`` columns fall through as well.
``0``, ``0.0`` and ``""`` are honoured as given. The model is the exception:
an empty or missing model is never usable at any level.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EffectiveSettings:
    """Settings actually used for one completion call."""

    model: str
    system_prompt: str | None
    temperature: float | None


def _pick(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _pick_model(*candidates: str | None) -> str | None:
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def resolve_settings(
    request_fields: Mapping[str, Any] | None,
    stored: Any | None,
    defaults: EffectiveSettings,
) -> EffectiveSettings:
    """Merge request, stored and default settings field by field.

    Args:
        request_fields: Fields supplied with the request, keyed by
            ``model``/``system_prompt``/``temperature``. Absent keys are unset.
        stored: The persisted settings row (any object with the same
            attributes) or ``None``.
        defaults: Hard-coded fallbacks.

    Returns:
        EffectiveSettings with every field resolved.
    """
    requested = request_fields or {}

    def stored_value(name: str) -> Any:
        return getattr(stored, name, None) if stored is not None else None

    def resolve(name: str) -> Any:
        default = getattr(defaults, name)
        if name in requested:
            return _pick(requested[name], default)
        return _pick(stored_value(name), default)

    return EffectiveSettings(
        model=_pick_model(requested.get("model"), stored_value("model"), defaults.model),
        system_prompt=resolve("system_prompt"),
        temperature=resolve("temperature"),
    )


def creation_settings(
    request_fields: Mapping[str, Any] | None, defaults: EffectiveSettings
) -> EffectiveSettings:
    """Values written to the settings row when a conversation is created."""
    return resolve_settings(request_fields, None, defaults)

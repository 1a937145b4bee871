"""Repair category toggles and the named option presets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UnknownPresetError(KeyError):
    """Raised when an option preset name is not registered."""


class HealerOptions(BaseModel):
    """Which repair categories are enabled and how many edits to attempt."""

    model_config = ConfigDict(frozen=True)

    fix_quotes: bool = True
    fix_trailing_commas: bool = True
    fix_unquoted_keys: bool = True
    strip_comments: bool = True
    fix_single_quotes: bool = True
    max_repair_attempts: int = Field(default=10, ge=0)

    @classmethod
    def default(cls) -> HealerOptions:
        return cls()

    @classmethod
    def conservative(cls) -> HealerOptions:
        """Only quote and trailing-comma repairs."""
        return cls(
            fix_quotes=True,
            fix_trailing_commas=True,
            fix_unquoted_keys=False,
            strip_comments=False,
            fix_single_quotes=False,
            max_repair_attempts=5,
        )

    @classmethod
    def aggressive(cls) -> HealerOptions:
        return cls(max_repair_attempts=15)

    @classmethod
    def quick_fix(cls) -> HealerOptions:
        return cls(max_repair_attempts=5)

    @classmethod
    def preset(cls, name: str) -> HealerOptions:
        """Look up a preset by name (``default``, ``conservative``, ...)."""
        factory = _PRESETS.get(name.lower())
        if factory is None:
            available = ", ".join(sorted(_PRESETS))
            raise UnknownPresetError(
                f"Unknown option preset '{name}'. Available: {available}"
            )
        return factory()

    @staticmethod
    def preset_names() -> list[str]:
        return list(_PRESETS)


_PRESETS = {
    "default": HealerOptions.default,
    "conservative": HealerOptions.conservative,
    "aggressive": HealerOptions.aggressive,
    "quick_fix": HealerOptions.quick_fix,
}

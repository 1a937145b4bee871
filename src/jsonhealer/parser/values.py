"""Immutable value tree produced by the scanner. Internal to the library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JsonNull:
    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JsonBool:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNumber:
    """A number, already normalized to ``int`` when it is integral."""

    value: int | float

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class JsonString:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonObject:
    """Object members in source order; keys are unique."""

    members: tuple[tuple[str, JsonValue], ...] = ()

    def keys(self) -> list[str]:
        return [key for key, _ in self.members]

    def get(self, key: str) -> JsonValue | None:
        for name, value in self.members:
            if name == key:
                return value
        return None

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members}


JsonValue = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

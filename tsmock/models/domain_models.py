from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class PrimitiveType(Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["PrimitiveType"]:
        """Map a TypeScript keyword to a primitive type, or None when it has no counterpart."""
        for primitive in cls:
            if primitive.value == keyword:
                return primitive
        return None


@dataclass(frozen=True)
class Property:
    name: str
    type: PrimitiveType


@dataclass(frozen=True)
class Entity:
    route: str
    properties: Tuple[Property, ...] = field(default_factory=tuple)
    name: Optional[str] = None
    file_path: Optional[str] = None


@dataclass(frozen=True)
class SourceUnit:
    path: Path
    text: str

    @property
    def suffix(self) -> str:
        return self.path.suffix.lower()

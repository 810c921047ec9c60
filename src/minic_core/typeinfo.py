"""Static type tags used by the semantic pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TypeKind(Enum):
    Int = auto()
    Float = auto()
    String = auto()
    Bool = auto()
    Void = auto()
    Class = auto()
    Unknown = auto()


_KIND_NAMES: dict[TypeKind, str] = {
    TypeKind.Int: "int",
    TypeKind.Float: "float",
    TypeKind.String: "string",
    TypeKind.Bool: "bool",
    TypeKind.Void: "void",
    TypeKind.Unknown: "unknown",
}

# Simulated storage size per type, informational only.
_KIND_SIZES: dict[TypeKind, int] = {
    TypeKind.Int: 4,
    TypeKind.Float: 8,
    TypeKind.Bool: 1,
    TypeKind.String: 256,
}


@dataclass(frozen=True, slots=True, eq=False)
class TypeInfo:
    kind: TypeKind
    class_name: str = ""

    @classmethod
    def of_class(cls, name: str) -> TypeInfo:
        return cls(TypeKind.Class, name)

    @property
    def is_class(self) -> bool:
        return self.kind is TypeKind.Class

    @property
    def is_unknown(self) -> bool:
        return self.kind is TypeKind.Unknown

    @property
    def size(self) -> int:
        return _KIND_SIZES.get(self.kind, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeInfo):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is TypeKind.Class:
            return self.class_name == other.class_name
        return True

    def __hash__(self) -> int:
        if self.kind is TypeKind.Class:
            return hash((self.kind, self.class_name))
        return hash(self.kind)

    def __str__(self) -> str:
        if self.kind is TypeKind.Class:
            return self.class_name
        return _KIND_NAMES[self.kind]


INT = TypeInfo(TypeKind.Int)
FLOAT = TypeInfo(TypeKind.Float)
STRING = TypeInfo(TypeKind.String)
BOOL = TypeInfo(TypeKind.Bool)
VOID = TypeInfo(TypeKind.Void)
UNKNOWN = TypeInfo(TypeKind.Unknown)

from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        # Exact class check: an interned symbol never equals a gensym of the same name
        return type(other) is Symbol and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class UninternedSymbol(Symbol):
    """A symbol minted by gensym: equal only to itself, whatever its name."""

    __slots__ = ("serial",)

    def __init__(self, name: str, serial: int):
        super().__init__(name)
        self.serial = serial

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is UninternedSymbol
            and self.id == other.id
            and self.serial == other.serial
        )

    def __hash__(self) -> int:
        return hash((self.id, self.serial))

    def __repr__(self):
        return f"UninternedSymbol({self.id!r}, {self.serial})"


class Keyword:
    """Self-evaluating symbol written with a leading colon, e.g. :red."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Keyword, self.name))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return f":{self.name}"

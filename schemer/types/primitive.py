from __future__ import annotations


class Primitive:
    """Reference to a built-in operation, tagged by its name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Primitive) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("primitive", self.name))

    def __repr__(self):
        return f"Primitive({self.name!r})"

    def __str__(self):
        return f"#<primitive {self.name}>"

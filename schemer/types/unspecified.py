from __future__ import annotations


class UnspecifiedType:
    """Result of forms evaluated purely for effect (display, require)."""

    def __repr__(self): return "#<unspecified>"

    def __eq__(self, other):
        return isinstance(other, UnspecifiedType)

    def __hash__(self):
        return hash(UnspecifiedType)


Unspecified = UnspecifiedType()

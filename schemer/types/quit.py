from __future__ import annotations


class QuitSignal:
    """Returned (never raised) by evaluate when a (quit) form ran.

    Every consumer of a subevaluation checks for it and hands it straight
    back, so it unwinds to the driver without being mistaken for a value.
    """

    def __repr__(self): return "#<quit>"

    def __bool__(self):
        return False


Quit = QuitSignal()

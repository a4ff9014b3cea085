"""Display labels for vertex ids."""

from typing import Tuple

from adjgraph.errors import OutOfRange

MAX_SYMBOLS = 26


class Labels:

    """A small, fixed table mapping vertex ids to one-symbol labels.

    This is a presentation helper, not a naming scheme: it holds at most
    MAX_SYMBOLS labels and raises OutOfRange for any id past the table.
    """

    def __init__(self, symbols: str):
        if len(symbols) > MAX_SYMBOLS:
            raise ValueError(
                f"at most {MAX_SYMBOLS} labels allowed, got {len(symbols)}"
            )
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"duplicate labels in {symbols!r}")
        self._table: Tuple[str, ...] = tuple(symbols)

    def __repr__(self) -> str:
        return f"Labels({''.join(self._table)!r})"

    def __len__(self) -> int:
        return len(self._table)

    def __call__(self, index: int) -> str:
        """Return the label for index."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRange(index, len(self._table), "label")
        if not 0 <= index < len(self._table):
            raise OutOfRange(index, len(self._table), "label")
        return self._table[index]


DEMO_LABELS = Labels("ABCDEFG")


def vertex_label(index: int) -> str:
    """Label a vertex of the demonstration graph (0 to 6 become A to G)."""
    return DEMO_LABELS(index)

"""Small UI state holders: the FAQ accordion and scroll-derived flags."""

DEFAULT_SCROLL_THRESHOLDS: dict[str, int] = {
    "navbar": 40,
    "floating_contact": 200,
}


class Accordion:
    """Tracks which single entry of a fixed list is expanded, if any."""

    def __init__(self, size: int, open_index: int | None = 0) -> None:
        self.size = size
        if open_index is not None:
            self._check(open_index)
        self.open_index = open_index

    def is_open(self, index: int) -> bool:
        return self.open_index == index

    def next_index(self, index: int) -> int | None:
        """Open index that toggling ``index`` would leave behind."""
        self._check(index)
        return None if self.open_index == index else index

    def toggle(self, index: int) -> int | None:
        self.open_index = self.next_index(index)
        return self.open_index

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"accordion index {index} out of range (0..{self.size - 1})")


class ScrollState:
    """
    Boolean flags derived from the page scroll offset.

    Each named threshold is independent: a flag is set while the offset
    is strictly greater than its threshold.
    """

    def __init__(self, thresholds: dict[str, int] | None = None) -> None:
        self.thresholds = dict(DEFAULT_SCROLL_THRESHOLDS if thresholds is None else thresholds)
        self.offset = 0
        self.flags: dict[str, bool] = dict.fromkeys(self.thresholds, False)

    def update(self, offset: float) -> dict[str, bool]:
        self.offset = offset
        self.flags = {name: offset > threshold for name, threshold in self.thresholds.items()}
        return self.flags

    def is_past(self, name: str) -> bool:
        return self.flags[name]

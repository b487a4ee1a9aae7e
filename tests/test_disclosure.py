"""Tests for the FAQ accordion and scroll-derived flags."""

import pytest

from apps.core.disclosure import DEFAULT_SCROLL_THRESHOLDS, Accordion, ScrollState


class TestAccordion:
    """Single-open disclosure list."""

    def test_first_entry_open_by_default(self) -> None:
        accordion = Accordion(4)
        assert accordion.open_index == 0
        assert accordion.is_open(0)

    def test_toggle_open_entry_closes_it(self) -> None:
        accordion = Accordion(4)
        assert accordion.toggle(0) is None
        assert not any(accordion.is_open(i) for i in range(4))

    def test_toggle_other_entry_replaces_open_one(self) -> None:
        accordion = Accordion(4)
        assert accordion.toggle(2) == 2
        assert accordion.is_open(2)
        assert not accordion.is_open(0)

    def test_toggle_from_closed(self) -> None:
        accordion = Accordion(4, open_index=None)
        assert accordion.toggle(3) == 3

    def test_next_index_does_not_mutate(self) -> None:
        accordion = Accordion(4, open_index=1)
        assert accordion.next_index(1) is None
        assert accordion.next_index(2) == 2
        assert accordion.open_index == 1

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range(self, index: int) -> None:
        accordion = Accordion(4)
        with pytest.raises(IndexError):
            accordion.toggle(index)
        assert accordion.open_index == 0

    def test_out_of_range_initial_index(self) -> None:
        with pytest.raises(IndexError):
            Accordion(2, open_index=5)


class TestScrollState:
    """Flags flip strictly past their own threshold."""

    def test_defaults(self) -> None:
        state = ScrollState()
        assert state.thresholds == DEFAULT_SCROLL_THRESHOLDS
        assert state.flags == {"navbar": False, "floating_contact": False}

    @pytest.mark.parametrize(("name", "threshold"), list(DEFAULT_SCROLL_THRESHOLDS.items()))
    def test_threshold_boundaries(self, name: str, threshold: int) -> None:
        state = ScrollState()
        state.update(threshold - 1)
        assert state.is_past(name) is False
        state.update(threshold)
        assert state.is_past(name) is False
        state.update(threshold + 1)
        assert state.is_past(name) is True

    def test_thresholds_are_independent(self) -> None:
        state = ScrollState()
        assert state.update(100) == {"navbar": True, "floating_contact": False}
        assert state.update(250) == {"navbar": True, "floating_contact": True}
        assert state.update(0) == {"navbar": False, "floating_contact": False}

    def test_custom_thresholds(self) -> None:
        state = ScrollState({"navbar": 10})
        state.update(11)
        assert state.flags == {"navbar": True}
        with pytest.raises(KeyError):
            state.is_past("floating_contact")

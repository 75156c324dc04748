"""
Grid State Tests
================

Incremental reveal, sort/scope resets, selection and row activation.
"""

import pytest

from app.domains.documents.grid import (
    DEFAULT_SORT, ELLIPSIS, GridState, RevealCursor, SelectionSet,
    classify_activation, page_numbers, total_pages
)
from app.domains.documents.query import Scope, SortDirection, SortField, SortSpec


def ids(documents):
    return [doc.id for doc in documents]


# =============================================================================
# Reveal cursor
# =============================================================================

class TestRevealCursor:
    """Load-more semantics"""

    def test_starts_at_page_size(self):
        assert RevealCursor().revealed == 20
        assert RevealCursor(page_size=5).revealed == 5

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            RevealCursor(page_size=0)

    @pytest.mark.parametrize("calls", range(0, 6))
    def test_k_calls_reveal_k_pages(self, calls):
        total = 75
        cursor = RevealCursor(page_size=20)
        for _ in range(calls):
            cursor.load_more(total)
        assert cursor.revealed == min(20 * (1 + calls), total)

    def test_load_more_past_end_is_noop(self):
        cursor = RevealCursor(page_size=20)
        cursor.load_more(30)
        assert cursor.revealed == 30
        cursor.load_more(30)
        cursor.load_more(30)
        assert cursor.revealed == 30
        assert cursor.has_more(30) is False

    def test_pending_request_blocks_second_request(self):
        """Overlapping visibility callbacks advance by one page only"""
        cursor = RevealCursor(page_size=10)
        first = cursor.request_load_more(100)
        second = cursor.request_load_more(100)

        assert first is not None
        assert second is None
        assert cursor.is_loading

        cursor.complete_load_more(first, 100)
        assert cursor.revealed == 20
        assert not cursor.is_loading

    def test_stale_ticket_is_ignored(self):
        cursor = RevealCursor(page_size=10)
        ticket = cursor.request_load_more(100)
        cursor.complete_load_more(ticket, 100)
        cursor.complete_load_more(ticket, 100)
        assert cursor.revealed == 20

    def test_load_more_while_pending_is_noop(self):
        cursor = RevealCursor(page_size=10)
        ticket = cursor.request_load_more(100)
        assert cursor.load_more(100) == 10
        assert cursor.complete_load_more(ticket, 100) == 20

    def test_reset_cancels_pending_load(self):
        cursor = RevealCursor(page_size=10)
        cursor.load_more(100)
        ticket = cursor.request_load_more(100)
        cursor.reset()

        assert cursor.revealed == 10
        assert cursor.complete_load_more(ticket, 100) == 10

    def test_no_request_when_fully_revealed(self):
        cursor = RevealCursor(page_size=10)
        assert cursor.request_load_more(5) is None


# =============================================================================
# Grid state
# =============================================================================

class TestGridState:
    """Caller-held knobs and their transitions"""

    @pytest.fixture
    def documents(self, make_document):
        return [
            make_document("A", "Zeta", matter_id="M1"),
            make_document("B", "alpha", matter_id="M1"),
            make_document("C", "Mid", matter_id="M2"),
        ]

    def test_default_sort_is_most_recent_first(self):
        assert GridState().sort == DEFAULT_SORT
        assert DEFAULT_SORT == SortSpec(SortField.LAST_ACTIVE_AT, SortDirection.DESC)

    def test_incremental_reveal_scenario(self, documents):
        state = GridState(
            scope=Scope(matter_id="M1"),
            sort=SortSpec(SortField.NAME, SortDirection.ASC),
            page_size=1,
        )

        result = state.query(documents)
        assert ids(result.items) == ["B"]
        assert result.has_more is True

        result = state.load_more(documents)
        assert ids(result.items) == ["B", "A"]
        assert result.has_more is False

        result = state.load_more(documents)
        assert ids(result.items) == ["B", "A"]
        assert state.revealed == 2

    def test_new_sort_field_resets_direction_and_revealed(self, make_document):
        documents = [make_document(str(i)) for i in range(50)]
        state = GridState(sort=SortSpec(SortField.NAME, SortDirection.DESC), page_size=20)
        state.load_more(documents)
        assert state.revealed == 40

        sort = state.select_sort(SortField.TOTAL_VERSIONS)

        assert sort == SortSpec(SortField.TOTAL_VERSIONS, SortDirection.ASC)
        assert state.revealed == 20

    def test_same_sort_field_flips_and_resets_revealed(self, make_document):
        documents = [make_document(str(i)) for i in range(50)]
        state = GridState(sort=SortSpec(SortField.NAME, SortDirection.ASC), page_size=20)
        state.load_more(documents)

        sort = state.select_sort(SortField.NAME)

        assert sort.direction == SortDirection.DESC
        assert state.revealed == 20

    def test_scope_change_resets_revealed_and_selection(self, make_document):
        documents = [make_document(str(i)) for i in range(50)]
        state = GridState(page_size=20)
        state.load_more(documents)
        state.selection.toggle("1")

        state.change_scope(Scope(cabinet_id="CAB1"))

        assert state.revealed == 20
        assert len(state.selection) == 0
        assert state.scope == Scope(cabinet_id="CAB1")


# =============================================================================
# Selection
# =============================================================================

class TestSelectionSet:

    def test_select_all_only_covers_revealed_window(self, make_document):
        documents = [
            make_document("A", "Zeta", matter_id="M1"),
            make_document("B", "alpha", matter_id="M1"),
        ]
        state = GridState(scope=Scope(matter_id="M1"), sort=SortSpec(SortField.NAME), page_size=1)
        window = state.query(documents).items

        state.selection.select_all(window)

        assert state.selection.ids == {"B"}
        assert "A" not in state.selection
        assert state.selection.is_all_selected(window)

    def test_toggle(self):
        selection = SelectionSet()
        assert selection.toggle("x") is True
        assert "x" in selection
        assert selection.toggle("x") is False
        assert "x" not in selection

    def test_clear(self):
        selection = SelectionSet(["a", "b"])
        selection.clear()
        assert len(selection) == 0

    def test_empty_window_is_never_all_selected(self):
        assert SelectionSet(["a"]).is_all_selected([]) is False


# =============================================================================
# Row activation
# =============================================================================

class TestRowActivation:

    def test_folder_is_navigation_target(self, make_document):
        activation = classify_activation(make_document("F1", type="folder"))
        assert activation.navigate is True
        assert activation.folder_id == "F1"

    def test_file_does_not_navigate(self, make_document):
        activation = classify_activation(make_document("doc-1"))
        assert activation.navigate is False
        assert activation.folder_id is None


# =============================================================================
# Numbered pagination
# =============================================================================

class TestPageNumbers:

    def test_total_pages(self):
        assert total_pages(0, 10) == 0
        assert total_pages(10, 10) == 1
        assert total_pages(11, 10) == 2

    def test_few_pages_have_no_ellipsis(self):
        assert page_numbers(1, 3) == [1, 2, 3]
        assert page_numbers(1, 1) == [1]

    def test_first_page_of_many(self):
        assert page_numbers(1, 10) == [1, 2, 3, ELLIPSIS, 10]

    def test_middle_page(self):
        assert page_numbers(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

    def test_last_page(self):
        assert page_numbers(10, 10) == [1, ELLIPSIS, 8, 9, 10]

    def test_no_pages(self):
        assert page_numbers(1, 0) == []

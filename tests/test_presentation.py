"""
Presentation Helper Tests
=========================

Column profiles, column resizing, navigation paths, folder trees and search.
"""

import pytest

from app.domains.documents.columns import (
    MIN_COLUMN_WIDTH, ColumnWidths, Viewport, column_profile, format_activity
)
from app.domains.documents.entities import Activity, ActivityAction, Cabinet, Client, Matter
from app.domains.documents.navigation import (
    build_breadcrumb, clients_for_cabinet, folder_hierarchy, folder_tree,
    matters_for_client, recent_clients, recent_matters
)
from app.domains.documents.query import Scope, SortField
from app.domains.documents.search import recent_items, search_documents


def ids(items):
    return [item.id for item in items]


# =============================================================================
# Columns
# =============================================================================

class TestColumnProfile:

    def test_viewport_from_width(self):
        assert Viewport.from_width(639) == Viewport.MOBILE
        assert Viewport.from_width(640) == Viewport.DESKTOP

    def test_mobile_shows_name_only(self):
        columns = column_profile(Viewport.MOBILE, Scope(matter_id="M1"))
        assert [c.field for c in columns] == [SortField.NAME]

    def test_matter_scope_columns(self):
        columns = column_profile(Viewport.DESKTOP, Scope(matter_id="M1"))
        assert [c.field for c in columns] == [
            SortField.NAME, SortField.TOTAL_VERSIONS, SortField.ADDED_BY,
            SortField.LAST_MODIFIED_BY, SortField.LAST_ACTIVE_AT,
        ]
        assert columns[-1].label == "Date Modified"

    def test_client_scope_columns(self):
        columns = column_profile(Viewport.DESKTOP, Scope(client_id="C1"))
        assert SortField.MATTER in [c.field for c in columns]
        assert SortField.CLIENT not in [c.field for c in columns]

    def test_default_columns(self):
        columns = column_profile(Viewport.DESKTOP, None)
        assert [c.field for c in columns] == [
            SortField.NAME, SortField.TOTAL_VERSIONS, SortField.CLIENT,
            SortField.MATTER, SortField.LAST_ACTIVE_AT,
        ]

    def test_profile_uses_custom_widths(self):
        widths = ColumnWidths()
        widths.resize(SortField.NAME, 50)
        columns = column_profile(Viewport.DESKTOP, None, widths)
        assert columns[0].width == 250


class TestColumnWidths:

    def test_resize_is_clamped_to_minimum(self):
        widths = ColumnWidths()
        assert widths.resize(SortField.TOTAL_VERSIONS, -500) == MIN_COLUMN_WIDTH
        assert widths.get(SortField.TOTAL_VERSIONS) == MIN_COLUMN_WIDTH

    def test_resizes_accumulate(self):
        widths = ColumnWidths()
        widths.resize(SortField.CLIENT, 10)
        widths.resize(SortField.CLIENT, 15)
        assert widths.as_dict() == {"client": 225}


class TestFormatActivity:

    def test_action_and_date(self, make_document):
        doc = make_document("A", your_activity=Activity(ActivityAction.EDITED, "2024-03-04T10:00:00Z"))
        assert format_activity(doc) == "edited Mar 4"

    def test_missing_activity(self, make_document):
        assert format_activity(make_document("A", your_activity=None)) == "-"

    def test_bad_date(self, make_document):
        doc = make_document("A", your_activity=Activity(ActivityAction.VIEWED, "soon"))
        assert format_activity(doc) == "-"


# =============================================================================
# Navigation
# =============================================================================

class TestNavigation:

    @pytest.fixture
    def folders(self, make_document):
        return [
            make_document("root", "Templates", type="folder"),
            make_document("mid", "Contracts", type="folder", parent_id="root"),
            make_document("leaf", "NDAs", type="folder", parent_id="mid"),
            make_document("matter-folder", "Due Diligence", type="folder", matter_id="M1", cabinet_id="CAB1"),
            make_document("other", "Patents", type="folder", cabinet_id="CAB2"),
            make_document("file", "nda.pdf", parent_id="leaf"),
        ]

    def test_hierarchy_from_root(self, folders):
        leaf = folders[2]
        assert ids(folder_hierarchy(leaf, folders)) == ["root", "mid", "leaf"]

    def test_hierarchy_stops_at_missing_parent(self, make_document):
        orphan = make_document("orphan", type="folder", parent_id="gone")
        assert ids(folder_hierarchy(orphan, [orphan])) == ["orphan"]

    def test_hierarchy_stops_on_cycle(self, make_document):
        a = make_document("a", type="folder", parent_id="b")
        b = make_document("b", type="folder", parent_id="a")
        assert ids(folder_hierarchy(a, [a, b])) == ["b", "a"]

    def test_breadcrumb(self, folders):
        crumbs = build_breadcrumb(
            folders,
            cabinet=Cabinet(id="CAB1", name="Corporate Law"),
            client=Client(id="C1", name="Acme", cabinet_id="CAB1"),
            folder=folders[1],
        )
        assert [c.name for c in crumbs] == ["Home", "Corporate Law", "Acme", "Templates", "Contracts"]
        assert [c.level for c in crumbs][-2:] == ["folder", "folder"]

    def test_folder_tree_for_cabinet(self, folders):
        tree = folder_tree(folders, cabinet_id="CAB1")
        assert ids(tree[None]) == ["root", "matter-folder"]
        assert ids(tree["root"]) == ["mid"]
        assert ids(tree["mid"]) == ["leaf"]

    def test_folder_tree_matter_wins(self, folders):
        tree = folder_tree(folders, cabinet_id="CAB1", matter_id="M1")
        assert list(tree) == [None]
        assert ids(tree[None]) == ["matter-folder"]

    def test_folder_tree_without_scope_is_empty(self, folders):
        assert folder_tree(folders) == {}

    def test_clients_and_matters(self, clients, matters):
        assert ids(clients_for_cabinet(clients, "CAB1")) == ["C1", "C2"]
        assert ids(clients_for_cabinet(clients, None)) == ["C1", "C2", "C3"]
        assert ids(matters_for_client(matters, "C1")) == ["M1", "M2"]

    def test_recent_limits(self):
        many_clients = [Client(id=str(i), name=f"c{i}", cabinet_id="X") for i in range(8)]
        many_matters = [Matter(id=str(i), name=f"m{i}", client_id=str(i)) for i in range(8)]
        assert len(recent_clients(many_clients, "X")) == 5
        assert len(recent_matters(many_matters, many_clients, "X")) == 5


# =============================================================================
# Search and recent items
# =============================================================================

class TestSearch:

    @pytest.fixture
    def documents(self, make_document):
        return [
            make_document("A", "Board Minutes.pdf", client_id="C1", matter_id="M2"),
            make_document("B", "lease.docx", client_id="C3", matter_id="M3"),
            make_document("C", "Notes.txt", client_id="missing"),
        ]

    def test_matches_document_name(self, documents, clients, matters):
        assert ids(search_documents("minutes", documents, clients, matters)) == ["A"]

    def test_matches_client_name(self, documents, clients, matters):
        assert ids(search_documents("ZENITH", documents, clients, matters)) == ["B"]

    def test_matches_matter_name(self, documents, clients, matters):
        assert ids(search_documents("compliance", documents, clients, matters)) == ["A"]

    def test_blank_term_returns_nothing(self, documents, clients, matters):
        assert search_documents("   ", documents, clients, matters) == []

    def test_limit(self, make_document):
        documents = [make_document(str(i), f"report-{i}") for i in range(25)]
        assert len(search_documents("report", documents)) == 10
        assert len(search_documents("report", documents, limit=3)) == 3

    def test_recent_items_are_files_newest_first(self, make_document):
        documents = [
            make_document("old", last_active_at="2023-01-01T00:00:00Z"),
            make_document("folder", type="folder", last_active_at="2025-01-01T00:00:00Z"),
            make_document("new", last_active_at="2024-06-01T00:00:00Z"),
        ]
        assert ids(recent_items(documents)) == ["new", "old"]

from __future__ import annotations

from hollywood_stars.frontend import state as st
from hollywood_stars.frontend.view import render_form, render_table

JOHNNY = {"_id": "a1", "name": "Johnny Depp", "email": "j@d.com", "major": "Pirates"}
MERYL = {"_id": "b2", "name": "Meryl Streep", "email": "m@s.com", "major": "Drama"}


def _ready() -> st.PageState:
    return st.fetch_completed(
        st.PageState(),
        {"data": [JOHNNY, MERYL], "total": 2, "page": 1, "totalPages": 1},
    )


def test_fetch_completed_reads_envelope() -> None:
    s = _ready()
    assert s.status == "ready"
    assert s.stars == (JOHNNY, MERYL)
    assert (s.total, s.page, s.total_pages) == (2, 1, 1)
    assert s.error is None


def test_fetch_failed_ends_loading_with_visible_error() -> None:
    s = st.fetch_failed(st.fetch_started(st.PageState()), "connection refused")
    assert s.status == "ready"
    assert s.error == "connection refused"
    assert s.stars == ()


def test_edit_flow_replaces_form_without_mutation() -> None:
    ready = _ready()
    editing = st.edit_opened(ready, MERYL)
    assert editing.editing is True
    assert editing.selected_id == "b2"
    assert editing.form == {"name": "Meryl Streep", "email": "m@s.com", "major": "Drama"}
    assert ready.editing is False

    changed = st.field_changed(editing, "major", "Acting")
    assert changed.form["major"] == "Acting"
    assert editing.form["major"] == "Drama"
    assert changed.form is not editing.form

    saved = st.save_succeeded(changed)
    assert (saved.editing, saved.selected_id) == (False, None)

    failed = st.save_failed(changed, "Invalid star payload")
    assert failed.editing is True
    assert failed.form == changed.form
    assert failed.error == "Invalid star payload"

    cancelled = st.edit_cancelled(changed)
    assert (cancelled.editing, cancelled.selected_id) == (False, None)


def test_delete_transitions() -> None:
    ready = _ready()
    after = st.delete_succeeded(ready, "a1")
    assert after.stars == (MERYL,)
    assert after.total == 1

    unchanged = st.delete_succeeded(ready, "zz")
    assert unchanged.stars == ready.stars
    assert unchanged.total == 2

    failed = st.delete_failed(ready, "Star not found")
    assert failed.stars == ready.stars
    assert st.error_dismissed(failed).error is None


def test_render_table_and_form() -> None:
    assert render_table(st.PageState()) == "Loading..."

    text = render_table(st.delete_failed(_ready(), "Star not found"))
    lines = text.splitlines()
    assert lines[0] == "! Star not found"
    assert lines[1].split(" | ")[0].strip() == "Name"
    assert "Johnny Depp" in lines[3]
    assert "Meryl Streep" in lines[4]
    assert lines[-1] == "Page 1 of 1 (2 total)"

    assert render_form(_ready()) == ""
    assert render_form(st.edit_opened(_ready(), JOHNNY)).splitlines() == [
        "name: Johnny Depp",
        "email: j@d.com",
        "major: Pirates",
    ]

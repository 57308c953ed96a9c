from __future__ import annotations

from hollywood_stars.frontend.state import FORM_FIELDS, PageState

HEADERS: tuple[str, ...] = ("Name", "Email", "Major")


def table_rows(state: PageState) -> list[tuple[str, str, str]]:
    return [
        (str(s.get("name", "")), str(s.get("email", "")), str(s.get("major", "")))
        for s in state.stars
    ]


def render_table(state: PageState) -> str:
    """
    Render the current listing as a fixed-width text table.

    Shows a loading marker while a fetch is in flight and the error line, if any,
    above the table.
    """

    if state.status == "loading":
        return "Loading..."

    rows = table_rows(state)
    widths = [max([len(h), *(len(r[i]) for r in rows)]) for i, h in enumerate(HEADERS)]

    def line(cells: tuple[str, ...]) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    out: list[str] = []
    if state.error:
        out.append(f"! {state.error}")
    out.append(line(HEADERS))
    out.append("-+-".join("-" * w for w in widths))
    out.extend(line(r) for r in rows)
    out.append(f"Page {state.page} of {max(state.total_pages, 1)} ({state.total} total)")
    return "\n".join(out)


def render_form(state: PageState) -> str:
    if not state.editing:
        return ""
    return "\n".join(f"{name}: {state.form.get(name, '')}" for name in FORM_FIELDS)

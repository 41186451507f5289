"""Client-side script rendering for the visualization pages.

Every value embedded in generated script goes through `js_literal` or
`js_string`; nothing is interpolated by hand.
"""

import html
import json
from dataclasses import dataclass, field


def js_literal(value: str) -> str:
    """Quote text as a JS string literal that is safe inside a <script> block."""
    return json.dumps(value).replace("</", "<\\/")


def js_string(value: str) -> str:
    """HTML-entity-escape user-supplied text, then quote it as a JS string."""
    return js_literal(html.escape(value))


@dataclass
class FormViewIndex:
    """Forms and their Views, as exposed to the page in `page_ns`."""

    forms: list[tuple[int, str]] = field(default_factory=list)
    form_views: list[tuple[int, list[tuple[int, str]]]] = field(default_factory=list)

    def add_form(self, form_id: int, form_name: str, views: list[tuple[int, str]]) -> None:
        self.forms.append((form_id, form_name))
        self.form_views.append((form_id, views))

    def render(self) -> str:
        """Render as `page_ns` initialization statements."""
        rows = ["var page_ns = {}", "page_ns.forms = []"]
        rows += [f"page_ns.forms.push([{int(form_id)}, {js_string(name)}])" for form_id, name in self.forms]

        rows.append("page_ns.form_views = []")
        for form_id, views in self.form_views:
            items = ",".join(f"[{int(view_id)}, {js_string(name)}]" for view_id, name in views)
            rows.append(f"page_ns.form_views.push([{int(form_id)},[{items}]])")

        return ";\n".join(rows)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from coverage_single_html.builder.tree import sorted_children
from coverage_single_html.ids import compute_page_id
from coverage_single_html.model.report import TreeFolder, TreeLeaf
from coverage_single_html.transform.page_html import strip_html_suffix


@dataclass(frozen=True)
class Templates:
    env: Environment

    def render_report(self, context: dict[str, Any]) -> str:
        tpl = self.env.get_template("report.html")
        return str(tpl.render(**context))


def create_environment() -> Templates:
    loader = PackageLoader("coverage_single_html", "render/templates")
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=True,
        keep_trailing_newline=True,
    )
    env.filters["page_id"] = compute_page_id
    env.filters["display_name"] = strip_html_suffix
    env.filters["sorted_children"] = sorted_children
    env.tests["folder"] = lambda node: isinstance(node, TreeFolder)
    env.tests["leaf"] = lambda node: isinstance(node, TreeLeaf)
    return Templates(env=env)

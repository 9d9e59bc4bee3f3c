"""Render editor pages and write schema files.

For every route writes <output>/<action_id>.json and <action_id>.html,
where the page mounts the JSON editor widget on the schema.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jinja2

from .naming import action_id_from_route

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path(os.environ.get("PARAMSCHEMA_OUTPUT_DIR", "generated"))


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=jinja2.select_autoescape(["html", "html.j2"]),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["pretty_json"] = lambda text: json.dumps(json.loads(text), indent=2)
    return env


def render_editor_page(schema_json: str, route: str, title: str | None = None) -> str:
    """HTML page embedding the schema in a JSON editor form."""
    template = _environment().get_template("editor.html.j2")
    return template.render(
        schema=json.loads(schema_json),
        schema_json=schema_json,
        route=route,
        title=title or route,
    )


def build_pages(controller: Any, routes: list[str]) -> list[dict[str, str]]:
    """Schema and page for each route of a controller instance."""
    pages = []
    for route in routes:
        schema_json = controller.json_from_action(route)
        action_id = action_id_from_route(
            route, controller.get_unique_id(), controller.default_action,
        )
        pages.append({
            "route": route,
            "action_id": action_id,
            "schema": schema_json,
            "html": render_editor_page(schema_json, route),
        })
    return pages


def generate(controller: Any, routes: list[str], output_dir: Path | None = None) -> list[Path]:
    """Write <action_id>.json and <action_id>.html per route."""
    out = output_dir or OUTPUT_DIR
    out.mkdir(parents=True, exist_ok=True)

    written = []
    for page in build_pages(controller, routes):
        json_path = out / f"{page['action_id']}.json"
        html_path = out / f"{page['action_id']}.html"
        json_path.write_text(page["schema"])
        html_path.write_text(page["html"])
        written.extend([json_path, html_path])

    print(f"Generated {len(routes)} schemas in {out}")
    return written

"""Plain-text report of fill/stroke geometry in a document tree."""

from __future__ import annotations

from typing import Any

_RULE = "━" * 54


def _geometry_lines(node: dict[str, Any], label: str, indent: str) -> list[str]:
    lines: list[str] = []
    for i, geo in enumerate(node.get(f"{label.lower()}Geometry") or [], start=1):
        lines.append(f"{indent}  {label} Path {i}: {geo.get('path', '')}")
        if geo.get("windingRule"):
            lines.append(f"{indent}  Winding Rule: {geo['windingRule']}")
    return lines


def _walk(node: dict[str, Any], page_name: str, depth: int, out: list[str]) -> None:
    indent = "  " * depth
    body = _geometry_lines(node, "Fill", indent) + _geometry_lines(node, "Stroke", indent)
    if body:
        out.append(f"{indent}{node.get('type', '?')}: {node.get('name', '')} ({page_name})")
        out.extend(body)
        out.append("")
    for child in node.get("children") or []:
        _walk(child, page_name, depth + 1, out)


def format_geometry(file_data: dict[str, Any]) -> str:
    out = [f"Geometry Data: {file_data.get('name', '')}", _RULE, ""]
    header_len = len(out)

    document = file_data.get("document") or {}
    for page in document.get("children") or []:
        _walk(page, page.get("name", ""), 0, out)

    if len(out) == header_len:
        out.append("No geometry data found.")
    return "\n".join(out) + "\n"

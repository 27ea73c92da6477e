"""Data format converters."""

from __future__ import annotations

import csv
import io
import json
import re
from typing import Any
from xml.etree import ElementTree

import markdown
import yaml
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from txtx.errors import ErrorCode, TransformationError
from txtx.transforms.formatters import load_json


def csv_to_json(text: str) -> str:
    reader = csv.DictReader(io.StringIO(text.strip()))
    if not reader.fieldnames:
        raise TransformationError("CSV input has no header row", ErrorCode.INVALID_CSV)
    return json.dumps(list(reader), indent=2, ensure_ascii=False)


def json_to_csv(text: str) -> str:
    rows = load_json(text)
    if isinstance(rows, dict):
        rows = [rows]
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise TransformationError("JSON must be an object or array of objects", ErrorCode.INVALID_JSON)

    fieldnames: list[str] = []
    for row in rows:
        for key in row:
            if key not in fieldnames:
                fieldnames.append(key)

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def json_to_yaml(text: str) -> str:
    return yaml.safe_dump(load_json(text), sort_keys=False, allow_unicode=True).rstrip("\n")


def yaml_to_json(text: str) -> str:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TransformationError(f"Invalid YAML: {exc}", ErrorCode.INVALID_YAML) from exc
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=["fenced_code", "tables"])


def _element_to_data(element: ElementTree.Element):
    data: dict[str, Any] = {f"@{name}": value for name, value in element.attrib.items()}
    for child in element:
        value = _element_to_data(child)
        if child.tag not in data:
            data[child.tag] = value
        elif isinstance(data[child.tag], list):
            data[child.tag].append(value)
        else:
            data[child.tag] = [data[child.tag], value]
    text = (element.text or "").strip()
    if not data:
        return text
    if text:
        data["#text"] = text
    return data


def xml_to_json(text: str) -> str:
    """Attributes become `@name` keys, repeated children become lists."""
    try:
        root = ElementTree.fromstring(text.strip())
    except ElementTree.ParseError as exc:
        raise TransformationError(f"Invalid XML: {exc}", ErrorCode.INVALID_XML) from exc
    return json.dumps({root.tag: _element_to_data(root)}, indent=2, ensure_ascii=False)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _data_to_element(tag: str, value: Any) -> ElementTree.Element:
    element = ElementTree.Element(tag)
    if isinstance(value, dict):
        for key, item in value.items():
            if key.startswith("@"):
                element.set(key[1:], _scalar_text(item))
            elif key == "#text":
                element.text = _scalar_text(item)
            elif isinstance(item, list):
                element.extend(_data_to_element(key, entry) for entry in item)
            else:
                element.append(_data_to_element(key, item))
    elif isinstance(value, list):
        element.extend(_data_to_element("item", entry) for entry in value)
    elif value is not None:
        element.text = _scalar_text(value)
    return element


def json_to_xml(text: str, root_tag: str = "root") -> str:
    data = load_json(text)
    # a single top-level object key names the document element
    if isinstance(data, dict) and len(data) == 1:
        tag, value = next(iter(data.items()))
        if not tag.startswith(("@", "#")):
            return ElementTree.tostring(_data_to_element(tag, value), encoding="unicode")
    return ElementTree.tostring(_data_to_element(root_tag, data), encoding="unicode")


_HEADINGS = {f"h{level}": "#" * level for level in range(1, 7)}


def _inline(node: PageElement) -> str:
    if isinstance(node, PreformattedString):
        return ""
    if isinstance(node, NavigableString):
        return re.sub(r"\s+", " ", str(node))
    if not isinstance(node, Tag):
        return ""

    inner = "".join(_inline(child) for child in node.children)
    name = node.name
    if name in ("script", "style", "head"):
        return ""
    if name in _HEADINGS:
        return f"{_HEADINGS[name]} {inner.strip()}\n\n"
    if name in ("strong", "b"):
        return f"**{inner}**"
    if name in ("em", "i"):
        return f"*{inner}*"
    if name == "a":
        href = node.get("href")
        return f"[{inner}]({href})" if href else inner
    if name == "img":
        return f"![{node.get('alt', '')}]({node.get('src', '')})"
    if name == "pre":
        code = node.get_text().strip("\n")
        return f"```\n{code}\n```\n\n"
    if name == "code":
        return f"`{inner}`"
    if name == "br":
        return "\n"
    if name == "hr":
        return "---\n\n"
    if name == "p":
        return f"{inner.strip()}\n\n"
    if name == "blockquote":
        return f"> {inner.strip()}\n\n"
    if name in ("ul", "ol"):
        lines = []
        for position, item in enumerate(node.find_all("li", recursive=False), start=1):
            marker = f"{position}." if name == "ol" else "*"
            body = "".join(_inline(child) for child in item.children).strip()
            lines.append(f"{marker} {body}")
        return "\n".join(lines) + "\n\n"
    return inner


def html_to_markdown(text: str) -> str:
    soup = BeautifulSoup(text, "html.parser")
    rendered = "".join(_inline(child) for child in soup.children)
    return re.sub(r"\n{3,}", "\n\n", rendered).strip()

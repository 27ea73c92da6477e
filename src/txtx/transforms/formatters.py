"""Code and data formatters."""

from __future__ import annotations

import json
import re
from xml.dom import minidom
from xml.parsers.expat import ExpatError

import yaml
from bs4 import BeautifulSoup

from txtx.errors import ErrorCode, TransformationError


def load_json(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TransformationError(f"Invalid JSON: {exc.msg}", ErrorCode.INVALID_JSON) from exc


def format_json(text: str, indent: int = 2) -> str:
    return json.dumps(load_json(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    return json.dumps(load_json(text), separators=(",", ":"), ensure_ascii=False)


def format_xml(text: str) -> str:
    try:
        document = minidom.parseString(text.strip())
    except ExpatError as exc:
        raise TransformationError(f"Invalid XML: {exc}", ErrorCode.INVALID_XML) from exc
    pretty = document.toprettyxml(indent="  ")
    return "\n".join(line for line in pretty.splitlines() if line.strip())


def minify_xml(text: str) -> str:
    return re.sub(r">\s+<", "><", text.strip())


def minify_css(text: str) -> str:
    css = re.sub(r"/\*.*?\*/", "", text, flags=re.DOTALL)
    css = re.sub(r"\s+", " ", css)
    css = re.sub(r"\s*([{}:;,>])\s*", r"\1", css)
    return css.replace(";}", "}").strip()


def format_css(text: str) -> str:
    lines: list[str] = []
    for block in re.finditer(r"([^{}]+)\{([^{}]*)\}", minify_css(text)):
        selector, body = block.group(1).strip(), block.group(2)
        lines.append(f"{selector} {{")
        for declaration in filter(None, (d.strip() for d in body.split(";"))):
            prop, _, value = declaration.partition(":")
            lines.append(f"  {prop}: {value};")
        lines.append("}")
    return "\n".join(lines)


def format_yaml(text: str) -> str:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TransformationError(f"Invalid YAML: {exc}", ErrorCode.INVALID_YAML) from exc
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")


_SQL_KEYWORDS = (
    "SELECT", "FROM", "WHERE", "JOIN", "LEFT JOIN", "RIGHT JOIN", "INNER JOIN",
    "ON", "GROUP BY", "ORDER BY", "HAVING", "LIMIT", "OFFSET", "UNION",
    "INSERT INTO", "VALUES", "UPDATE", "SET", "DELETE FROM", "CREATE TABLE",
    "ALTER TABLE", "DROP TABLE", "CREATE INDEX", "DROP INDEX", "AS", "AND", "OR",
    "NOT", "IN", "EXISTS", "BETWEEN", "LIKE", "IS NULL", "IS NOT NULL",
    "CASE", "WHEN", "THEN", "ELSE", "END", "WITH", "DISTINCT", "ALL",
)
_SQL_KEYWORD_PATTERN = re.compile(
    r"\b("
    + "|".join(
        keyword.replace(" ", r"\s+")
        for keyword in sorted(_SQL_KEYWORDS, key=len, reverse=True)
    )
    + r")\b",
    re.IGNORECASE,
)


def format_sql(text: str) -> str:
    """Uppercase keywords and break major clauses, joins and conditions onto new lines."""
    sql = _SQL_KEYWORD_PATTERN.sub(lambda m: " ".join(m.group(0).upper().split()), text.strip())
    sql = re.sub(
        r"\s+(SELECT|FROM|WHERE|GROUP BY|ORDER BY|HAVING|LIMIT|OFFSET|UNION)\b", r"\n\1", sql
    )
    sql = re.sub(r"\s+((?:LEFT |RIGHT |INNER )?JOIN)\b", r"\n  \1", sql)
    sql = re.sub(r"\s+(AND|OR)\s+", r"\n  \1 ", sql)
    sql = re.sub(r",\s*", ",\n  ", sql)
    return re.sub(r"\n\s*\n", "\n", sql).strip()


def minify_sql(text: str) -> str:
    sql = re.sub(r"\s+", " ", text)
    sql = re.sub(r"\s*([(),])\s*", r"\1", sql)
    return re.sub(r";\s*", ";", sql).strip()


def format_html(text: str) -> str:
    return BeautifulSoup(text, "html.parser").prettify().rstrip("\n")


def minify_html(text: str) -> str:
    html = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)
    html = re.sub(r">\s+<", "><", html)
    return re.sub(r"\s+", " ", html).strip()


def minify_javascript(text: str) -> str:
    # line comments are only stripped at line start or after whitespace, so URLs survive
    script = re.sub(r"(^|\s)//[^\n]*", r"\1", text)
    script = re.sub(r"/\*.*?\*/", "", script, flags=re.DOTALL)
    script = re.sub(r"\s+", " ", script)
    script = re.sub(r"\s*([{}();,:=])\s*", r"\1", script)
    return script.replace(";}", "}").strip()

"""Conversion of XML and YAML documents into JSON-like Python values."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

import yaml

_XML_WHITESPACE = " \t\n\r"
_YAML_NULL_TAG = "tag:yaml.org,2002:null"


class FormatError(ValueError):
    """Raised when a document cannot be parsed."""


@dataclass
class _Node:
    """An XML node: an element, or a text node with an empty name."""

    name: str
    value: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[_Node] = field(default_factory=list)


def _has_content(text: str | None) -> bool:
    return bool(text) and bool(text.strip(_XML_WHITESPACE))


def _from_element(element: ET.Element) -> _Node:
    node = _Node(element.tag, attributes=dict(element.attrib))
    if _has_content(element.text):
        node.children.append(_Node("", element.text or ""))
    for child in element:
        node.children.append(_from_element(child))
        if _has_content(child.tail):
            node.children.append(_Node("", child.tail or ""))
    return node


def _object_at(mapping: dict[str, Any], key: str) -> dict[str, Any]:
    value = mapping.get(key)
    if value is None:
        value = mapping[key] = {}
    return value


def _convert(root: _Node) -> dict[str, Any] | None:
    result: dict[str, Any] = {}
    seen: Counter[str] = Counter()

    for node in root.children:
        key = node.name
        seen[key] += 1

        if seen[key] == 2:
            result[key] = [result.get(key)]

        if seen[key] > 1:
            entry: dict[str, Any] = {}
            if node.children:
                entry[key] = _convert(node)
            else:
                entry["#text"] = node.value
            for name, value in node.attributes.items():
                _object_at(entry, key)[name] = value
            result[key].append(entry.get(key))
        else:
            if node.children:
                result[key] = _convert(node)
            else:
                result["#text"] = node.value
            for name, value in node.attributes.items():
                _object_at(result, key)[name] = value

    return result or None


def xml2json(text: str) -> dict[str, Any] | None:
    """Convert an XML document into nested dicts keyed by element name.

    Text content is stored under ``"#text"``, attributes beside child
    elements, and repeated elements become lists. Returns None for an
    empty document.
    """
    if not text.strip(_XML_WHITESPACE):
        return None
    try:
        root = ET.fromstring(text)
    except ET.ParseError as error:
        raise FormatError(f"malformed XML: {error}") from error
    return {root.tag: _convert(_from_element(root))}


def _yaml_key(node: yaml.Node) -> str:
    if isinstance(node, yaml.ScalarNode):
        return "null" if node.tag == _YAML_NULL_TAG else node.value
    raise FormatError("YAML mapping keys must be scalars")


def _yaml_value(node: yaml.Node | None) -> Any:
    if node is None:
        return None
    if isinstance(node, yaml.ScalarNode):
        return None if node.tag == _YAML_NULL_TAG else node.value
    if isinstance(node, yaml.SequenceNode):
        return [_yaml_value(item) for item in node.value] or None
    if isinstance(node, yaml.MappingNode):
        return {_yaml_key(key): _yaml_value(value) for key, value in node.value} or None
    return None


def yaml2json(text: str) -> Any:
    """Convert the first YAML document in ``text``; scalars stay strings.

    Null scalars, empty sequences and empty mappings become None.
    """
    try:
        document = next(iter(yaml.compose_all(text, Loader=yaml.SafeLoader)), None)
    except yaml.YAMLError as error:
        raise FormatError(f"malformed YAML: {error}") from error
    return _yaml_value(document)


def loadxml(filepath: str) -> dict[str, Any] | None:
    """Load and convert the XML document stored at ``filepath``."""
    with open(filepath, encoding="utf-8") as handle:
        return xml2json(handle.read())


def loadyaml(filepath: str) -> Any:
    """Load and convert the YAML document stored at ``filepath``."""
    with open(filepath, encoding="utf-8") as handle:
        return yaml2json(handle.read())
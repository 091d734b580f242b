"""Transcoding between nested dict/list values and XML documents.

Encoding rules:

- a ``dict`` becomes child elements named after its keys;
- a ``list`` becomes one sibling element per item, each named after the key
  that holds the list (``{"Message": [a, b]}`` gives two ``<Message>``);
- a mapping keyed ``0..n-1`` is treated as a list;
- an :class:`AttributedValue` becomes an element with text and attributes;
- any other scalar becomes a leaf whose text is ``str(value)``.

Decoding drops the root element and returns its content. Attributes are
collected under ``@attributes``; an element holding only text becomes that
string. XML cannot tell one repeated element from a single element, so a
lone repetition always decodes to the single form; see
:func:`amazon_mws.normalize.as_sequence`.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from xml.parsers.expat import ExpatError

import xmltodict

from .exceptions import XMLDecodeError
from .normalize import is_positional

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"
DEFAULT_ROOT = "AmazonEnvelope"

_ATTR_PREFIX = "@"
_NAMESPACED_ITEM_ATTRIBUTES = re.compile(r'<ns2:ItemAttributes xml:lang="([^"]*)">')


@dataclass(frozen=True)
class AttributedValue:
    """Scalar element content carrying XML attributes.

    >>> AttributedValue("12.99", {"currency": "DEFAULT"})

    encodes as ``<StandardPrice currency="DEFAULT">12.99</StandardPrice>``
    when stored under the ``StandardPrice`` key.
    """

    value: Any
    attributes: Mapping[str, Any] = field(default_factory=dict)


def _scalar_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(items: list) -> list:
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(list(item)))
        else:
            flat.append(item)
    return flat


def _prepare(value: Any) -> Any:
    """Rewrite a value into the shape ``xmltodict.unparse`` expects."""
    if isinstance(value, AttributedValue):
        node = {f"{_ATTR_PREFIX}{name}": _scalar_text(attr) for name, attr in value.attributes.items()}
        node[TEXT_KEY] = _scalar_text(value.value)
        return node

    if isinstance(value, Mapping) and is_positional(value):
        return _prepare(list(value.values()))

    if isinstance(value, Mapping):
        node = {}
        for key, item in value.items():
            if key == ATTRIBUTES_KEY and isinstance(item, Mapping):
                for name, attr in item.items():
                    node[f"{_ATTR_PREFIX}{name}"] = _scalar_text(attr)
            elif key == TEXT_KEY:
                node[TEXT_KEY] = _scalar_text(item)
            else:
                node[str(key)] = _prepare(item)
        return node

    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in _flatten(list(value))]

    return _scalar_text(value)


def to_xml(value: Mapping[str, Any], root: str = DEFAULT_ROOT, pretty: bool = False) -> str:
    """Encode ``value`` as an XML document under a ``root`` element.

    Args:
        value: Mapping of element name to content
        root: Name of the document element
        pretty: Indent the output

    Returns:
        The XML document, declaration included
    """
    return xmltodict.unparse({root: _prepare(value)}, encoding="utf-8", full_document=True, pretty=pretty)


def _is_namespace_declaration(name: str) -> bool:
    return name == "xmlns" or name.startswith("xmlns:")


def _collapse(node: Any) -> Any:
    """Regroup xmltodict output into the decoded value model."""
    if isinstance(node, list):
        return [_collapse(item) for item in node]

    if not isinstance(node, Mapping):
        return node

    attributes = {}
    children = {}
    for key, item in node.items():
        if key.startswith(_ATTR_PREFIX):
            name = key[len(_ATTR_PREFIX):]
            if not _is_namespace_declaration(name):
                attributes[name] = item
        else:
            children[key] = _collapse(item)

    if attributes:
        return {ATTRIBUTES_KEY: attributes, **children}

    if not children:
        return None

    if list(children) == [TEXT_KEY]:
        return children[TEXT_KEY]

    return children


def from_xml(text: Union[str, bytes]) -> Any:
    """Decode an XML document into dicts, lists and strings.

    Args:
        text: XML document

    Returns:
        The decoded content of the document element

    Raises:
        XMLDecodeError: If the payload is not well-formed XML
    """
    try:
        parsed = xmltodict.parse(text, attr_prefix=_ATTR_PREFIX, cdata_key=TEXT_KEY)
    except ExpatError as e:
        raise XMLDecodeError(f"Malformed XML payload: {e}") from e

    if not parsed:
        return None

    document = next(iter(parsed.values()))
    return _collapse(document)


def strip_namespaces(text: str) -> str:
    """Flatten the ``ns2:`` namespaced item attributes of Products responses.

    ``<ns2:ItemAttributes xml:lang="de-DE">`` becomes
    ``<ItemAttributes><Language>de-DE</Language>`` so the language survives
    decoding as a plain field, and remaining ``ns2:`` prefixes are dropped.
    """
    text = _NAMESPACED_ITEM_ATTRIBUTES.sub(r"<ItemAttributes><Language>\1</Language>", text)
    text = text.replace("</ns2:ItemAttributes>", "</ItemAttributes>")
    return text.replace("ns2:", "")

# src/sic2lp/safeincloud/parser.py

import base64
import binascii
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Union
from xml.parsers.expat import ExpatError

import xmltodict

from sic2lp.common.errors import SourceReadError
from sic2lp.common.models import Attachment, Card, Database, Field, Label
from sic2lp.safeincloud.decrypter import decrypt_database

logger = logging.getLogger(__name__)

# Elements that may repeat. Forcing them to lists keeps a card with a single
# field shaped the same as a card with many.
REPEATED_ELEMENTS = ("label", "card", "field", "label_id", "file", "image")

_BOM = b"\xef\xbb\xbf"


def _text(node: Any) -> str:
    """Returns the character data of an xmltodict node, whatever its shape."""
    if node is None:
        return ""
    if isinstance(node, list):
        return _text(node[0]) if node else ""
    if isinstance(node, dict):
        return node.get("#text") or ""
    return str(node)


def _attr(node: Any, name: str) -> str:
    if isinstance(node, dict):
        return node.get(f"@{name}") or ""
    return ""


def _flag(node: Any, name: str) -> bool:
    return _attr(node, name).lower() == "true"


def _decode_blob(node: Any, where: str) -> bytes:
    # Exports wrap long base64 bodies across lines
    compact = "".join(_text(node).split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SourceReadError(f"Invalid base64 attachment in {where}: {e}") from e


def _parse_card(node: Dict[str, Any]) -> Card:
    card_id = _attr(node, "id")
    where = f"card {card_id or '?'}"

    fields = [
        Field(name=_attr(f, "name"), type=_attr(f, "type"), value=_text(f))
        for f in node.get("field") or []
    ]
    files = [
        Attachment(name=_attr(f, "name"), data=_decode_blob(f, where))
        for f in node.get("file") or []
    ]
    images = [
        Attachment(name="", data=_decode_blob(img, where))
        for img in node.get("image") or []
    ]

    return Card(
        id=card_id,
        title=_attr(node, "title"),
        fields=fields,
        notes=_text(node.get("notes")),
        star=_flag(node, "star"),
        deleted=_flag(node, "deleted"),
        template=_flag(node, "template"),
        label_ids=[_text(ref) for ref in node.get("label_id") or []],
        files=files,
        images=images,
    )


def parse_xml(data: Union[bytes, str]) -> Database:
    """Parses a SafeInCloud XML export into an in-memory :class:`Database`."""
    try:
        # Field values and notes are kept byte for byte: a password may start or
        # end with spaces
        doc = xmltodict.parse(data, force_list=REPEATED_ELEMENTS, strip_whitespace=False)
    except ExpatError as e:
        raise SourceReadError(f"Malformed SafeInCloud XML: {e}") from e

    if not doc or "database" not in doc:
        raise SourceReadError("Not a SafeInCloud export: missing <database> root element")

    root = doc["database"]
    if not isinstance(root, dict):
        # <database/> or a root holding only whitespace
        root = {}
    labels = [
        Label(id=_attr(lbl, "id"), name=_attr(lbl, "name"))
        for lbl in root.get("label") or []
    ]
    cards: List[Card] = [_parse_card(c if isinstance(c, dict) else {}) for c in root.get("card") or []]

    logger.debug("Parsed %d labels and %d cards", len(labels), len(cards))
    return Database(labels=labels, cards=cards)


def parse_file(path: Union[str, Path]) -> Database:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"Cannot read {path}: {e}") from e
    return parse_xml(data)


def looks_like_xml(data: bytes) -> bool:
    if data.startswith(_BOM):
        data = data[len(_BOM):]
    return data.lstrip()[:1] == b"<"


def load_database(path: Union[str, Path], password_prompt: Callable[[], str]) -> Database:
    """
    Loads either a plain XML export or an encrypted SafeInCloud database.

    The password is only requested when the file is not XML.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"Cannot read {path}: {e}") from e

    if looks_like_xml(data):
        return parse_xml(data)

    logger.info("%s is not XML, treating it as an encrypted SafeInCloud database", path)
    return parse_xml(decrypt_database(data, password_prompt()))

# src/sic2lp/common/models.py
from dataclasses import dataclass, field
from typing import List

# SafeInCloud field type tags that drive structured extraction.
# Every other tag (text, email, pin, number, ...) is treated as free text.
FIELD_LOGIN = "login"
FIELD_PASSWORD = "password"
FIELD_WEBSITE = "website"

# LastPass requires this exact URL on every Secure Note
SECURE_NOTE_URL = "http://sn"
FAVORITE = "1"


# --- Source side (SafeInCloud) ---

@dataclass
class Field:
    name: str
    type: str = ""
    value: str = ""


@dataclass
class Label:
    id: str
    name: str


@dataclass
class Attachment:
    name: str               # 原始文件名 (图片附件为空)
    data: bytes = b""


@dataclass
class Card:
    id: str
    title: str = ""
    fields: List[Field] = field(default_factory=list)
    notes: str = ""
    star: bool = False
    deleted: bool = False
    template: bool = False
    label_ids: List[str] = field(default_factory=list)
    files: List[Attachment] = field(default_factory=list)
    images: List[Attachment] = field(default_factory=list)


@dataclass
class Database:
    labels: List[Label] = field(default_factory=list)
    cards: List[Card] = field(default_factory=list)


# --- Target side (LastPass CSV) ---
#
# COLUMNS is the wire contract with the LastPass importer: column names and
# their order must not change.

@dataclass
class Site:
    url: str
    username: str
    password: str
    name: str
    type: str = ""
    hostname: str = ""
    extra: str = ""
    grouping: str = ""
    fav: str = ""

    COLUMNS = (
        ("url", "url"),
        ("type", "type"),
        ("username", "username"),
        ("password", "password"),
        ("hostname", "hostname"),
        ("extra", "extra"),
        ("name", "name"),
        ("grouping", "grouping"),
        ("fav", "fav"),
    )

    def to_row(self) -> List[str]:
        return [getattr(self, attr) for _, attr in self.COLUMNS]


@dataclass
class SecureNote:
    name: str
    extra: str = ""
    grouping: str = ""
    fav: str = ""
    url: str = SECURE_NOTE_URL
    username: str = ""
    password: str = ""

    COLUMNS = (
        ("url", "url"),
        ("username", "username"),
        ("password", "password"),
        ("extra", "extra"),
        ("name", "name"),
        ("grouping", "grouping"),
        ("fav", "fav"),
    )

    def to_row(self) -> List[str]:
        return [getattr(self, attr) for _, attr in self.COLUMNS]


def column_names(record_type) -> List[str]:
    return [name for name, _ in record_type.COLUMNS]


# --- Run configuration ---

@dataclass
class ConversionOptions:
    default_folder: str = "Imported"
    priority_folders: List[str] = field(default_factory=list)
    output_dir: str = "."
    attachments_dir: str = "attachments"


def parse_priority_folders(raw: str) -> List[str]:
    """Splits the comma delimited ``-p`` value, keeping the operator's order."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]

# src/sic2lp/lastpass/folders.py
"""
Label to folder flattening.

LastPass files every site and note into exactly one folder and has no notion
of tags, so a SafeInCloud card's labels are reduced to a single folder name.
The operator's priority list decides which label wins; cards whose labels are
not listed land in ``"<default> - <first label>"`` so they sort next to the
default folder.
"""

from typing import List, Optional, Sequence

from sic2lp.common.models import Card, Label

# Folder name -> LastPass "NoteType:" header that selects a secure note template
NOTE_TYPES = {
    "Credit Cards": "NoteType:Credit Card",
    "Banking": "NoteType:Bank Account",
    "Databases": "NoteType:Database",
    "Licenses": "NoteType:Driver's License",
    "Insurance": "NoteType:Insurance",
    "Membership": "NoteType:Membership",
    "Passport": "NoteType:Passport",
    "Servers": "NoteType:Server",
    "Software": "NoteType:Software License",
}


def card_labels(card: Card, labels: Sequence[Label]) -> List[str]:
    """Label names for the card's label ids, in the card's order. Unknown ids are dropped."""
    names = []
    for label_id in card.label_ids:
        for label in labels:
            if label.id == label_id:
                names.append(label.name)
    return names


def primary_folder(card_label_names: Sequence[str], priority: Sequence[str], default: str) -> str:
    if not card_label_names:
        return default

    # Priority order wins over the card's own label order
    folded = [name.casefold() for name in card_label_names]
    for folder in priority:
        if folder.casefold() in folded:
            return folder

    return f"{default} - {card_label_names[0]}"


def note_type(folder: str) -> Optional[str]:
    return NOTE_TYPES.get(folder)

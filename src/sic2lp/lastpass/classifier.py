# src/sic2lp/lastpass/classifier.py
"""
Card classification: SafeInCloud cards -> LastPass sites and secure notes.

A card becomes one LastPass *site* per login field that can be paired with a
password and a website found after it (LastPass needs url, username, password
and name for auto-login). Cards with several login blocks therefore turn into
several sites. A card without any usable login becomes a single *secure
note*. Every field of the card is kept in the record's extra text so nothing
is lost when a card only partially fits.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from sic2lp.common.errors import CardProcessingError
from sic2lp.common.models import FAVORITE, Card, ConversionOptions, Database, SecureNote, Site
from sic2lp.lastpass.attachments import AttachmentExtractor
from sic2lp.lastpass.extra import build_extra
from sic2lp.lastpass.fields import LoginTriplet, iter_login_triplets
from sic2lp.lastpass.folders import card_labels, note_type, primary_folder

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Records produced by a run, in card order, plus the run counters."""

    sites: List[Site] = field(default_factory=list)
    notes: List[SecureNote] = field(default_factory=list)
    imported: int = 0
    deleted: int = 0
    skipped: int = 0


class CardClassifier:
    def __init__(
        self,
        database: Database,
        options: ConversionOptions,
        attachments: Optional[AttachmentExtractor] = None,
    ):
        self.database = database
        self.options = options
        self.attachments = attachments

    def classify(self, card: Card, result: ImportResult) -> List[Union[Site, SecureNote]]:
        """Converts one card, appending the new records to ``result``."""
        logger.debug("%s %s: being parsed", card.id, card.title)
        labels = card_labels(card, self.database.labels)
        folder = primary_folder(labels, self.options.priority_folders, self.options.default_folder)

        sites = [self._to_site(card, t, labels, folder) for t in iter_login_triplets(card)]
        if sites:
            result.sites.extend(sites)
            logger.debug("%s %s: imported as %d site(s)", card.id, card.title, len(sites))
            return sites

        note = self._to_note(card, labels, folder)
        result.notes.append(note)
        return [note]

    def _to_site(self, card: Card, triplet: LoginTriplet, labels: List[str], folder: str) -> Site:
        site = Site(
            url=triplet.url,
            username=triplet.login,
            password=triplet.password,
            name=triplet.title,
            grouping=folder,
            fav=FAVORITE if card.star else "",
        )
        logger.info("importing Website %s %s -> %s", card.id, site.name, site.grouping)

        site.extra = build_extra(
            card,
            labels,
            exclude_values=(triplet.url, triplet.login, triplet.password),
        )
        self._extract_attachments(card, site.name)
        return site

    def _to_note(self, card: Card, labels: List[str], folder: str) -> SecureNote:
        note = SecureNote(
            name=card.title or f"SecureNote {card.id}",
            grouping=folder,
            fav=FAVORITE if card.star else "",
        )
        logger.info("importing Secure Note %s %s -> %s", card.id, note.name, note.grouping)

        note.extra = build_extra(card, labels, prefix=note_type(folder))
        self._extract_attachments(card, note.name)
        return note

    def _extract_attachments(self, card: Card, title: str):
        if self.attachments is None:
            return
        try:
            self.attachments.extract(card, title)
        except CardProcessingError as e:
            raise CardProcessingError(f"Card {card.id} ({title}): {e}") from e


def convert(
    database: Database,
    options: ConversionOptions,
    attachments: Optional[AttachmentExtractor] = None,
) -> ImportResult:
    """Classifies every live card of ``database`` in order. Stops at the first error."""
    result = ImportResult()
    classifier = CardClassifier(database, options, attachments)

    for card in database.cards:
        if card.deleted:
            logger.info("skipping deleted card %s %s", card.id, card.title)
            result.deleted += 1
            continue
        if card.template:
            logger.info("skipping template %s %s", card.id, card.title)
            result.skipped += 1
            continue

        classifier.classify(card, result)
        result.imported += 1

    logger.info(
        "Total imported, deleted, skipped: %d, %d, %d",
        result.imported, result.deleted, result.skipped,
    )
    return result

# src/sic2lp/lastpass/fields.py

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from sic2lp.common.models import FIELD_LOGIN, FIELD_PASSWORD, FIELD_WEBSITE, Card, Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginTriplet:
    """One login/password/website combination that can become a LastPass site."""

    login: str
    password: str
    url: str
    title: str


def first_value(fields: Sequence[Field], type_tag: str) -> str:
    """Returns the value of the first non-empty field of ``type_tag``, or ``""``."""
    for f in fields:
        if f.type == type_tag and f.value != "":
            return f.value
    return ""


def site_title(card_title: str, url: str) -> str:
    """Card title, falling back to the website without its scheme."""
    if card_title:
        return card_title
    return url.replace("http://", "", 1).replace("https://", "", 1)


def iter_login_triplets(card: Card) -> Iterator[LoginTriplet]:
    """
    Yields a triplet for every login field that can be paired.

    Password and website are searched forward from each login (inclusive), so
    a card holding several login blocks pairs each login with the password and
    website that follow it rather than with the first ones on the card. A
    login that cannot be paired is skipped without affecting the others.
    """
    for i, f in enumerate(card.fields):
        if f.type != FIELD_LOGIN or f.value == "":
            continue
        logger.debug("%s %s: found login", card.id, card.title)

        remaining = card.fields[i:]
        password = first_value(remaining, FIELD_PASSWORD)
        url = first_value(remaining, FIELD_WEBSITE)
        if password == "" or url == "":
            logger.debug("%s %s: missing password or website value(s)", card.id, card.title)
            continue

        title = site_title(card.title, url)
        if title == "":
            logger.debug("%s %s: missing title", card.id, card.title)
            continue

        yield LoginTriplet(login=f.value, password=password, url=url, title=title)

# src/sic2lp/lastpass/extra.py

from typing import Collection, Optional, Sequence

from sic2lp.common.models import Card

EXTRA_FORMAT = "{name}: {value}\n\n"


def build_extra(
    card: Card,
    labels: Sequence[str],
    exclude_values: Collection[str] = (),
    prefix: Optional[str] = None,
) -> str:
    """
    Builds the free-text "extra" block of a LastPass record.

    Every field is dumped as ``name: value`` in card order, except those whose
    value equals one of ``exclude_values`` (the url, login and password already
    carried by a site). The card notes follow, then the original labels.
    """
    parts = []
    if prefix:
        # LastPass reads the first line to pick the secure note template
        parts.append(f"{prefix}\n\n")

    for f in card.fields:
        if f.value in exclude_values:
            continue
        parts.append(EXTRA_FORMAT.format(name=f.name, value=f.value))

    parts.append(card.notes)

    if labels:
        parts.append("\n\nLabels: " + ", ".join(labels))

    return "".join(parts)

# src/sic2lp/lastpass/attachments.py

import logging
import os
from pathlib import Path
from typing import List, Union
from urllib.parse import quote

from sic2lp.common.errors import AttachmentError
from sic2lp.common.models import Card

logger = logging.getLogger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o600


def escape_filename(name: str) -> str:
    """Percent-escapes a file name, keeping spaces readable."""
    # '/' is escaped too, so a title can never leave the attachments directory
    return quote(name, safe=" ")


class AttachmentExtractor:
    """
    Dumps card attachments to disk for manual upload.

    LastPass CSV imports cannot carry files, so every file and image of a
    converted card is written to ``directory`` under a name derived from the
    title of the record it was converted into.
    """

    def __init__(self, directory: Union[str, Path] = "attachments"):
        self.directory = Path(directory)

    def extract(self, card: Card, title: str) -> List[Path]:
        saved = []
        for i, file in enumerate(card.files):
            path = self.dump(f"{title}_{i}_{file.name}", file.data)
            logger.warning("  - %s %s file attachment saved to %s", card.id, title, path.name)
            saved.append(path)

        for i, image in enumerate(card.images):
            # SafeInCloud re-encodes every image as JPEG, the original name is lost
            path = self.dump(f"{title}_{i}.jpg", image.data)
            logger.warning("  - %s %s image attachment saved to %s", card.id, title, path.name)
            saved.append(path)
        return saved

    def dump(self, filename: str, data: bytes) -> Path:
        path = self.directory / escape_filename(filename)
        try:
            self.directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            raise AttachmentError(f"Cannot write attachment {path}: {e}") from e
        return path

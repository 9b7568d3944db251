import csv
import logging
from pathlib import Path
from typing import List, Sequence, Type, Union

from sic2lp.common.errors import NotesWriteError, SitesWriteError
from sic2lp.common.models import SecureNote, Site, column_names

logger = logging.getLogger(__name__)


class LastPassExporter:
    """Writes the classified records as the two CSV files LastPass imports."""

    SITES_FILE = "lastpass_sites.csv"
    NOTES_FILE = "lastpass_notes.csv"

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def write_sites(self, sites: Sequence[Site]) -> Path:
        path = self.output_dir / self.SITES_FILE
        try:
            self._to_csv(Site, sites, path)
        except (OSError, csv.Error) as e:
            raise SitesWriteError(f"Failed to write sites CSV {path}: {e}") from e
        logger.info("Wrote %d sites to %s", len(sites), path)
        return path

    def write_notes(self, notes: Sequence[SecureNote]) -> Path:
        path = self.output_dir / self.NOTES_FILE
        try:
            self._to_csv(SecureNote, notes, path)
        except (OSError, csv.Error) as e:
            raise NotesWriteError(f"Failed to write secure notes CSV {path}: {e}") from e
        logger.info("Wrote %d secure notes to %s", len(notes), path)
        return path

    def _to_csv(self, record_type: Type, records: Sequence, path: Path):
        # 表头来自记录类型的固定列表，而不是第一行数据
        headers: List[str] = column_names(record_type)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(headers)
            for record in records:
                writer.writerow(record.to_row())

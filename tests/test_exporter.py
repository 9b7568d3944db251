# tests/test_exporter.py

import csv

import pytest

from sic2lp.common.errors import NotesWriteError, SitesWriteError
from sic2lp.common.exporter import LastPassExporter
from sic2lp.common.models import SecureNote, Site


def _read(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_sites_csv_column_order(tmp_path):
    site = Site(
        url="https://example.com",
        username="bob",
        password="p,w\"1",
        name="Example",
        extra="Email: bob@example.com\n\nLabels: Web",
        grouping="Imported",
        fav="1",
    )
    path = LastPassExporter(tmp_path).write_sites([site])

    assert path == tmp_path / "lastpass_sites.csv"
    rows = _read(path)
    assert rows[0] == ["url", "type", "username", "password", "hostname", "extra", "name", "grouping", "fav"]
    assert rows[1] == [
        "https://example.com", "", "bob", "p,w\"1", "", "Email: bob@example.com\n\nLabels: Web",
        "Example", "Imported", "1",
    ]


def test_notes_csv_column_order(tmp_path):
    note = SecureNote(name="Visa", extra="NoteType:Credit Card\n\n", grouping="Credit Cards")
    path = LastPassExporter(tmp_path).write_notes([note])

    rows = _read(path)
    assert rows[0] == ["url", "username", "password", "extra", "name", "grouping", "fav"]
    assert rows[1] == ["http://sn", "", "", "NoteType:Credit Card\n\n", "Visa", "Credit Cards", ""]


def test_empty_export_writes_header_only(tmp_path):
    exporter = LastPassExporter(tmp_path)
    assert exporter.write_sites([]).read_text(encoding="utf-8") == (
        "url,type,username,password,hostname,extra,name,grouping,fav\n"
    )
    assert _read(exporter.write_notes([])) == [["url", "username", "password", "extra", "name", "grouping", "fav"]]


def test_write_failures_map_to_their_own_errors(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    exporter = LastPassExporter(blocker)

    with pytest.raises(SitesWriteError) as sites_exc:
        exporter.write_sites([])
    with pytest.raises(NotesWriteError) as notes_exc:
        exporter.write_notes([])

    assert sites_exc.value.exit_code == 12
    assert notes_exc.value.exit_code == 13

# tests/conftest.py

import struct
import zlib

import pytest
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad

from sic2lp.common.models import Card, ConversionOptions, Database, Field, Label
from sic2lp.safeincloud.decrypter import derive_key

SAMPLE_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<database>
  <label name="Banking" id="1" type="bank"/>
  <label name="Web Accounts" id="2"/>
  <card title="My Bank" id="10" star="true" symbol="bank">
    <field name="Login" type="login">bob</field>
    <field name="Password" type="password">pw1</field>
    <field name="Website" type="website">https://bank.example</field>
    <field name="PIN" type="pin"/>
    <notes>line one
line two</notes>
    <label_id>2</label_id>
    <label_id>1</label_id>
    <file name="statement.pdf">aGVs
bG8=</file>
    <image>
      /9j/
    </image>
  </card>
  <card title="Visa" id="11">
    <field name="Number" type="number">4111111111111111</field>
    <label_id>1</label_id>
  </card>
  <card title="Old" id="12" deleted="true"/>
  <card title="Blank" id="13" template="true">
    <field name="Login" type="login"/>
  </card>
</database>
"""


def encrypt_database(xml: bytes, password: str) -> bytes:
    """Builds a SafeInCloud .db container around ``xml``."""
    salt, iv, salt2 = b"s" * 16, b"i" * 16, b"t" * 16
    iv2, key2, check = b"j" * 16, b"k" * 32, b"c" * 16

    def array(data: bytes) -> bytes:
        return struct.pack("<B", len(data)) + data

    inner = array(iv2) + array(key2) + array(check)
    key_block = AES.new(derive_key(password, salt), AES.MODE_CBC, iv).encrypt(pad(inner, 16))
    payload = AES.new(key2, AES.MODE_CBC, iv2).encrypt(pad(zlib.compress(xml), 16))

    return (
        struct.pack("<HB", 0x0505, 2)
        + array(salt) + array(iv) + array(salt2) + array(key_block)
        + payload
    )


@pytest.fixture
def options():
    return ConversionOptions(default_folder="Imported", priority_folders=[])


@pytest.fixture
def make_card():
    def _make(*fields, **kwargs):
        kwargs.setdefault("id", "1")
        return Card(fields=[Field(name, type_, value) for name, type_, value in fields], **kwargs)
    return _make


@pytest.fixture
def labelled_db():
    def _make(cards, *labels):
        return Database(
            labels=[Label(id=str(i), name=name) for i, name in enumerate(labels, 1)],
            cards=list(cards),
        )
    return _make

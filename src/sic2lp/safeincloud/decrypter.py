# src/sic2lp/safeincloud/decrypter.py

import hashlib
import io
import struct
import sys
import zlib

# Attempt to import cryptographic primitives
try:
    from Crypto.Cipher import AES
except ImportError:
    print("Fatal Error: Core cryptographic library 'pycryptodome' is missing.", file=sys.stderr)
    print("Please install it by running: pip install pycryptodome", file=sys.stderr)
    sys.exit(1)

from sic2lp.common.errors import SourceReadError

# --- Cryptographic Constants ---
KEY_SIZE = 32   # AES-256 key size in bytes

# Iteration count used by SafeInCloud for the master key (PBKDF2-HMAC-SHA1).
PBKDF2_ITERATIONS = 10000


# --- Binary layout helpers ---
#
# A SafeInCloud .db file is: uint16 magic, uint8 version, then byte arrays
# each prefixed with a uint8 length (salt, iv, salt2, key block), followed by
# the encrypted, zlib-compressed XML payload.

def _read_exact(stream: io.BytesIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("unexpected end of data")
    return data


def _read_array(stream: io.BytesIO) -> bytes:
    (size,) = struct.unpack("<B", _read_exact(stream, 1))
    return _read_exact(stream, size)


def derive_key(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(
        "sha1",
        password.encode("utf-8"),
        salt,
        PBKDF2_ITERATIONS,
        dklen=KEY_SIZE,
    )


def decrypt_database(content: bytes, password: str) -> bytes:
    """Decrypts a SafeInCloud .db file and returns the XML export it holds."""
    try:
        stream = io.BytesIO(content)
        struct.unpack("<HB", _read_exact(stream, 3))  # magic, version
        salt = _read_array(stream)
        iv = _read_array(stream)
        _read_array(stream)  # salt2, only used for the check hash
        key_block = _read_array(stream)

        # The master key unlocks a second, random key for the payload
        block = AES.new(derive_key(password, salt), AES.MODE_CBC, iv).decrypt(key_block)
        inner = io.BytesIO(block)
        iv2 = _read_array(inner)
        key2 = _read_array(inner)

        payload = AES.new(key2, AES.MODE_CBC, iv2).decrypt(stream.read())

        # Trailing CBC padding is left in the stream; the decompressor stops
        # at the end of the deflate data on its own.
        decompressor = zlib.decompressobj()
        return decompressor.decompress(payload) + decompressor.flush()

    except (ValueError, KeyError, struct.error, zlib.error) as e:
        raise SourceReadError(
            "Decryption failed. Please verify your master password and ensure the "
            f"file is a valid SafeInCloud database. ({e})"
        ) from e

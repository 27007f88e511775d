# What it does: Encodes and decodes the loose object format and computes an object's SHA-1 name
# How it does: An object on disk (before compression) is `<kind> <size>\0<payload>`. `encode` builds that byte string and hashes it, `decode` splits it back apart at the first NUL byte
# What data structure it uses: Immutable named tuples; the hash of the bytes is the object's identity, so there is nothing mutable to track

import hashlib
import re
from collections import namedtuple

from .errors import InvalidArgument, MalformedObject

BLOB = 'blob'
TREE = 'tree'
COMMIT = 'commit'
KINDS = (BLOB, TREE, COMMIT)

HASH_HEX_LENGTH = 40
HASH_RAW_LENGTH = 20

_HEX_HASH = re.compile(r'^[0-9a-fA-F]{40}$')

EncodedObject = namedtuple('EncodedObject', ['header', 'data', 'sha1'])


def encode(kind, payload): # Returns EncodedObject(header, data, sha1) where sha1 is the hex SHA-1 of header + payload
    if kind not in KINDS:
        raise InvalidArgument(f"unknown object type '{kind}'")
    header = f'{kind} {len(payload)}\0'.encode()
    data = header + payload
    sha1 = hashlib.sha1(data).hexdigest()
    return EncodedObject(header, data, sha1)


def decode(data): # Returns (kind, payload); raises MalformedObject when the header is missing or inconsistent
    null_byte_index = data.find(b'\0')
    if null_byte_index == -1:
        raise MalformedObject("object has no header terminator")

    header = data[:null_byte_index]
    payload = data[null_byte_index + 1:]

    try:
        kind, size = header.decode('ascii').split(' ', 1)
    except (UnicodeDecodeError, ValueError):
        raise MalformedObject(f"bad object header: {header!r}")

    if not size.isdigit():
        raise MalformedObject(f"bad object size in header: {header!r}")
    if int(size) != len(payload):
        raise MalformedObject(f"object size mismatch: header says {size}, payload is {len(payload)} bytes")

    return kind, payload


def normalize_hash(sha1): # Validates a hex object name and returns it lower-cased
    if not isinstance(sha1, str) or not _HEX_HASH.match(sha1):
        raise InvalidArgument(f"Not a valid object name {sha1}")
    return sha1.lower()


def hash_to_bytes(sha1):
    return bytes.fromhex(normalize_hash(sha1))


def bytes_to_hash(raw):
    if len(raw) != HASH_RAW_LENGTH:
        raise MalformedObject(f"expected a {HASH_RAW_LENGTH}-byte hash, got {len(raw)} bytes")
    return raw.hex()

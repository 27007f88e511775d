# What it does: Compresses and decompresses raw object bytes
# How it does: Uses the zlib container format, the same one git stores loose objects in (not gzip and not raw deflate)

import zlib

from .errors import CorruptObject

DEFAULT_LEVEL = zlib.Z_DEFAULT_COMPRESSION


def compress(data, level=DEFAULT_LEVEL):
    return zlib.compress(data, level)


def decompress(data): # Inverse of compress(); raises CorruptObject for anything that is not a complete zlib stream
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise CorruptObject(f"object file is corrupt: {e}") from e

# What it does: Manages the object database, storing and retrieving blobs, trees and commits by their SHA-1 name
# How it does: It implements a content-addressed storage system. An object named `h` lives at `.git/objects/h[:2]/h[2:]`. `write_object` encodes, compresses and creates that file only if it does not exist yet; `read_object` reverses the process
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed dictionary on disk where the SHA-1 hash is the key)

import logging
import os

from . import compression, objects
from .errors import FileSystemError, ObjectNotFound
from .repository import objects_dir

logger = logging.getLogger(__name__)


def object_path(repo_root, sha1): # Path of the loose object file for `sha1`
    sha1 = objects.normalize_hash(sha1)
    return os.path.join(objects_dir(repo_root), sha1[:2], sha1[2:])


def object_exists(repo_root, sha1):
    return os.path.isfile(object_path(repo_root, sha1))


def write_object(repo_root, kind, payload, write=True, level=compression.DEFAULT_LEVEL): # Hashes content and, when `write` is set, stores it compressed; an existing object file is never overwritten
    encoded = objects.encode(kind, payload)
    if not write:
        return encoded.sha1

    path = object_path(repo_root, encoded.sha1)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"unable to create object directory for {encoded.sha1}: {e}") from e

    try:
        with open(path, 'xb') as f:
            f.write(compression.compress(encoded.data, level))
    except FileExistsError:
        logger.debug("object %s already stored, skipping", encoded.sha1)
        return encoded.sha1
    except OSError as e:
        raise FileSystemError(f"unable to write object {encoded.sha1}: {e}") from e

    logger.debug("wrote %s %s (%d bytes)", kind, encoded.sha1, len(payload))
    return encoded.sha1


def read_object(repo_root, sha1): # Reads an object by its SHA-1 hash and returns its type and content
    path = object_path(repo_root, sha1)
    try:
        with open(path, 'rb') as f:
            compressed_data = f.read()
    except FileNotFoundError:
        raise ObjectNotFound(sha1)
    except OSError as e:
        raise FileSystemError(f"unable to read object {sha1}: {e}") from e

    return objects.decode(compression.decompress(compressed_data))


def read_object_type(repo_root, sha1):
    obj_type, _ = read_object(repo_root, sha1)
    return obj_type


def hash_file(repo_root, path, write=False, level=compression.DEFAULT_LEVEL): # Hashes a file's bytes as a blob, optionally storing it
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise FileSystemError(f"could not open '{path}' for reading: {e}") from e
    return write_object(repo_root, objects.BLOB, content, write=write, level=level)

# What it does: Builds tree objects from a directory on disk and reads tree objects back into entries
# How it does: `build_tree` walks a directory depth-first (post-order): every child is hashed and stored before the parent tree, because the parent's payload embeds the children's hashes. `list_tree` scans a tree payload record by record and looks up each child to report its type
# What data structure it uses: Merkle Tree (each tree object's name depends on the names of everything below it), built with recursion

import logging
import os
import stat
from collections import namedtuple

from . import compression, objects, store
from .errors import FileSystemError, MalformedObject, NotATree

logger = logging.getLogger(__name__)

MODE_FILE = '100644'
MODE_EXECUTABLE = '100755'
MODE_DIRECTORY = '40000'

HIDDEN_PREFIX = '.'

TreeEntry = namedtuple('TreeEntry', ['mode', 'type', 'sha1', 'name'])


def file_mode(st_mode): # Any execute bit makes the file executable
    return MODE_EXECUTABLE if st_mode & 0o111 else MODE_FILE


def tree_entry_bytes(mode, name, sha1): # "<mode> <name>\0" followed by the 20 raw hash bytes
    return f'{mode} '.encode() + os.fsencode(name) + b'\0' + objects.hash_to_bytes(sha1)


def build_tree(repo_root, directory, level=compression.DEFAULT_LEVEL): # Recursively writes `directory` as a tree object and returns its hash. Names starting with "." (including .git) are skipped; siblings are sorted by name
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise FileSystemError(f"cannot read directory '{directory}': {e}") from e

    entries = []
    for name in sorted(names):
        if name.startswith(HIDDEN_PREFIX):
            logger.debug("skipping hidden entry %s", os.path.join(directory, name))
            continue

        path = os.path.join(directory, name)
        try:
            st = os.stat(path)
        except OSError as e:
            raise FileSystemError(f"cannot stat '{path}': {e}") from e

        if stat.S_ISDIR(st.st_mode):
            mode = MODE_DIRECTORY
            sha1 = build_tree(repo_root, path, level=level)
        else:
            mode = file_mode(st.st_mode)
            sha1 = store.hash_file(repo_root, path, write=True, level=level)

        logger.debug("tree entry %s %s %s", mode, sha1, path)
        entries.append(tree_entry_bytes(mode, name, sha1))

    return store.write_object(repo_root, objects.TREE, b''.join(entries), level=level)


def parse_tree(payload): # Yields (mode, name, sha1) for each record in a tree payload, in stored order
    offset = 0
    while offset < len(payload):
        null_byte_index = payload.find(b'\0', offset)
        if null_byte_index == -1:
            raise MalformedObject(f"tree entry at offset {offset} has no name terminator")

        mode, sep, name = payload[offset:null_byte_index].partition(b' ')
        if not sep:
            raise MalformedObject(f"tree entry at offset {offset} has no mode")

        hash_start = null_byte_index + 1
        hash_end = hash_start + objects.HASH_RAW_LENGTH
        if hash_end > len(payload):
            raise MalformedObject(f"tree entry '{os.fsdecode(name)}' is truncated")

        if not mode.isdigit():
            raise MalformedObject(f"tree entry at offset {offset} has a bad mode {mode!r}")

        yield mode.decode('ascii'), os.fsdecode(name), objects.bytes_to_hash(payload[hash_start:hash_end])
        offset = hash_end


def list_tree(repo_root, sha1, names_only=False): # Returns the tree's TreeEntry list (or names) in stored order; each type is read from the child object, not its mode
    obj_type, payload = store.read_object(repo_root, sha1)
    if obj_type != objects.TREE:
        raise NotATree(sha1, obj_type)

    entries = []
    for mode, name, child_sha1 in parse_tree(payload):
        child_type = store.read_object_type(repo_root, child_sha1)
        entries.append(TreeEntry(mode, child_type, child_sha1, name))

    if names_only:
        return [entry.name for entry in entries]
    return entries


def format_tree(entries, names_only=False): # One line per entry, each terminated by a newline
    if names_only:
        lines = [entry if isinstance(entry, str) else entry.name for entry in entries]
    else:
        lines = [f"{entry.mode} {entry.type} {entry.sha1} {entry.name}" for entry in entries]
    return ''.join(f"{line}\n" for line in lines)

# Unit tests for utils/store.py

import pytest
import os
import sys
import zlib

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'plumb-project'))

from utils import store
from utils.errors import CorruptObject, FileSystemError, InvalidArgument, MalformedObject, ObjectNotFound

HELLO_SHA1 = 'ce013625030ba8dba906f756967f9e9ca394464a'


class TestObjectPath:
    # Tests for store.object_path()

    def test_fan_out_layout(self, temp_repo):
        path = store.object_path(temp_repo, HELLO_SHA1)
        assert path == os.path.join(temp_repo, '.git', 'objects', 'ce', HELLO_SHA1[2:])

    def test_rejects_invalid_hash(self, temp_repo):
        with pytest.raises(InvalidArgument):
            store.object_path(temp_repo, '../../etc/passwd')


class TestWriteObject:
    # Tests for store.write_object()

    def test_writes_compressed_object(self, temp_repo):
        sha1 = store.write_object(temp_repo, 'blob', b'hello\n')

        assert sha1 == HELLO_SHA1
        with open(store.object_path(temp_repo, sha1), 'rb') as f:
            assert zlib.decompress(f.read()) == b'blob 6\0hello\n'

    def test_hash_only_does_not_write(self, temp_repo):
        sha1 = store.write_object(temp_repo, 'blob', b'hello\n', write=False)

        assert sha1 == HELLO_SHA1
        assert not store.object_exists(temp_repo, sha1)
        assert not os.path.exists(os.path.join(temp_repo, '.git', 'objects', 'ce'))

    def test_second_write_leaves_object_untouched(self, temp_repo):
        sha1 = store.write_object(temp_repo, 'blob', b'same content')
        path = store.object_path(temp_repo, sha1)
        with open(path, 'rb') as f:
            original = f.read()
        os.utime(path, (1, 1))

        # A different level would produce different bytes if the file were rewritten
        assert store.write_object(temp_repo, 'blob', b'same content', level=0) == sha1
        with open(path, 'rb') as f:
            assert f.read() == original
        assert os.stat(path).st_mtime == 1

    def test_unwritable_objects_dir(self, temp_repo):
        if hasattr(os, 'geteuid') and os.geteuid() == 0:
            pytest.skip("root ignores directory permissions")
        objects_dir = os.path.join(temp_repo, '.git', 'objects')
        os.chmod(objects_dir, 0o500)
        try:
            with pytest.raises(FileSystemError):
                store.write_object(temp_repo, 'blob', b'cannot land')
        finally:
            os.chmod(objects_dir, 0o755)


    def test_fan_out_path_is_a_file(self, temp_repo):
        # A regular file where the "ce" directory should be
        with open(os.path.join(temp_repo, '.git', 'objects', 'ce'), 'wb') as f:
            f.write(b'in the way')

        with pytest.raises(FileSystemError):
            store.write_object(temp_repo, 'blob', b'hello\n')


class TestReadObject:
    # Tests for store.read_object()

    @pytest.mark.parametrize('kind,payload', [
        ('blob', b''),
        ('blob', b'hello\n'),
        ('blob', bytes(range(256))),
        ('tree', b'100644 a.txt\0' + b'\xab' * 20),
    ])
    def test_round_trip(self, temp_repo, kind, payload):
        sha1 = store.write_object(temp_repo, kind, payload)
        assert store.read_object(temp_repo, sha1) == (kind, payload)

    def test_accepts_uppercase_hash(self, temp_repo):
        store.write_object(temp_repo, 'blob', b'hello\n')
        assert store.read_object(temp_repo, HELLO_SHA1.upper()) == ('blob', b'hello\n')

    def test_missing_object(self, temp_repo):
        with pytest.raises(ObjectNotFound):
            store.read_object(temp_repo, HELLO_SHA1)

    def test_missing_object_is_a_file_not_found_error(self, temp_repo):
        with pytest.raises(FileNotFoundError):
            store.read_object(temp_repo, HELLO_SHA1)

    def test_corrupt_object(self, temp_repo):
        path = store.object_path(temp_repo, HELLO_SHA1)
        os.makedirs(os.path.dirname(path))
        with open(path, 'wb') as f:
            f.write(b'garbage')

        with pytest.raises(CorruptObject):
            store.read_object(temp_repo, HELLO_SHA1)

    def test_malformed_object(self, temp_repo):
        path = store.object_path(temp_repo, HELLO_SHA1)
        os.makedirs(os.path.dirname(path))
        with open(path, 'wb') as f:
            f.write(zlib.compress(b'no header here'))

        with pytest.raises(MalformedObject):
            store.read_object(temp_repo, HELLO_SHA1)

    def test_object_path_is_a_directory(self, temp_repo):
        os.makedirs(store.object_path(temp_repo, HELLO_SHA1))

        with pytest.raises(FileSystemError):
            store.read_object(temp_repo, HELLO_SHA1)

    def test_read_object_type(self, temp_repo):
        sha1 = store.write_object(temp_repo, 'tree', b'')
        assert store.read_object_type(temp_repo, sha1) == 'tree'


class TestHashFile:
    # Tests for store.hash_file()

    def test_hashes_file_as_blob(self, temp_repo):
        path = os.path.join(temp_repo, 'hello.txt')
        with open(path, 'wb') as f:
            f.write(b'hello\n')

        assert store.hash_file(temp_repo, path) == HELLO_SHA1
        assert not store.object_exists(temp_repo, HELLO_SHA1)

        assert store.hash_file(temp_repo, path, write=True) == HELLO_SHA1
        assert store.read_object(temp_repo, HELLO_SHA1) == ('blob', b'hello\n')

    def test_missing_file(self, temp_repo):
        with pytest.raises(FileSystemError):
            store.hash_file(temp_repo, os.path.join(temp_repo, 'nope.txt'))

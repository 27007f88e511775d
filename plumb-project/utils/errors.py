# What it does: Defines the error types raised by the object store, the codec and the tree walker
# How it does: Every error derives from `PlumbError` and also from the closest builtin exception, so callers that catch `FileNotFoundError` or `ValueError` keep working
# What data structure it uses: A small class hierarchy


class PlumbError(Exception):
    pass


class ObjectNotFound(PlumbError, FileNotFoundError): # No file at the path derived from the hash
    def __init__(self, sha1):
        super().__init__(f"Not a valid object name {sha1}")
        self.sha1 = sha1


class CorruptObject(PlumbError, ValueError): # The stored bytes are not a zlib stream
    pass


class MalformedObject(PlumbError, ValueError): # Decompressed bytes do not look like "<kind> <size>\0<payload>"
    pass


class NotATree(PlumbError, TypeError):
    def __init__(self, sha1, kind):
        super().__init__(f"not a tree object: {sha1} is a {kind}")
        self.sha1 = sha1
        self.kind = kind


class FileSystemError(PlumbError, OSError):
    pass


class InvalidArgument(PlumbError, ValueError):
    pass

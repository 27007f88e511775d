# The command: plumb hash-object [-w] <path>
# What it does: Computes the object name of a file's contents as a blob, and with -w stores it in the object database
# How it does: It hands the file to `store.hash_file`, which builds the `blob <size>\0` header, hashes header + content with SHA-1 and, when writing, compresses the result into `.git/objects`
# What data structure it uses: Hash Table (the object store), keyed by the SHA-1 hash

import sys
from utils import config, repository, store
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print(repository.NOT_A_REPOSITORY, file=sys.stderr)
        sys.exit(1)

    try:
        level = config.get_compression_level(repo_root)
        sha1 = store.hash_file(repo_root, args.file, write=args.write, level=level)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(sha1)

# The command: plumb cat-file [-p | -t | -s] <hash>
# What it does: Prints the content, type or size of a stored object
# How it does: It reads the object through the object store, which decompresses it and strips the `<kind> <size>\0` header. The payload goes to stdout as raw bytes so binary blobs survive unchanged
# What data structure it uses: Hash Table lookup (hash -> object file)

import sys
from utils import repository, store
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print(repository.NOT_A_REPOSITORY, file=sys.stderr)
        sys.exit(1)

    try:
        obj_type, content = store.read_object(repo_root, args.object)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if args.type:
        print(obj_type)
    elif args.size:
        print(len(content))
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()

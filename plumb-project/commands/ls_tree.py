# The command: plumb ls-tree [--name-only] <hash>
# What it does: Lists the entries of a tree object
# How it does: `tree.list_tree` walks the packed `<mode> <name>\0<20-byte hash>` records in stored order and reads every child object to find its type. Output is either `<mode> <type> <hash> <name>` or just the name, one entry per line
# What data structure it uses: Merkle Tree (one level of it)

import sys
from utils import repository, tree
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print(repository.NOT_A_REPOSITORY, file=sys.stderr)
        sys.exit(1)

    try:
        entries = tree.list_tree(repo_root, args.tree, names_only=args.name_only)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(tree.format_tree(entries, names_only=args.name_only))

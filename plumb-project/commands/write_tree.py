# The command: plumb write-tree
# What it does: Snapshots the working directory into the object database and prints the root tree hash
# How it does: `tree.build_tree` recursively stores every file as a blob and every directory as a tree, starting at the repository root. Hidden entries (including `.git`) are left out
# What data structure it uses: Merkle Tree, built with depth-first recursion

import sys
from utils import config, repository, tree
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print(repository.NOT_A_REPOSITORY, file=sys.stderr)
        sys.exit(1)

    try:
        level = config.get_compression_level(repo_root)
        tree_hash = tree.build_tree(repo_root, repo_root, level=level)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(tree_hash)

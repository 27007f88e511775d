# The command: plumb init [directory]
# What it does: Initializes a new, empty repository by creating the hidden `.git` directory and its internal structure
# How it does: It creates the `objects` and `refs` subdirectories and a `HEAD` file holding the symbolic reference `ref: refs/heads/main`. Running it again only recreates whatever is missing
# What data structure it uses: Tree (the file system directory structure is a tree). It lays the foundation for a Hash Table (the object database)

import sys
from utils import repository
from utils.errors import PlumbError

def run(args):
    try:
        git_dir, reinitialized = repository.init_repository(args.directory)
    except (PlumbError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if reinitialized:
        print(f"Reinitialized existing Git repository in {git_dir}/")
    else:
        print(f"Initialized empty Git repository in {git_dir}/")

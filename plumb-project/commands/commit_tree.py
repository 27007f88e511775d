# The command: plumb commit-tree
# What it does: Reserved. Commit objects can be read like any other object, but creating them is not supported

import sys

def run(args):
    print("fatal: commit-tree is not supported", file=sys.stderr)
    sys.exit(1)

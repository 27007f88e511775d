import argparse
import sys

from commands import (
    init, cat_file, hash_object, ls_tree, write_tree, commit_tree, config
)
from utils.log import configure_logging

# The main entry point for the Plumb object store
def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog="plumb", description="Plumb: git's object store plumbing.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository.")
    init_parser.add_argument("directory", nargs="?", default=".", help="Where to create the repository.")
    init_parser.set_defaults(func=init.run)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Print the content, type or size of an object.")
    cat_file_mode = cat_file_parser.add_mutually_exclusive_group()
    cat_file_mode.add_argument("-p", dest="pretty", action="store_true", help="Print the object's content (default).")
    cat_file_mode.add_argument("-t", dest="type", action="store_true", help="Print the object's type.")
    cat_file_mode.add_argument("-s", dest="size", action="store_true", help="Print the object's size.")
    cat_file_parser.add_argument("object", help="The object hash.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: hash-object
    hash_object_parser = subparsers.add_parser("hash-object", help="Compute a file's object hash.")
    hash_object_parser.add_argument("-w", dest="write", action="store_true", help="Write the object into the object database.")
    hash_object_parser.add_argument("file", help="The file to hash.")
    hash_object_parser.set_defaults(func=hash_object.run)

    # Command: ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree", help="List the contents of a tree object.")
    ls_tree_parser.add_argument("--name-only", action="store_true", help="List only file names.")
    ls_tree_parser.add_argument("tree", help="The tree hash.")
    ls_tree_parser.set_defaults(func=ls_tree.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Write the working directory as a tree object.")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: commit-tree
    commit_tree_parser = subparsers.add_parser("commit-tree", help="Create a commit object (not supported).")
    commit_tree_parser.add_argument("rest", nargs=argparse.REMAINDER)
    commit_tree_parser.set_defaults(func=commit_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Get or set a repository option.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.compression).")
    config_parser.add_argument("value", nargs="?", help="The value to set.")
    config_parser.set_defaults(func=config.run)

    return parser

def main(argv=None):
    # Parse the arguments
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    # Run the function attached to the command
    args.func(args)

if __name__ == "__main__":
    main(sys.argv[1:])

# What it does: Knows the on-disk layout of a repository: where the `.git` directory, the object database, refs and HEAD live, how to create them, and how to find the repository root
# How it does: `init_repository` creates `objects`, `refs` and the static `HEAD` pointer. `find_repo_root` walks up the directory tree until it sees a `.git` directory
# What data structure it uses: Uses linear recursion to find the repo root. The layout itself is a fixed tree of directories

import logging
import os

from .errors import FileSystemError

logger = logging.getLogger(__name__)

GIT_DIR = '.git'
HEAD_REF = 'ref: refs/heads/main\n'
NOT_A_REPOSITORY = "fatal: not a git repository (or any of the parent directories): .git"


def git_path(repo_root, *parts): # Joins a path inside the .git directory
    return os.path.join(repo_root, GIT_DIR, *parts)


def objects_dir(repo_root):
    return git_path(repo_root, 'objects')


def find_repo_root(path='.'): # Recursively searches for the .git directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, GIT_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def init_repository(path='.'): # Creates the .git skeleton (objects, refs, HEAD) and returns (git_dir, reinitialized); an existing HEAD is left alone
    repo_root = os.path.abspath(path)
    git_dir = git_path(repo_root)
    reinitialized = os.path.isdir(git_dir)

    try:
        os.makedirs(objects_dir(repo_root), exist_ok=True)
        os.makedirs(git_path(repo_root, 'refs'), exist_ok=True)

        head_path = git_path(repo_root, 'HEAD')
        if not os.path.exists(head_path):
            with open(head_path, 'w', newline='\n') as f:
                f.write(HEAD_REF)
    except OSError as e:
        raise FileSystemError(f"cannot initialize repository in {repo_root}: {e}") from e

    logger.debug("repository skeleton ready in %s (reinitialized=%s)", git_dir, reinitialized)
    return git_dir, reinitialized


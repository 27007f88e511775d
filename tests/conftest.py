# Shared pytest fixtures for Plumb tests

import pytest
import os
import sys
import shutil
import tempfile

# Add plumb-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'plumb-project'))

from utils import repository


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized repository in a temporary directory and changes into it
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    git_dir = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(git_dir, 'objects'))
    os.makedirs(os.path.join(git_dir, 'refs'))
    with open(os.path.join(git_dir, 'HEAD'), 'w') as f:
        f.write(repository.HEAD_REF)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def repo_with_tree(temp_repo):
    # Creates a small working directory:
    #   a.txt, run.sh (executable), .hidden, b/c.txt, b/d/e.txt
    def write(rel_path, content, mode=None):
        path = os.path.join(temp_repo, rel_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(content)
        if mode is not None:
            os.chmod(path, mode)

    write('a.txt', b'alpha\n')
    write('run.sh', b'#!/bin/sh\necho hi\n', 0o755)
    write('.hidden', b'secret\n')
    write(os.path.join('b', 'c.txt'), b'charlie\n')
    write(os.path.join('b', 'd', 'e.txt'), b'echo\n')
    return temp_repo


@pytest.fixture
def run_cli(capsysbinary):
    # Runs the plumb entry point with argv and returns (exit_code, stdout_bytes, stderr_text)
    import plumb

    def run(*argv):
        exit_code = 0
        try:
            plumb.main(list(argv))
        except SystemExit as e:
            exit_code = e.code if isinstance(e.code, int) else 1
        out, err = capsysbinary.readouterr()
        return exit_code, out, err.decode()

    return run

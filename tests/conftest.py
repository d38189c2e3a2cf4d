# Shared pytest fixtures for Sprig tests

import pytest
import os
import sys
import shutil
import tempfile

# Add sprig-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'sprig-project'))

from commands import add, commit, rm
from utils.repository import Repository


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
def repo(temp_dir):
    # An initialized repository in a temporary directory, with cwd set to its root
    os.chdir(temp_dir)
    return Repository.init(temp_dir)


def write_file(repo_root, name, content):
    if isinstance(content, str):
        content = content.encode()
    with open(os.path.join(repo_root, name), 'wb') as f:
        f.write(content)


def read_file(repo_root, name):
    with open(os.path.join(repo_root, name), 'rb') as f:
        return f.read()


@pytest.fixture
def make_commit():
    # Writes the given files, stages them (plus removals) and commits
    def _make_commit(repo, files, message, removed=()):
        for name, content in files.items():
            write_file(repo.root, name, content)
            add.do_add(repo, name)
        for name in removed:
            rm.do_remove(repo, name)
        return commit.do_commit(repo, message)
    return _make_commit

# The command: sprig init
# What it does: Initializes a new repository by creating the hidden `.sprig` directory and its internal structure
# How it does: It creates the `objects` and `refs/heads` subdirectories, stores the fixed initial commit, points the `master` branch at it and writes `HEAD` as a symbolic reference to `master`
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Directed Acyclic Graph (the commit history)

import os

from utils.repository import Repository


def do_init(path='.'):
    return Repository.init(path)


def run(args):
    repo = do_init(os.getcwd())
    print(f"Initialized empty Sprig repository in {repo.sprig_dir}/")

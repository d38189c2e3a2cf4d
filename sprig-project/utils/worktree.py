# What it does: Wraps the raw file I/O the core needs on the working directory, and syncs the working directory to a commit snapshot
# How it does: WorkingTree is the only place that touches user files. materialize() first checks that no untracked file would be clobbered, then deletes files that leave tracking and writes every file of the target snapshot
# What data structure it uses: Sets (tracked vs. untracked names) and the commit's filename -> hash dictionary

import os

from loguru import logger

from utils import errors, objects

SPRIG_DIR = '.sprig'


class WorkingTree:
    """The flat set of regular files in the repository root."""

    def __init__(self, root):
        self.root = root

    def _path(self, name):
        return os.path.join(self.root, name)

    def exists(self, name):
        return os.path.isfile(self._path(name))

    def read(self, name): # Returns the file's bytes, or None if it does not exist
        if not self.exists(name):
            return None
        with open(self._path(name), 'rb') as f:
            return f.read()

    def write(self, name, content):
        with open(self._path(name), 'wb') as f:
            f.write(content)

    def delete(self, name):
        if self.exists(name):
            os.remove(self._path(name))

    def list_files(self):
        return sorted(
            name for name in os.listdir(self.root)
            if name != SPRIG_DIR and os.path.isfile(self._path(name))
        )


def untracked_files(repo):
    """Working files neither tracked by HEAD nor staged for addition."""
    head_tree = repo.head_commit().tree
    return [
        name for name in repo.worktree.list_files()
        if name not in head_tree and name not in repo.stage
    ]


def check_untracked(repo, target_tree): # Fails if writing target_tree would overwrite an untracked file with different content
    for name in untracked_files(repo):
        if name not in target_tree:
            continue
        content = repo.worktree.read(name)
        if objects.hash_content(content) != target_tree[name]:
            raise errors.UntrackedFileWouldBeOverwritten()


def write_tree(repo, target_tree, tracked):
    """
    Make the working directory match target_tree.

    Files in `tracked` that the target does not contain are deleted;
    untracked files are left alone.
    """
    for name in sorted(tracked):
        if name not in target_tree:
            repo.worktree.delete(name)
    for name in sorted(target_tree):
        repo.worktree.write(name, repo.objects.get(target_tree[name]))


def materialize(repo, commit):
    """Checks out every file of `commit` and clears the stage."""
    check_untracked(repo, commit.tree)
    tracked = set(repo.head_commit().tree) | set(repo.stage)
    write_tree(repo, commit.tree, tracked)
    repo.clear_stage()
    logger.debug(f"Materialized {commit.digest[:7]} ({len(commit.tree)} files)")

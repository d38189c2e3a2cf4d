# What it does: Provides the repository context every command works on: finding the repo root, bootstrapping a new repository, and loading/persisting the mutable state
# How it does: Repository.open() reads HEAD, the stage and the removed set into memory and wires up the object store, ref store and working tree. Commands mutate the in-memory state and call persist() to write the stage and removed set back
# What data structure it uses: Uses recursion to find the repo root, a Dictionary for the stage and a Set for the removed files

import os

from loguru import logger

from utils import errors, index as index_utils, objects
from utils.objects import ObjectStore
from utils.refs import RefStore
from utils.worktree import SPRIG_DIR, WorkingTree

DEFAULT_BRANCH = 'master'


def find_repo_root(path='.'): # Recursively searches for the .sprig directory to find the repository root
    path = os.path.abspath(path)
    sprig_dir = os.path.join(path, SPRIG_DIR)
    if os.path.isdir(sprig_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


class Repository:
    """
    In-memory view of one repository for the duration of a command.

    Attributes:
        root: Absolute path of the working directory
        objects: Blob and commit storage
        refs: Branch pointers and HEAD
        stage: filename -> blob digest of pending additions
        removed: filenames pending removal
        worktree: File access to the working directory
    """

    def __init__(self, root, stage=None, removed=None):
        self.root = root
        self.sprig_dir = os.path.join(root, SPRIG_DIR)
        self.objects = ObjectStore(os.path.join(self.sprig_dir, 'objects'))
        self.refs = RefStore(self.sprig_dir)
        self.worktree = WorkingTree(root)
        self.stage = stage if stage is not None else {}
        self.removed = removed if removed is not None else set()

    @classmethod
    def init(cls, root='.'):
        """Creates the .sprig layout and the shared root commit on master."""
        root = os.path.abspath(root)
        sprig_dir = os.path.join(root, SPRIG_DIR)
        if os.path.exists(sprig_dir):
            raise errors.RepositoryExists()

        os.makedirs(os.path.join(sprig_dir, 'objects'))
        os.makedirs(os.path.join(sprig_dir, 'refs', 'heads'))

        repo = cls(root)
        initial_digest = repo.objects.put_commit(objects.make_initial_commit())
        repo.refs.advance(DEFAULT_BRANCH, initial_digest)
        repo.refs.set_current_branch(DEFAULT_BRANCH)
        repo.persist()
        logger.info(f"Initialized empty Sprig repository in {sprig_dir}")
        return repo

    @classmethod
    def open(cls, path='.'):
        root = find_repo_root(path)
        if not root:
            raise errors.NotARepository()
        return cls(
            root,
            stage=index_utils.read_index(root),
            removed=index_utils.read_removed(root),
        )

    def persist(self):
        index_utils.write_index(self.root, self.stage)
        index_utils.write_removed(self.root, self.removed)

    def current_branch(self):
        return self.refs.current_branch()

    def head_digest(self):
        return self.refs.head_commit()

    def head_commit(self):
        return self.objects.get_commit(self.head_digest())

    def has_staged_changes(self):
        return bool(self.stage) or bool(self.removed)

    def clear_stage(self):
        self.stage.clear()
        self.removed.clear()

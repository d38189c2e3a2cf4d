# What it does: Manages branch pointers and the HEAD pointer-to-a-branch
# How it does: Each branch is a file in refs/heads holding one commit digest. HEAD holds a symbolic "ref: refs/heads/<name>" line naming the current branch
# What data structure it uses: Map / Dictionary (conceptually, the refs/heads directory maps branch names to commit hashes), and a pointer (HEAD) into that map

import os

from loguru import logger

from utils import errors


class RefStore:

    def __init__(self, sprig_dir):
        self.sprig_dir = sprig_dir
        self.heads_dir = os.path.join(sprig_dir, 'refs', 'heads')
        self.head_path = os.path.join(sprig_dir, 'HEAD')

    def _branch_path(self, name):
        return os.path.join(self.heads_dir, name)

    def exists(self, name):
        return bool(name) and os.path.isfile(self._branch_path(name))

    def branches(self): # Lists all branch names, sorted
        if not os.path.isdir(self.heads_dir):
            return []
        return sorted(os.listdir(self.heads_dir))

    def get(self, name): # Retrieves the commit digest a branch points to
        if not self.exists(name):
            raise errors.NoSuchBranch()
        with open(self._branch_path(name), 'r') as f:
            return f.read().strip()

    def current_branch(self):
        with open(self.head_path, 'r') as f:
            head_content = f.read().strip()
        if not head_content.startswith('ref: refs/heads/'):
            raise errors.CorruptObject(f"Malformed HEAD: {head_content}")
        return head_content[len('ref: refs/heads/'):]

    def set_current_branch(self, name):
        if not self.exists(name):
            raise errors.NoSuchBranch()
        with open(self.head_path, 'w') as f:
            f.write(f"ref: refs/heads/{name}\n")
        logger.info(f"HEAD now on branch {name}")

    def head_commit(self):
        return self.get(self.current_branch())

    def advance(self, name, digest): # Overwrites the pointer, creating it if needed
        os.makedirs(self.heads_dir, exist_ok=True)
        with open(self._branch_path(name), 'w') as f:
            f.write(f"{digest}\n")
        logger.debug(f"Branch {name} -> {digest[:7]}")

    def create_branch(self, name, digest):
        if self.exists(name):
            raise errors.BranchExists()
        self.advance(name, digest)
        logger.info(f"Created branch {name} at {digest[:7]}")

    def delete_branch(self, name):
        if name == self.current_branch():
            raise errors.CannotDeleteCurrent()
        if not self.exists(name):
            raise errors.NoSuchBranch()
        os.remove(self._branch_path(name))
        logger.info(f"Deleted branch {name}")

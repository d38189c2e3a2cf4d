# What it does: Implements the staging rules behind `sprig add` and `sprig rm`
# How it does: Compares the working file's hash against the HEAD snapshot. Content identical to HEAD un-stages the file; anything else is stored as a blob and recorded in the stage. Removal drops the stage entry and marks HEAD-tracked files as removed
# What data structure it uses: Dictionary (stage), Set (removed files), and the HEAD commit's filename -> hash map for O(1) lookups

from loguru import logger

from utils import errors, objects


def is_tracked_and_unmodified(repo, filename, content): # True if HEAD tracks filename and the working copy is absent or identical to HEAD's
    head_tree = repo.head_commit().tree
    if filename not in head_tree:
        return False
    if content is None:
        return True
    return objects.hash_content(content) == head_tree[filename]


def add(repo, filename, content):
    if is_tracked_and_unmodified(repo, filename, content):
        # Staging exactly what HEAD has is a no-op that cancels pending changes
        repo.removed.discard(filename)
        repo.stage.pop(filename, None)
        logger.debug(f"{filename} matches HEAD; cleared pending changes")
        return None

    digest = repo.objects.put(content)
    repo.stage[filename] = digest
    repo.removed.discard(filename)
    logger.debug(f"Staged {filename} as {digest[:7]}")
    return digest


def remove(repo, filename):
    head_tree = repo.head_commit().tree
    tracked = filename in head_tree and filename not in repo.removed
    if filename not in repo.stage and not tracked:
        raise errors.NothingToRemove()

    repo.stage.pop(filename, None)
    if tracked:
        repo.removed.add(filename)
        repo.worktree.delete(filename)
        logger.debug(f"Marked {filename} for removal")

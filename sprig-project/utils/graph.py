# What it does: Answers history questions over the commit DAG: the first-parent history of a commit, its ancestor set, and the split point of two branches
# How it does: Walks parent links only. Second (merge) parents are never followed, so the split point is the first commit on B's first-parent chain that is also on A's
# What data structure it uses: Graph Traversal over the Directed Acyclic Graph (DAG) formed by the commits, and a Set for O(1) membership checks

from utils import errors


def first_parent_history(store, digest): # Yields (digest, commit) from digest back to the root, following first parents
    while digest:
        commit = store.get_commit(digest)
        yield digest, commit
        digest = commit.parent


def ancestors(store, digest):
    """All commits on the first-parent chain of digest, itself included."""
    return {d for d, _ in first_parent_history(store, digest)}


def find_split_point(store, tip_a, tip_b):
    """
    Returns the split point used by merge.

    This is not a true lowest common ancestor: with more than one earlier
    merge in the history it can return an older common ancestor.
    """
    seen = ancestors(store, tip_a)
    for digest, _ in first_parent_history(store, tip_b):
        if digest in seen:
            return digest
    raise errors.NoCommonAncestor()

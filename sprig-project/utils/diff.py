# What it does: Provides helper functions for comparing repository states and for reconciling three states in a three-way merge
# How it does: compare_states diffs two {path: hash} maps. merge_entry applies the merge rules to one file's (split, current, other) hashes, and merge_trees runs it over every file, building conflict files for the ones both sides changed
# What data structure it uses: Dictionary (for states), Set (for efficient O(N) path comparisons)

from collections import namedtuple

CONFLICT_START = b'<<<<<<< HEAD\n'
CONFLICT_SEPARATOR = b'=======\n'
CONFLICT_END = b'>>>>>>>\n'

KEEP_CURRENT = 'keep'
TAKE_OTHER = 'take'
DELETE = 'delete'
ABSENT = 'absent'
CONFLICT = 'conflict'

MergeResult = namedtuple('MergeResult', ['tree', 'conflicts', 'deleted'])


def compare_states(state1, state2): # Compares two states represented as {path: hash} dictionaries

    paths1 = set(state1.keys())
    paths2 = set(state2.keys())

    added = sorted(list(paths2 - paths1))
    deleted = sorted(list(paths1 - paths2))

    modified = []
    for path in sorted(list(paths1 & paths2)):
        if state1[path] != state2[path]:
            modified.append(path)

    return {'added': added, 'deleted': deleted, 'modified': modified}


def merge_entry(split, current, other): # Decides one file's fate from its hash in the split point, current and other commit (None = absent)
    if split is not None:
        if current is not None and other is not None:
            if current == other:
                return KEEP_CURRENT
            if current == split:
                return TAKE_OTHER
            if other == split:
                return KEEP_CURRENT
        elif current is not None:
            if current == split:
                return DELETE
        elif other is not None:
            if other == split:
                return ABSENT
        else:
            # Deleted on both sides
            return ABSENT
    else:
        if other is None:
            return KEEP_CURRENT
        if current is None:
            return TAKE_OTHER
        if current == other:
            return KEEP_CURRENT
    return CONFLICT


def conflict_content(current_content, other_content): # Builds the marked-up file for a conflict; a missing side contributes nothing
    return b''.join([
        CONFLICT_START,
        current_content or b'',
        CONFLICT_SEPARATOR,
        other_content or b'',
        CONFLICT_END,
    ])


def merge_trees(split_tree, current_tree, other_tree, read_blob, write_blob):
    """
    Three-way merges the file trees of two commits against their split point.

    read_blob(digest) -> bytes and write_blob(bytes) -> digest give access to
    the object store, so this function never touches the working directory.
    Returns a MergeResult whose `tree` is the merged snapshot, `conflicts`
    the names written with conflict markers, and `deleted` the names
    removed.
    """
    tree = {}
    conflicts = []
    deleted = []

    for name in sorted(set(split_tree) | set(current_tree) | set(other_tree)):
        split = split_tree.get(name)
        current = current_tree.get(name)
        other = other_tree.get(name)

        action = merge_entry(split, current, other)
        if action == KEEP_CURRENT:
            tree[name] = current
        elif action == TAKE_OTHER:
            tree[name] = other
        elif action == DELETE:
            deleted.append(name)
        elif action == CONFLICT:
            content = conflict_content(
                read_blob(current) if current else None,
                read_blob(other) if other else None,
            )
            tree[name] = write_blob(content)
            conflicts.append(name)

    return MergeResult(tree, conflicts, deleted)

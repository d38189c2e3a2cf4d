# What it does: Provides centralized read/write operations for the .sprig/index (staged additions) and .sprig/removed (staged removals) files
# How it does: The index holds one "hash path" line per staged file and the removed file one path per line, both written in sorted order
# What data structure it uses: Dictionary (mapping file names to blob hashes) and Set (file names marked for removal)

import os


def _sprig_path(repo_root, name):
    return os.path.join(repo_root, '.sprig', name)


def read_index(repo_root):
    """
    Reads the index file and returns a dictionary {path: hash}.
    A missing index is an empty stage.
    """
    index_path = _sprig_path(repo_root, 'index')
    index_files = {}
    if os.path.exists(index_path):
        with open(index_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.rstrip('\n')
                if not line:
                    continue
                hash_val, path = line.split(' ', 1)
                index_files[path] = hash_val
    return index_files


def write_index(repo_root, index_dict):
    index_path = _sprig_path(repo_root, 'index')
    os.makedirs(os.path.dirname(index_path), exist_ok=True)

    with open(index_path, 'w', encoding='utf-8') as f:
        for path in sorted(index_dict.keys()):
            f.write(f"{index_dict[path]} {path}\n")


def read_removed(repo_root):
    removed_path = _sprig_path(repo_root, 'removed')
    if not os.path.exists(removed_path):
        return set()
    with open(removed_path, 'r', encoding='utf-8') as f:
        return {line.rstrip('\n') for line in f if line.rstrip('\n')}


def write_removed(repo_root, removed):
    removed_path = _sprig_path(repo_root, 'removed')
    os.makedirs(os.path.dirname(removed_path), exist_ok=True)

    with open(removed_path, 'w', encoding='utf-8') as f:
        for path in sorted(removed):
            f.write(f"{path}\n")

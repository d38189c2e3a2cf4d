# The command: sprig status
# What it does: Provides a summary of the repository state: branches, staged and removed files, unstaged modifications and untracked files
# How it does: It builds the state the next commit would record (HEAD snapshot + staged additions - removals) and compares it with the hashes of the working files. Files that differ or vanished are unstaged modifications; files the next commit would not know about are untracked
# What data structure it uses: Hash Table / Dictionary (to represent the states for efficient O(1) average time complexity lookups), Sets (for efficient comparison of file lists to find additions/deletions in O(N) time)

from utils import objects, diff as diff_utils
from utils.repository import Repository


def do_status(repo): # Returns the status sections as {section title: sorted lines}
    current_branch = repo.current_branch()
    branches = [
        f"*{name}" if name == current_branch else name
        for name in repo.refs.branches()
    ]

    expected = dict(repo.head_commit().tree)
    expected.update(repo.stage)
    for filename in repo.removed:
        expected.pop(filename, None)

    working_files = {
        name: objects.hash_content(repo.worktree.read(name))
        for name in repo.worktree.list_files()
    }
    changes = diff_utils.compare_states(expected, working_files)
    modifications = sorted(
        [f"{name} (modified)" for name in changes['modified']]
        + [f"{name} (deleted)" for name in changes['deleted']]
    )

    return {
        'Branches': branches,
        'Staged Files': sorted(repo.stage),
        'Removed Files': sorted(repo.removed),
        'Modifications Not Staged For Commit': modifications,
        'Untracked Files': changes['added'],
    }


def format_status(sections):
    lines = []
    for title, entries in sections.items():
        lines.append(f"=== {title} ===")
        lines.extend(entries)
        lines.append('')
    return '\n'.join(lines)


def run(args):
    repo = Repository.open()
    print(format_status(do_status(repo)))

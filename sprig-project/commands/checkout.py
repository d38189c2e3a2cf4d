# The command: sprig checkout <branch-name> | sprig checkout [<commit-id>] -- <file>
# What it does: Switches branches, updating the working directory to the branch's snapshot, OR restores one file from a commit (HEAD by default)
# How it does:
#   - <branch-name>: Validates the branch, refuses to clobber untracked files, writes the branch's snapshot into the working directory, points HEAD at the branch and clears the stage.
#   - -- <file>: Resolves the (possibly abbreviated) commit id, looks the file up in that commit's snapshot and overwrites the working copy. The stage is not touched.
# What data structure it uses: Dictionary (commit snapshots), Hash Table (object store lookup)

from loguru import logger

from utils import errors, worktree
from utils.repository import Repository


def do_checkout_branch(repo, name):
    if not repo.refs.exists(name):
        raise errors.NoSuchBranch("No such branch exists.")
    if name == repo.current_branch():
        raise errors.AlreadyOnBranch()

    target = repo.objects.get_commit(repo.refs.get(name))
    worktree.materialize(repo, target)
    repo.refs.set_current_branch(name)
    logger.info(f"Switched to branch '{name}'")


def do_checkout_file(repo, filename, commit_ref=None):
    if commit_ref is None:
        commit_hash = repo.head_digest()
    else:
        commit_hash = repo.objects.resolve_commit(commit_ref)
    tree = repo.objects.get_commit(commit_hash).tree
    if filename not in tree:
        raise errors.FileDoesNotExistInCommit()
    repo.worktree.write(filename, repo.objects.get(tree[filename]))


def run(args):
    repo = Repository.open()
    targets = args.targets

    if len(targets) == 1:
        do_checkout_branch(repo, targets[0])
        repo.persist()
    elif len(targets) == 2 and targets[0] == '--':
        do_checkout_file(repo, targets[1])
    elif len(targets) == 3 and targets[1] == '--':
        do_checkout_file(repo, targets[2], commit_ref=targets[0])
    else:
        raise errors.SprigError("Incorrect operands.")

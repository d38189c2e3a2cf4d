# The command: sprig reset <commit-id>
# What it does: Moves the current branch to an arbitrary commit and makes the working directory match it
# How it does: Resolves the (possibly abbreviated) commit id, checks that no untracked file would be overwritten, removes files tracked now but absent from the target, writes every target file, advances the branch and clears the stage
# What data structure it uses: Dictionary (commit snapshots), Sets (tracked file names)

from loguru import logger

from utils import worktree
from utils.repository import Repository


def do_reset(repo, commit_ref):
    commit_hash = repo.objects.resolve_commit(commit_ref)
    target = repo.objects.get_commit(commit_hash)
    worktree.materialize(repo, target)
    repo.refs.advance(repo.current_branch(), commit_hash)
    logger.info(f"Reset {repo.current_branch()} to {commit_hash[:7]}")
    return commit_hash


def run(args):
    repo = Repository.open()
    do_reset(repo, args.commit_id)
    repo.persist()

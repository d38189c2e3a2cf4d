# The command: sprig commit <message>
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the currently staged changes
# How it does: It starts from the parent commit's complete file map, folds in the staged additions and drops the files marked for removal. The resulting snapshot, message, timestamp and parent are stored as a commit object, the current branch is advanced to it and the stage is emptied
# What data structure it uses: Hash Table / Dictionary (the snapshot and the underlying object store), Directed Acyclic Graph (DAG) (as each commit links to its parents, forming the history graph)

from datetime import datetime, timezone

from loguru import logger

from utils import errors
from utils.objects import Commit
from utils.repository import Repository


def now(): # Current UTC time in the format commits store
    return datetime.now(timezone.utc).isoformat()


def create_commit(repo, message, tree, second_parent=None): # Creates a commit object on top of HEAD and advances the current branch
    parent = repo.head_digest()
    new_commit = Commit(
        message=message,
        timestamp=now(),
        parent=parent,
        second_parent=second_parent,
        tree=tree,
    )
    commit_hash = repo.objects.put_commit(new_commit)
    current_branch = repo.current_branch()
    repo.refs.advance(current_branch, commit_hash)
    repo.clear_stage()
    logger.info(f"[{current_branch} {commit_hash[:7]}] {message.splitlines()[0]}")
    return commit_hash


def do_commit(repo, message):
    if not message:
        raise errors.EmptyCommitMessage()
    if not repo.has_staged_changes():
        raise errors.NothingToCommit()

    tree = dict(repo.head_commit().tree)
    tree.update(repo.stage)
    for filename in repo.removed:
        tree.pop(filename, None)

    return create_commit(repo, message, tree)


def run(args):
    repo = Repository.open()
    do_commit(repo, args.message)
    repo.persist()

# The command: sprig add <file>
# What it does: Stages the current content of a working file for the next commit
# How it does: It reads the file's bytes and hands them to the staging rules: content identical to HEAD cancels any pending change, anything else is stored as a blob and recorded in the index
# What data structure it uses: Hash Table / Dictionary (the index held in memory by the repository context)

from utils import errors, staging
from utils.repository import Repository


def do_add(repo, filename):
    content = repo.worktree.read(filename)
    if content is None:
        raise errors.FileDoesNotExist()
    return staging.add(repo, filename, content)


def run(args):
    repo = Repository.open()
    for filename in args.files:
        do_add(repo, filename)
    repo.persist()

# The command: sprig branch <branch-name> | sprig rm-branch <branch-name>
# What it does: Creates a new branch pointer at the current commit, or deletes a branch pointer
# How it does: Creating writes the HEAD commit hash to a new file in `.sprig/refs/heads`. Deleting removes that file; the commits it pointed to stay in the object store
# What data structure it uses: Map / Dictionary (conceptually, the `refs/heads` directory maps branch names to commit hashes)

from utils.repository import Repository


def do_branch(repo, name):
    repo.refs.create_branch(name, repo.head_digest())


def do_remove_branch(repo, name):
    repo.refs.delete_branch(name)


def run(args):
    repo = Repository.open()
    do_branch(repo, args.name)


def run_remove(args):
    repo = Repository.open()
    do_remove_branch(repo, args.name)

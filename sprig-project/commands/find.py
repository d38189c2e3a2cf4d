# The command: sprig find <commit-message>
# What it does: Prints the hash of every commit whose message is exactly the given message
# How it does: Scans all commit objects in the store and compares messages
# What data structure it uses: Linear scan over the Hash Table (object store)

from utils import errors
from utils.repository import Repository


def do_find(repo, message):
    found = [c.digest for c in repo.objects.iter_commits() if c.message == message]
    if not found:
        raise errors.NoCommitWithMessage()
    return found


def run(args):
    repo = Repository.open()
    for commit_hash in do_find(repo, args.message):
        print(commit_hash)

# The command: sprig rm <file>
# What it does: Unstages a file and, if HEAD tracks it, marks it for removal and deletes it from the working directory
# How it does: Delegates to the staging rules, then writes the index and removed set back
# What data structure it uses: Hash Table / Dictionary (index) and Set (removed files)

from utils import staging
from utils.repository import Repository


def do_remove(repo, filename):
    staging.remove(repo, filename)


def run(args):
    repo = Repository.open()
    do_remove(repo, args.file)
    repo.persist()

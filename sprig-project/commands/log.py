# The command: sprig log | sprig global-log
# What it does: Displays the commit history. `log` walks from HEAD back to the initial commit along first parents; `global-log` lists every commit ever made, in object-store order
# How it does: `log` follows the parent link of each commit until it reaches the root. `global-log` scans the object store for commit objects. Each commit is rendered as a block with its hash, merge parents, date and message
# What data structure it uses: Graph Traversal (a linear walk up the first-parent chain) on the Directed Acyclic Graph (DAG) formed by the commits

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

from utils import config as config_utils, graph
from utils.repository import Repository

DATE_FORMAT = '%a %b %d %H:%M:%S %Y %z'


def _zone(name):
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown time zone '{name}', showing dates in UTC")
        return timezone.utc


def format_commit(commit_hash, commit, tz):
    lines = ['===', f'commit {commit_hash}']
    if commit.is_merge:
        lines.append(f'Merge: {commit.parent[:7]} {commit.second_parent[:7]}')
    when = datetime.fromisoformat(commit.timestamp).astimezone(tz)
    lines.append(f'Date: {when.strftime(DATE_FORMAT)}')
    lines.append(commit.message)
    lines.append('')
    return '\n'.join(lines)


def do_log(repo):
    tz = _zone(config_utils.get_timezone(repo.root))
    return [
        format_commit(commit_hash, c, tz)
        for commit_hash, c in graph.first_parent_history(repo.objects, repo.head_digest())
    ]


def do_global_log(repo):
    tz = _zone(config_utils.get_timezone(repo.root))
    return [format_commit(c.digest, c, tz) for c in repo.objects.iter_commits()]


def run(args):
    repo = Repository.open()
    for entry in do_log(repo):
        print(entry)


def run_global(args):
    repo = Repository.open()
    for entry in do_global_log(repo):
        print(entry)

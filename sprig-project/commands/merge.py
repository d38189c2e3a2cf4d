# The command: sprig merge <branch-name>
# What it does: Performs a three-way merge between the current branch, the target branch, and their split point
# How it does: It validates the preconditions, finds the split point, short-circuits when one branch already contains the other, and otherwise reconciles every file with the three-way rules. Conflicting files are written with conflict markers and the merge is still committed, with the merged branch as second parent
# What data structure it uses: DAG (for finding the split point), Hash Tables (for comparing the three snapshots)

from collections import namedtuple

from loguru import logger

from commands import commit
from utils import errors, graph, worktree, diff as diff_utils
from utils.repository import Repository

ALREADY_MERGED = 'ancestor'
FAST_FORWARD = 'fast-forward'
MERGED = 'merged'

MergeOutcome = namedtuple('MergeOutcome', ['status', 'commit_hash', 'conflicts'])


def _check_preconditions(repo, branch_name):
    if repo.has_staged_changes():
        raise errors.UncommittedChanges()
    if not repo.refs.exists(branch_name):
        raise errors.NoSuchBranch()
    if branch_name == repo.current_branch():
        raise errors.SelfMerge()


def do_merge(repo, branch_name):
    _check_preconditions(repo, branch_name)

    current_branch = repo.current_branch()
    head_commit_hash = repo.head_digest()
    merge_commit_hash = repo.refs.get(branch_name)
    split_hash = graph.find_split_point(repo.objects, head_commit_hash, merge_commit_hash)

    if split_hash == merge_commit_hash:
        return MergeOutcome(ALREADY_MERGED, head_commit_hash, [])

    other = repo.objects.get_commit(merge_commit_hash)
    if split_hash == head_commit_hash:
        worktree.materialize(repo, other)
        repo.refs.advance(current_branch, merge_commit_hash)
        logger.info(f"Fast-forwarded {current_branch} to {merge_commit_hash[:7]}")
        return MergeOutcome(FAST_FORWARD, merge_commit_hash, [])

    current = repo.objects.get_commit(head_commit_hash)
    split = repo.objects.get_commit(split_hash)
    result = diff_utils.merge_trees(
        split.tree, current.tree, other.tree,
        read_blob=repo.objects.get,
        write_blob=repo.objects.put,
    )

    worktree.check_untracked(repo, result.tree)
    worktree.write_tree(repo, result.tree, tracked=set(current.tree))

    message = f"Merged {branch_name} into {current_branch}."
    new_commit_hash = commit.create_commit(repo, message, result.tree, second_parent=merge_commit_hash)
    if result.deleted:
        logger.info(f"Merge removed {', '.join(result.deleted)}")
    if result.conflicts:
        logger.warning(f"Merge conflict in {', '.join(result.conflicts)}")
    return MergeOutcome(MERGED, new_commit_hash, result.conflicts)


def run(args):
    repo = Repository.open()
    outcome = do_merge(repo, args.branch)
    repo.persist()

    if outcome.status == ALREADY_MERGED:
        print("Given branch is an ancestor of the current branch.")
    elif outcome.status == FAST_FORWARD:
        print("Current branch fast-forwarded.")
    elif outcome.conflicts:
        print("Encountered a merge conflict.")

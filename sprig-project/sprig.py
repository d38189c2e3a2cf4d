import argparse
import sys

from loguru import logger

from commands import (
    init, add, rm, commit, log, find, status, config,
    branch, checkout, reset, merge
)
from utils import errors, repository, config as config_utils
from utils.log import configure_logging


def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog="sprig", description="Sprig: a small local version control system.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create a new repository in the current directory.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage file contents for the next commit.")
    add_parser.add_argument("files", nargs="+", help="Files to add.")
    add_parser.set_defaults(func=add.run)

    # Command: rm
    rm_parser = subparsers.add_parser("rm", help="Unstage a file, or mark a tracked file for removal.")
    rm_parser.add_argument("file", help="File to remove.")
    rm_parser.set_defaults(func=rm.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes.")
    commit_parser.add_argument("message", nargs="?", default="", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of the current branch.")
    log_parser.set_defaults(func=log.run)

    # Command: global-log
    global_log_parser = subparsers.add_parser("global-log", help="Show every commit ever made.")
    global_log_parser.set_defaults(func=log.run_global)

    # Command: find
    find_parser = subparsers.add_parser("find", help="Print the ids of commits with the given message.")
    find_parser.add_argument("message", help="Exact commit message.")
    find_parser.set_defaults(func=find.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., log.timezone).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="Create a branch at the current commit.")
    branch_parser.add_argument("name", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: rm-branch
    rm_branch_parser = subparsers.add_parser("rm-branch", help="Delete a branch pointer.")
    rm_branch_parser.add_argument("name", help="The name of the branch to delete.")
    rm_branch_parser.set_defaults(func=branch.run_remove)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help="Switch branches or restore a file from a commit.")
    checkout_parser.add_argument("targets", nargs="+", help="<branch> | -- <file> | <commit> -- <file>")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Move the current branch to a commit.")
    reset_parser.add_argument("commit_id", help="Full or abbreviated commit id.")
    reset_parser.set_defaults(func=reset.run)

    # Command: merge
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch.")
    merge_parser.add_argument("branch", help="The branch to merge.")
    merge_parser.set_defaults(func=merge.run)

    return parser


# The main entry point for the Sprig version control system
def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    if argv[:1] == ["checkout"] and len(argv) > 1:
        # checkout operands use a literal "--", which argparse would swallow
        args = argparse.Namespace(command="checkout", targets=argv[1:], func=checkout.run)
    else:
        args = parser.parse_args(argv)

    try:
        configure_logging(config_utils.get_log_level(repository.find_repo_root()))
    except errors.InvalidLogLevel as e:
        print(e, file=sys.stderr)
        return 1

    try:
        args.func(args)
    except errors.SprigError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# What it does: Defines every user-facing failure a sprig command can raise
# How it does: Each error kind is a subclass of SprigError carrying the message printed to the user. Core code raises them, the CLI entry point catches SprigError and reports it
# What data structure it uses: Class hierarchy


class SprigError(Exception):
    message = "sprig: unknown error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class NotARepository(SprigError):
    message = "Not in an initialized Sprig directory."


class RepositoryExists(SprigError):
    message = "A Sprig version-control system already exists in the current directory."


class NotFound(SprigError):
    message = "Object not found."


class CorruptObject(SprigError):
    message = "Object is corrupt or has an unknown format."


class BranchExists(SprigError):
    message = "A branch with that name already exists."


class NoSuchBranch(SprigError):
    message = "A branch with that name does not exist."


class CannotDeleteCurrent(SprigError):
    message = "Cannot remove the current branch."


class AlreadyOnBranch(SprigError):
    message = "No need to checkout the current branch."


class SelfMerge(SprigError):
    message = "Cannot merge a branch with itself."


class UncommittedChanges(SprigError):
    message = "You have uncommitted changes."


class NothingToCommit(SprigError):
    message = "No changes added to the commit."


class EmptyCommitMessage(SprigError):
    message = "Please enter a commit message."


class NothingToRemove(SprigError):
    message = "No reason to remove the file."


class FileDoesNotExist(SprigError):
    message = "File does not exist."


class NoCommonAncestor(SprigError):
    message = "The two branches share no common ancestor."


class UntrackedFileWouldBeOverwritten(SprigError):
    message = "There is an untracked file in the way; delete it, or add and commit it first."


class AmbiguousOrUnknownCommit(SprigError):
    message = "No commit with that id exists."


class FileDoesNotExistInCommit(SprigError):
    message = "File does not exist in that commit."


class NoCommitWithMessage(SprigError):
    message = "Found no commit with that message."


class InvalidConfigKey(SprigError):
    message = "Invalid key format. Should be 'section.key'."


class InvalidLogLevel(SprigError):
    message = "Invalid log level."

# Unit tests for utils/staging.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sprig-project'))

from conftest import write_file
from utils import errors, objects, staging


@pytest.fixture
def committed(repo, make_commit):
    # A repo whose HEAD tracks a.txt = "one"
    make_commit(repo, {'a.txt': 'one'}, 'add a')
    return repo


class TestIsTrackedAndUnmodified:
    # Tests for staging.is_tracked_and_unmodified()

    def test_untracked_file(self, repo):
        assert not staging.is_tracked_and_unmodified(repo, 'a.txt', b'one')

    def test_identical_content(self, committed):
        assert staging.is_tracked_and_unmodified(committed, 'a.txt', b'one')

    def test_modified_content(self, committed):
        assert not staging.is_tracked_and_unmodified(committed, 'a.txt', b'two')

    def test_missing_working_file(self, committed):
        assert staging.is_tracked_and_unmodified(committed, 'a.txt', None)


class TestAdd:
    # Tests for staging.add()

    def test_add_new_file(self, repo):
        digest = staging.add(repo, 'new.txt', b'fresh')

        assert repo.stage == {'new.txt': digest}
        assert repo.objects.get(digest) == b'fresh'

    def test_add_overwrites_previous_entry(self, repo):
        staging.add(repo, 'new.txt', b'first')
        digest = staging.add(repo, 'new.txt', b'second')
        assert repo.stage == {'new.txt': digest}

    def test_add_unchanged_file_is_noop(self, committed):
        assert staging.add(committed, 'a.txt', b'one') is None
        assert committed.stage == {}

    def test_restaging_head_content_unstages(self, committed):
        # Staging then re-adding content identical to HEAD leaves nothing pending
        staging.add(committed, 'a.txt', b'two')
        assert 'a.txt' in committed.stage

        staging.add(committed, 'a.txt', b'one')

        assert committed.stage == {}
        assert committed.removed == set()

    def test_add_clears_removal_mark(self, committed):
        staging.remove(committed, 'a.txt')
        assert committed.removed == {'a.txt'}

        staging.add(committed, 'a.txt', b'one')

        assert committed.removed == set()
        assert committed.stage == {}

    def test_add_changed_content_after_removal(self, committed):
        staging.remove(committed, 'a.txt')
        staging.add(committed, 'a.txt', b'three')

        assert committed.removed == set()
        assert committed.stage == {'a.txt': objects.hash_content(b'three')}


class TestRemove:
    # Tests for staging.remove()

    def test_remove_staged_only_file(self, repo):
        write_file(repo.root, 'new.txt', 'fresh')
        staging.add(repo, 'new.txt', b'fresh')

        staging.remove(repo, 'new.txt')

        assert repo.stage == {}
        assert repo.removed == set()
        # Not tracked by HEAD, so the working copy stays
        assert os.path.exists(os.path.join(repo.root, 'new.txt'))

    def test_remove_tracked_file(self, committed):
        staging.remove(committed, 'a.txt')

        assert committed.removed == {'a.txt'}
        assert not os.path.exists(os.path.join(committed.root, 'a.txt'))

    def test_remove_tracked_file_already_deleted(self, committed):
        os.remove(os.path.join(committed.root, 'a.txt'))
        staging.remove(committed, 'a.txt')
        assert committed.removed == {'a.txt'}

    def test_remove_drops_staged_modification(self, committed):
        staging.add(committed, 'a.txt', b'two')
        staging.remove(committed, 'a.txt')

        assert committed.stage == {}
        assert committed.removed == {'a.txt'}

    def test_remove_untracked_file_fails(self, repo):
        write_file(repo.root, 'loose.txt', 'x')
        with pytest.raises(errors.NothingToRemove):
            staging.remove(repo, 'loose.txt')

    def test_remove_twice_fails(self, committed):
        staging.remove(committed, 'a.txt')
        with pytest.raises(errors.NothingToRemove):
            staging.remove(committed, 'a.txt')

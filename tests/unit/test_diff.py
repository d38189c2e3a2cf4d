# Unit tests for utils/diff.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sprig-project'))

from utils import diff as diff_utils
from utils.objects import hash_content


class FakeBlobs:
    # In-memory stand-in for the object store's blob half

    def __init__(self, **contents):
        self.blobs = {}
        self.names = {}
        for name, content in contents.items():
            self.names[name] = self.write(content)

    def read(self, digest):
        return self.blobs[digest]

    def write(self, content):
        digest = hash_content(content)
        self.blobs[digest] = content
        return digest


def _merge(blobs, split, current, other):
    return diff_utils.merge_trees(split, current, other, read_blob=blobs.read, write_blob=blobs.write)


class TestCompareStates:

    def test_added_deleted_modified(self):
        changes = diff_utils.compare_states({'a': '1', 'b': '2'}, {'b': '3', 'c': '4'})
        assert changes == {'added': ['c'], 'deleted': ['a'], 'modified': ['b']}


class TestMergeEntry:
    # One test per reconciliation rule, in precedence order

    def test_unchanged_on_both_sides(self):
        assert diff_utils.merge_entry('1', '2', '2') == diff_utils.KEEP_CURRENT

    def test_changed_only_in_other(self):
        assert diff_utils.merge_entry('1', '1', '2') == diff_utils.TAKE_OTHER

    def test_changed_only_in_current(self):
        assert diff_utils.merge_entry('1', '2', '1') == diff_utils.KEEP_CURRENT

    def test_deleted_in_other_unchanged_in_current(self):
        assert diff_utils.merge_entry('1', '1', None) == diff_utils.DELETE

    def test_deleted_in_current_unchanged_in_other(self):
        assert diff_utils.merge_entry('1', None, '1') == diff_utils.ABSENT

    def test_new_only_in_current(self):
        assert diff_utils.merge_entry(None, '1', None) == diff_utils.KEEP_CURRENT

    def test_new_on_both_sides_identical(self):
        assert diff_utils.merge_entry(None, '1', '1') == diff_utils.KEEP_CURRENT

    def test_new_only_in_other(self):
        assert diff_utils.merge_entry(None, None, '1') == diff_utils.TAKE_OTHER

    def test_deleted_on_both_sides(self):
        assert diff_utils.merge_entry('1', None, None) == diff_utils.ABSENT

    @pytest.mark.parametrize('split, current, other', [
        ('1', '2', '3'),      # both modified differently
        ('1', '2', None),     # modified here, deleted there
        ('1', None, '3'),     # deleted here, modified there
        (None, '2', '3'),     # added differently on both sides
    ])
    def test_conflicts(self, split, current, other):
        assert diff_utils.merge_entry(split, current, other) == diff_utils.CONFLICT


class TestMergeTrees:
    # Tests for merge_trees()

    def test_independent_changes_combine(self):
        blobs = FakeBlobs(one=b'1', two=b'2', three=b'3', nine=b'9')
        n = blobs.names
        split = {'a': n['one'], 'b': n['two']}
        current = {'a': n['one'], 'b': n['three']}
        other = {'a': n['nine'], 'b': n['two']}

        result = _merge(blobs, split, current, other)

        assert result.tree == {'a': n['nine'], 'b': n['three']}
        assert result.conflicts == []
        assert result.deleted == []

    def test_conflict_file_content(self):
        blobs = FakeBlobs(one=b'1\n', two=b'2\n', three=b'3\n')
        n = blobs.names

        result = _merge(blobs, {'f': n['one']}, {'f': n['two']}, {'f': n['three']})

        assert result.conflicts == ['f']
        assert blobs.read(result.tree['f']) == b'<<<<<<< HEAD\n2\n=======\n3\n>>>>>>>\n'

    def test_conflict_with_deleted_side(self):
        blobs = FakeBlobs(one=b'1\n', two=b'2\n')
        n = blobs.names

        result = _merge(blobs, {'f': n['one']}, {'f': n['two']}, {})

        assert blobs.read(result.tree['f']) == b'<<<<<<< HEAD\n2\n=======\n>>>>>>>\n'

    def test_deletions_and_additions(self):
        blobs = FakeBlobs(one=b'1', two=b'2', new=b'new')
        n = blobs.names
        split = {'gone': n['one'], 'kept': n['two']}
        current = {'gone': n['one'], 'kept': n['two']}
        other = {'kept': n['two'], 'added': n['new']}

        result = _merge(blobs, split, current, other)

        assert result.tree == {'kept': n['two'], 'added': n['new']}
        assert result.deleted == ['gone']

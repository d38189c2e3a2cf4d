# Unit tests for utils/graph.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sprig-project'))

from utils import errors, graph, objects
from utils.objects import Commit, ObjectStore


@pytest.fixture
def store(temp_dir):
    return ObjectStore(os.path.join(temp_dir, 'objects'))


def _commit(store, message, parent=None, second_parent=None):
    return store.put_commit(Commit(
        message=message,
        timestamp='2024-01-01T00:00:00+00:00',
        parent=parent,
        second_parent=second_parent,
    ))


@pytest.fixture
def history(store):
    #   root - a1 - a2          (branch a)
    #      \
    #       b1 - b2             (branch b)
    root = store.put_commit(objects.make_initial_commit())
    a1 = _commit(store, 'a1', root)
    a2 = _commit(store, 'a2', a1)
    b1 = _commit(store, 'b1', root)
    b2 = _commit(store, 'b2', b1)
    return {'root': root, 'a1': a1, 'a2': a2, 'b1': b1, 'b2': b2}


class TestHistory:
    # Tests for first_parent_history() and ancestors()

    def test_first_parent_history_order(self, store, history):
        walked = [d for d, _ in graph.first_parent_history(store, history['a2'])]
        assert walked == [history['a2'], history['a1'], history['root']]

    def test_ancestors_include_self(self, store, history):
        assert graph.ancestors(store, history['b2']) == {history['b2'], history['b1'], history['root']}

    def test_ancestors_skip_second_parents(self, store, history):
        merge = _commit(store, 'merge', history['a2'], second_parent=history['b2'])
        result = graph.ancestors(store, merge)
        assert history['b1'] not in result
        assert history['a1'] in result


class TestFindSplitPoint:
    # Tests for find_split_point()

    def test_forked_branches_split_at_root(self, store, history):
        assert graph.find_split_point(store, history['a2'], history['b2']) == history['root']

    def test_ancestor_is_split_point(self, store, history):
        assert graph.find_split_point(store, history['a2'], history['a1']) == history['a1']
        assert graph.find_split_point(store, history['a1'], history['a2']) == history['a1']

    def test_same_commit(self, store, history):
        assert graph.find_split_point(store, history['b2'], history['b2']) == history['b2']

    def test_after_merge_uses_first_parent_chain(self, store, history):
        # b merged into a; the earlier fork point is still returned for b's tip
        merge = _commit(store, 'merge', history['a2'], second_parent=history['b2'])
        assert graph.find_split_point(store, merge, history['b2']) == history['root']

    def test_unrelated_histories(self, store):
        one = _commit(store, 'lonely root one')
        two = _commit(store, 'lonely root two')
        with pytest.raises(errors.NoCommonAncestor):
            graph.find_split_point(store, one, two)

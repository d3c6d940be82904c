from polywire.utils import DisjointSet


def test_singletons_are_their_own_representative():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert len(sets) == 4


def test_union_merges_transitively():
    sets = DisjointSet(6)
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert sets.find(0) == sets.find(2)
    assert sets.find(4) != sets.find(0)
    groups = sorted(sorted(members) for members in sets.groups().values())
    assert groups == [[0, 1, 2, 3], [4], [5]]


def test_long_chain_does_not_recurse():
    size = 100_000
    sets = DisjointSet(size)
    for i in range(size - 1):
        sets.union(i, i + 1)
    root = sets.find(0)
    assert all(sets.find(i) == root for i in range(0, size, 997))

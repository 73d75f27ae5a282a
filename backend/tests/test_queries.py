import pytest

from socialnet.graph.graph_schema import NOT_RECEIVED, RECEIVED


def test_post_message_partitions_every_node(sample_network):
    results = sample_network.post_message("music")

    assert sorted(node_id for node_id, _ in results) == [1, 2, 3, 4, 5]
    for node_id, status in results:
        has_keyword = "music" in sample_network.store.get_node(node_id).characteristics
        assert status == (RECEIVED if has_keyword else NOT_RECEIVED)


def test_post_message_is_verbatim_and_case_sensitive(sample_network):
    assert all(r.status == NOT_RECEIVED for r in sample_network.post_message("Music"))
    assert all(r.status == NOT_RECEIVED for r in sample_network.post_message("mus"))


def test_post_message_ignores_edge_only_ids(network):
    network.add_node(1, ["red"])
    network.add_edge(1, 2)

    assert [tuple(r) for r in network.post_message("red")] == [(1, RECEIVED)]


def test_post_message_on_empty_graph(network):
    assert network.post_message("anything") == []


def test_reach_summary_splits_groups(sample_network):
    summary = sample_network.reach_summary("travel")

    assert sorted(summary.received) == [1, 3, 5]
    assert sorted(summary.not_received) == [2, 4]
    assert summary.total == 5


def test_target_ads_empty_target_matches_all(sample_network):
    assert sorted(sample_network.target_ads(set())) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "targets, expected",
    [
        ({"music"}, [1, 2, 5]),
        ({"music", "travel"}, [1, 5]),
        ({"sports", "travel", "fitness"}, [3]),
        ({"music", "tech"}, []),
        ({"unknown"}, []),
    ],
)
def test_target_ads_uses_and_semantics(sample_network, targets, expected):
    assert sorted(sample_network.target_ads(targets)) == expected


def test_dominance_sorted_by_neighbor_count(sample_network):
    ranking = sample_network.calculate_dominance_and_influence()

    counts = [entry.connections for entry in ranking]
    assert counts == sorted(counts, reverse=True)
    assert {entry.node_id for entry in ranking} == {1, 2, 3, 4, 5}

    for node_id, neighbors in ranking:
        assert len(neighbors) == len(sample_network.neighbors(node_id))
        assert set(neighbors) == set(sample_network.neighbors(node_id))

    assert ranking[0].connections == 3
    assert {e.node_id for e in ranking[:2]} == {1, 2}


def test_dominance_covers_adjacency_not_node_table(network):
    network.add_node(1, ["red"])
    network.add_node(2, ["red"])
    network.add_edge(2, 9)

    ranking = network.calculate_dominance_and_influence()

    assert {e.node_id for e in ranking} == {2, 9}


def test_dominance_filter_matches_target_ads(sample_network):
    targets = {"music"}
    allowed = set(sample_network.target_ads(targets))

    ranking = sample_network.calculate_dominance_and_influence(targets)

    assert ranking
    assert {e.node_id for e in ranking} <= allowed


def test_dominance_filter_drops_ids_missing_from_node_table(network):
    network.add_node(1, ["red"])
    network.add_edge(1, 2)

    ranking = network.calculate_dominance_and_influence({"red"})

    assert [(e.node_id, e.neighbors) for e in ranking] == [(1, (2,))]


def test_dominance_empty_filter_equals_unfiltered(sample_network):
    unfiltered = sample_network.calculate_dominance_and_influence()
    empty = sample_network.calculate_dominance_and_influence(set())

    assert sorted(e.node_id for e in unfiltered) == sorted(e.node_id for e in empty)


def test_add_edge_counts_once_per_side(network):
    network.add_edge(1, 2)
    network.add_edge(1, 2)

    counts = {e.node_id: e.connections for e in network.calculate_dominance_and_influence()}
    assert counts == {1: 1, 2: 1}


def test_dominance_on_empty_graph(network):
    assert network.calculate_dominance_and_influence() == []


def test_characteristic_counts(sample_network):
    counts = sample_network.characteristic_counts()

    assert counts["music"] == 3
    assert counts["travel"] == 3
    assert counts["tech"] == 1
    assert sum(counts.values()) == 13


def test_available_characteristics_is_a_copy(sample_network):
    vocabulary = sample_network.get_available_characteristics()
    vocabulary.add("injected")

    assert "injected" not in sample_network.get_available_characteristics()
    assert "gaming" in vocabulary


def test_bare_string_characteristics_are_rejected(sample_network):
    with pytest.raises(TypeError):
        sample_network.add_node(6, "music")
    with pytest.raises(TypeError):
        sample_network.target_ads("music")
    with pytest.raises(TypeError):
        sample_network.calculate_dominance_and_influence("music")

    assert not sample_network.store.has_node(6)

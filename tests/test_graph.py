import io

import pytest

from graphwalk.graph import Graph, bfs_levels, dfs_times, levels_main, read_graph, times_main


@pytest.fixture
def path_graph():
    return Graph([(1, 2), (2, 3), (3, 4)])


def test_add_edge_is_symmetric():
    graph = Graph()
    graph.add_edge(1, 2)
    assert graph.neighbours(1) == [2]
    assert graph.neighbours(2) == [1]


def test_neighbours_keep_insertion_order():
    graph = Graph([(1, 3), (1, 2)])
    assert graph.neighbours(1) == [3, 2]


def test_unknown_node_has_no_neighbours():
    assert Graph().neighbours(7) == []


def test_describe_formats_each_node():
    graph = Graph([(1, 2), (1, 3)])
    assert graph.describe(3) == [
        "Nodes Connected With 1 Are : 2 3 ",
        "Nodes Connected With 2 Are : 1 ",
        "Nodes Connected With 3 Are : 1 ",
    ]


def test_describe_lists_isolated_nodes():
    lines = Graph([(1, 2)]).describe(3)
    assert lines[2] == "Nodes Connected With 3 Are : "


def test_read_graph_consumes_only_requested_edges():
    tokens = iter([1, 2, 2, 3, 9, 9])
    graph = read_graph(tokens, 2)
    assert graph.neighbours(2) == [1, 3]
    assert graph.neighbours(9) == []
    assert list(tokens) == [9, 9]


def test_read_graph_rejects_short_input():
    with pytest.raises(ValueError):
        read_graph([1, 2, 3], 2)


def test_bfs_levels_on_path(path_graph):
    assert bfs_levels(path_graph, 1) == {1: 0, 2: 1, 3: 2, 4: 3}


def test_bfs_levels_differ_by_at_most_one_across_edges():
    edges = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (5, 6), (2, 6)]
    levels = bfs_levels(Graph(edges), 1)
    assert levels[1] == 0
    for a, b in edges:
        assert abs(levels[a] - levels[b]) <= 1


def test_bfs_skips_unreachable_nodes():
    graph = Graph([(1, 2), (3, 4)])
    assert set(bfs_levels(graph, 1)) == {1, 2}


def test_dfs_root_spans_every_timestamp(path_graph):
    times = dfs_times(path_graph, 2)
    assert times[2] == (1, 2 * len(times))
    stamps = sorted(t for pair in times.values() for t in pair)
    assert stamps == list(range(1, 2 * len(times) + 1))


def test_dfs_intervals_nest_along_path(path_graph):
    times = dfs_times(path_graph, 1)
    for parent, child in [(1, 2), (2, 3), (3, 4)]:
        assert times[parent][0] < times[child][0]
        assert times[child][1] < times[parent][1]


def test_dfs_handles_cycles():
    times = dfs_times(Graph([(1, 2), (2, 3), (3, 1)]), 1)
    assert set(times) == {1, 2, 3}
    assert times[1][0] < times[2][0] < times[3][0]
    assert times[3][1] < times[2][1] < times[1][1]


def test_levels_main_reads_file(tmp_path, capsys):
    source = tmp_path / "graph.txt"
    source.write_text("4 3\n1 2\n2 3\n3 4\n1\n")
    assert levels_main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Nodes Connected With 1 Are : 2 "
    assert "The Level Of Each Node (Root as 1) is : " in lines
    assert lines[-4:] == ["1 : 0", "2 : 1", "3 : 2", "4 : 3"]


def test_levels_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1\n1 2\n1\n"))
    assert levels_main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "3 : 0"


def test_times_main_matches_dfs_times(tmp_path, capsys):
    source = tmp_path / "graph.txt"
    source.write_text("3 2\n1 2\n1 3\n1\n")
    assert times_main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "Node : { In Time, Out Time }." in out.splitlines()
    times = dfs_times(Graph([(1, 2), (1, 3)]), 1)
    for node, (entry, leave) in times.items():
        assert f"  {node} :  {{ {entry}, {leave} }}." in out.splitlines()


def test_main_reports_truncated_input(tmp_path, capsys):
    source = tmp_path / "graph.txt"
    source.write_text("4 3\n1 2\n")
    assert times_main([str(source)]) == 1
    assert "error" in capsys.readouterr().err
"""Tests for the command-line entry point."""

from src.main import build_sample_graph, main


def test_sample_graph():
    graph = build_sample_graph()
    assert graph.vertices() == ["A", "B", "C", "D", "E"]
    assert len(list(graph.edges())) == 7


def test_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "BFS: A -> C -> E",
        "Dijkstra: A -> B -> D -> E (weight 7)",
    ]


def test_single_algorithm(capsys):
    assert main(["--algorithm", "bfs", "--start", "B", "--end", "E"]) == 0
    assert capsys.readouterr().out == "BFS: B -> C -> E\n"


def test_no_path(capsys):
    assert main(["--start", "E", "--end", "A"]) == 0
    assert capsys.readouterr().out.splitlines() == ["BFS: NO_PATH", "Dijkstra: NO_PATH"]


def test_unknown_vertex(capsys):
    assert main(["--start", "Z"]) == 1
    assert "Vertex not in graph: 'Z'" in capsys.readouterr().err


def test_edges_file(tmp_path, capsys):
    csv_file = tmp_path / "edges.csv"
    csv_file.write_text(
        "source,destination,weight\nParis,Lyon,2\nLyon,Nice,3\nParis,Nice,10\n",
        encoding="utf-8",
    )
    args = ["--edges", str(csv_file), "--start", "Paris", "--end", "Nice"]
    assert main(args) == 0
    assert capsys.readouterr().out.splitlines() == [
        "BFS: Paris -> Nice",
        "Dijkstra: Paris -> Lyon -> Nice (weight 5)",
    ]


def test_missing_edges_file(tmp_path, capsys):
    assert main(["--edges", str(tmp_path / "missing.csv")]) == 1
    assert "Edges file not found" in capsys.readouterr().err

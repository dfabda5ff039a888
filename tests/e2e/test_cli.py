"""End-to-end tests for the layered-layout CLI."""

import json

from click.testing import CliRunner

from layered_layout.__main__ import main

CHAIN = json.dumps(
    {
        "nodes": [{"id": "A"}, {"id": "B"}],
        "edges": [{"source": "A", "target": "B"}],
    }
)


def test_layout_from_stdin():
    result = CliRunner().invoke(main, [], input=CHAIN)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["direction"] == "TB"
    assert data["positions"]["A"] == {"x": 0, "y": 0}
    assert data["positions"]["B"] == {"x": 0, "y": 100}
    assert data["edges"] == [{"id": "A-B", "source": "A", "target": "B"}]


def test_layout_from_file_to_file(tmp_path):
    src = tmp_path / "graph.json"
    src.write_text(CHAIN)
    out = tmp_path / "layout.json"
    result = CliRunner().invoke(main, [str(src), "--direction", "lr", "-o", str(out)])
    assert result.exit_code == 0
    data = json.loads(out.read_text())
    assert data["direction"] == "LR"
    assert data["positions"]["B"]["x"] > data["positions"]["A"]["x"]


def test_rank_gap_option():
    result = CliRunner().invoke(main, ["--rank-gap", "10"], input=CHAIN)
    assert result.exit_code == 0
    assert json.loads(result.output)["positions"]["B"]["y"] == 60


def test_invalid_input():
    result = CliRunner().invoke(main, [], input='{"nodes": [{"id": "A"}, {"id": "A"}], "edges": []}')
    assert result.exit_code == 1
    assert "invalid input" in result.output


def test_unknown_direction():
    result = CliRunner().invoke(main, ["-d", "up"], input=CHAIN)
    assert result.exit_code == 1
    assert "unknown direction" in result.output.lower()


def test_empty_graph():
    result = CliRunner().invoke(main, [], input='{"nodes": [], "edges": []}')
    assert result.exit_code == 0
    assert json.loads(result.output)["positions"] == {}


def test_non_finite_gap_rejected():
    result = CliRunner().invoke(main, ["--node-gap", "nan"], input=CHAIN)
    assert result.exit_code == 1
    assert "node_gap must be a finite number" in result.output


def test_non_finite_size_rejected():
    src = '{"nodes": [{"id": "A", "width": Infinity}], "edges": []}'
    result = CliRunner().invoke(main, [], input=src)
    assert result.exit_code == 1
    assert "invalid input" in result.output

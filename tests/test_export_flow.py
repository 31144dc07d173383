import copy
import json

from export_flow import (
    IMPORT_GUIDE,
    NAVIGATION_FLOW,
    find_dangling_connections,
    write_import_guide,
    write_navigation_flow,
)


def test_navigation_flow_shape():
    nodes = NAVIGATION_FLOW["nodes"]
    assert NAVIGATION_FLOW["startNode"] in nodes
    assert {node["type"] for node in nodes.values()} == {"page", "overlay"}
    assert nodes["payment-modal"]["type"] == "overlay"
    for interaction in NAVIGATION_FLOW["interactions"]:
        assert set(interaction) == {"from", "to", "trigger", "animation"}


def test_declared_flow_has_no_dangling_connections():
    assert find_dangling_connections(NAVIGATION_FLOW) == []


def test_find_dangling_connections_reports_unknown_targets():
    flow = {"nodes": {"a": {"connections": ["b", "ghost"]}, "b": {"connections": []}}}
    assert find_dangling_connections(flow) == [("a", "ghost")]


def test_navigation_flow_round_trips(tmp_path):
    dest = write_navigation_flow(tmp_path)
    text = dest.read_text(encoding="utf-8")
    assert dest.name == "navigation-flow.json"
    assert json.loads(text) == NAVIGATION_FLOW
    assert text.startswith('{\n  "title": ')


def test_dangling_targets_are_written_unchanged(tmp_path, capsys):
    flow = copy.deepcopy(NAVIGATION_FLOW)
    flow["nodes"]["home"]["connections"].append("spa")
    dest = write_navigation_flow(tmp_path, flow)
    assert json.loads(dest.read_text(encoding="utf-8")) == flow
    assert "undeclared node 'spa'" in capsys.readouterr().err


def test_write_import_guide(tmp_path):
    dest = write_import_guide(tmp_path)
    assert dest.name == "IMPORT-GUIDE.md"
    assert dest.read_text(encoding="utf-8") == IMPORT_GUIDE
    assert "exports/figma-ready/tokens/figma-variables.json" in IMPORT_GUIDE

import json

from semgraph.tools.describe import main

from conftest import SAMPLE_TTL


def _write_sample(tmp_path):
    f = tmp_path / "sample.ttl"
    f.write_text(SAMPLE_TTL, encoding="utf-8")
    return f


def test_describe_prints_fields(tmp_path, capsys) -> None:
    f = _write_sample(tmp_path)
    assert main([str(f), "--class", "http://example.org/onto#Person"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "Person"
    assert out["superclasses"] == ["http://example.org/onto#Agent"]
    types = {row["name"]: row["type"] for row in out["fields"]}
    assert types["age"] == "Int"
    assert types["knows"] == "[Person]"


def test_describe_writes_file_and_expands_prefixes(tmp_path, capsys) -> None:
    f = _write_sample(tmp_path)
    out_path = tmp_path / "person.json"
    assert main([str(f), "--class", "owl:Thing", "--relay", "-o", str(out_path)]) == 0
    assert "Wrote" in capsys.readouterr().out
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["class_uri"] == "http://www.w3.org/2002/07/owl#Thing"
    assert "Node" in payload["interfaces"]


def test_describe_unknown_class(tmp_path, capsys) -> None:
    f = _write_sample(tmp_path)
    assert main([str(f), "--class", "http://example.org/onto#Ghost"]) == 2
    assert "not found" in capsys.readouterr().err

import json
import sys
import pytest
from yangstruct.__main__ import main


@pytest.fixture
def infiles(tmp_path):
    def write(*objs):
        res = []
        for i, obj in enumerate(objs):
            p = tmp_path / f"in{i}.json"
            p.write_text(obj if isinstance(obj, str) else json.dumps(obj),
                         encoding="utf-8")
            res.append(str(p))
        return res
    return write


def test_merge(infiles, capsys):
    files = infiles({"a": {"b": 1}, "l": [1]}, {"a": {"c": "é"}, "l": [2]})
    assert main(files, indent="") == 0
    out = capsys.readouterr().out
    assert json.loads(out) == {"a": {"b": 1, "c": "é"}, "l": [1, 2]}
    assert "é" in out


def test_indent(infiles, capsys, monkeypatch):
    monkeypatch.delenv("YANGSTRUCT_INDENT", raising=False)
    files = infiles({"a": 1})
    assert main(files) == 0
    assert capsys.readouterr().out == '{\n   "a": 1\n}\n'
    monkeypatch.setenv("YANGSTRUCT_INDENT", "\t")
    assert main(files) == 0
    assert capsys.readouterr().out == '{\n\t"a": 1\n}\n'
    assert main(files, indent=" ") == 0
    assert capsys.readouterr().out == '{\n "a": 1\n}\n'


def test_errors(infiles, capsys, tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("Input file:")
    assert main(infiles("{bad")) == 1
    assert main(infiles([1, 2])) == 1
    assert "doesn't contain a JSON object" in capsys.readouterr().err
    assert main(infiles({"a": 1}, {"a": 2})) == 2
    assert capsys.readouterr().err == (
        "Merge error: a is not a mergeable JSON type in tree, "
        "a: int, b: int\n")


def test_arguments(infiles, capsys, monkeypatch):
    files = infiles({"a": [1]}, {"a": [2]})
    monkeypatch.setattr(sys, "argv", ["yangstruct", "-i", "  "] + files)
    assert main() == 0
    assert capsys.readouterr().out == '{\n  "a": [\n    1,\n    2\n  ]\n}\n'
    monkeypatch.setattr(sys, "argv", ["yangstruct"])
    with pytest.raises(SystemExit):
        main()

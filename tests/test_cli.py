import io

from storytree.cli import main


def test_main_plays_story(tmp_path, monkeypatch, capsys):
    path = tmp_path / "story.txt"
    path.write_text("1|Start here.|2|-1\n2|The end.|-1|-1\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Start here." in out
    assert "The end.\nGame Over!" in out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "absent.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(missing)]) == 0
    out = capsys.readouterr().out
    assert f"Could not open file{missing}" in out
    assert out.endswith("No story")


def test_main_custom_delimiter(tmp_path, monkeypatch, capsys):
    path = tmp_path / "story.txt"
    path.write_text("1;Only scene.;-1;-1\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(path), "--delimiter", ";"]) == 0
    assert "Only scene.\nGame Over!" in capsys.readouterr().out
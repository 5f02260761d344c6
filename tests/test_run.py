import pytest  # noqa

import run


def test_default_text(capsys):
    run.main()
    out = capsys.readouterr().out
    assert "Huffman Codes:" in out
    assert "Huffman Tree:" in out
    assert run.DEFAULT_TEXT in out
    assert f"Original text size (in bits): {len(run.DEFAULT_TEXT) * 8}" in out
    assert "Compression ratio: " in out


def test_input_file(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("aaaa", encoding="utf-8")
    run.main(in_file=str(path), show_tree=False, show_encoded=False)
    out = capsys.readouterr().out
    assert "a: 0" in out
    assert "Huffman Tree:" not in out
    assert "Compressed text size (in bits): 4" in out
    assert "Compressed text bits per character: 1.0000" in out
    assert "Compression ratio: 0.1250" in out


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    run.main(in_file=str(path))
    out = capsys.readouterr().out
    assert "Compressed text size (in bits): 0" in out
    assert "Empty input" in out


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        run.main(in_file=str(tmp_path / "nope.txt"))

from rawxml.cli import main


def test_default_sample(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "content\nhello2\n"


def test_file_with_paths(tmp_path, capsys):
    document = tmp_path / "doc.xml"
    document.write_text("<r><i>1</i><i>2</i></r>", encoding="utf-8")
    status = main([str(document), "--tag", "r", "--content", "r/i", "--index", "1"])
    assert status == 0
    assert capsys.readouterr().out == "i\n2\n"


def test_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "absent.xml")])
    assert status == 1
    assert "rawxml:" in capsys.readouterr().err


def test_negative_index_fails(capsys):
    assert main(["--index", "-1"]) == 1
    assert capsys.readouterr().out == ""


def test_unknown_paths_print_empty_lines(capsys):
    assert main(["--tag", "nope", "--content", "nope"]) == 0
    assert capsys.readouterr().out == "\n\n"
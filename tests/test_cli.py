import pytest

from stringtrie.cli import build_parser, main


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncathode\ndog\n", encoding="utf-8")
    return str(path)


def test_load_and_prefix(words_file, capsys):
    assert main(["--load", words_file, "--prefix", "cat"]) == 0
    out = capsys.readouterr().out
    assert f"Added 3 words to the trie from {words_file}." in out
    assert 'Found 2 words containing the "cat" prefix:\ncat\ncathode\n' in out


def test_add_search_remove(capsys):
    assert main(["--add", "Hello", "--add", "b4d", "--search", "hello"]) == 0
    out = capsys.readouterr().out
    assert 'Word "Hello" was added to the trie.' in out
    assert 'Word "b4d" was not added to the trie.' in out
    assert 'Word "hello" was found in the trie.' in out

    assert main(["--add", "x", "--remove", "x", "--search", "x"]) == 0
    out = capsys.readouterr().out
    assert "Trie now contains 0 words." in out
    assert 'Word "x" was not found in the trie.' in out


def test_print_words(words_file, capsys):
    assert main(["-l", words_file, "--print"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("cat\ncathode\ndog\n")


def test_unload(words_file, capsys):
    assert main(["-l", words_file, "--unload", "--search", "dog"]) == 0
    out = capsys.readouterr().out
    assert "All words have been removed from the trie." in out
    assert 'Word "dog" was not found in the trie.' in out


def test_write_refuses_to_overwrite(words_file, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("keep\n", encoding="utf-8")
    assert main(["-l", words_file, "--write", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "keep\n"

    assert main(["-l", words_file, "--write", str(out), "--force"]) == 0
    assert out.read_text(encoding="utf-8") == "cat\ncathode\ndog\n"


def test_missing_file_exit_status(tmp_path, capsys):
    assert main(["--load", str(tmp_path / "nope.txt")]) == 1
    assert "Added" not in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.load == []
    assert not args.print_words
    assert args.write is None

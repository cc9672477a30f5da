"""Tests for the wwt command line."""

import json
from pathlib import Path

import pytest

from wwt.cli import build_parser, main


@pytest.fixture()
def store_path(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "store.json"
    monkeypatch.setenv("WWT_STORE_PATH", str(path))
    monkeypatch.delenv("WWT_MIN_SCORE", raising=False)
    monkeypatch.chdir(tmp_path)
    return path


def _seed(*pairs: tuple[str, str]) -> None:
    for name, desc in pairs:
        assert main(["remember", name, desc]) == 0


class TestRemember:
    def test_set_entry(self, store_path: Path, capsys):
        assert main(["set", "foo", "A foo cli"]) == 0
        assert "Remembered: foo" in capsys.readouterr().out
        assert json.loads(store_path.read_text()) == {"foo": "A foo cli"}

    def test_update_entry(self, store_path: Path, capsys):
        _seed(("a", "x"))
        capsys.readouterr()
        assert main(["remember", "a", "y"]) == 0
        assert "Updated: a" in capsys.readouterr().out
        assert json.loads(store_path.read_text()) == {"a": "y"}

    def test_empty_name_is_usage_error(self, store_path: Path):
        with pytest.raises(SystemExit) as info:
            main(["remember", "", "nothing"])
        assert info.value.code == 2


class TestFind:
    def test_find_single_entry(self, store_path: Path, capsys):
        _seed(("foo", "A foo cli"))
        capsys.readouterr()
        assert main(["find", "foo cli"]) == 0
        assert "foo -> A foo cli" in capsys.readouterr().out

    def test_find_multiple_entries(self, store_path: Path, capsys):
        _seed(
            ("make-me-a salad", "Makes salad"),
            ("make-me-a cookie", "Makes cookie"),
            ("cat FILE", "Reads FILE and displays contents"),
        )
        capsys.readouterr()
        assert main(["get", "Makes"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "make-me-a salad -> Makes salad",
            "make-me-a cookie -> Makes cookie",
        ]

    def test_find_nothing_exits_zero(self, store_path: Path, capsys):
        assert main(["find", "foo cli"]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No matches found." in captured.err

    def test_find_limit(self, store_path: Path, capsys):
        _seed(("a", "same words"), ("b", "same words"), ("c", "same words"))
        capsys.readouterr()
        main(["find", "same", "--limit", "2"])
        assert len(capsys.readouterr().out.splitlines()) == 2


class TestForget:
    def test_delete_single_entry(self, store_path: Path, capsys):
        _seed(("foo", "A foo cli"))
        assert main(["delete", "foo"]) == 0
        assert "Forgot: foo" in capsys.readouterr().out
        main(["find", "foo cli"])
        assert "No matches found." in capsys.readouterr().err

    def test_forget_nonexistent(self, store_path: Path, capsys):
        assert main(["forget", "nonexistent"]) == 0
        err = capsys.readouterr().err
        assert "nonexistent" in err
        assert "not found" in err
        assert not store_path.exists()


class TestList:
    def test_lists_in_order(self, store_path: Path, capsys):
        _seed(("b", "second thing"), ("a", "first thing"))
        capsys.readouterr()
        assert main(["ls"]) == 0
        assert capsys.readouterr().out.splitlines() == ["b -> second thing", "a -> first thing"]

    def test_empty(self, store_path: Path, capsys):
        assert main(["list"]) == 0
        assert "Nothing remembered yet." in capsys.readouterr().err


class TestErrors:
    def test_corrupt_store_exits_nonzero(self, store_path: Path, capsys):
        store_path.write_text("not json at all")
        assert main(["find", "anything"]) == 1
        err = capsys.readouterr().err
        assert "corrupt" in err
        assert str(store_path) in err

    def test_unreadable_store_exits_nonzero(self, store_path: Path, capsys):
        store_path.mkdir()
        assert main(["list"]) == 1
        assert "Cannot access store file" in capsys.readouterr().err

    def test_bad_env_config_exits_nonzero(self, store_path: Path, monkeypatch, capsys):
        monkeypatch.setenv("WWT_MIN_SCORE", "high")
        assert main(["find", "x"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err


def test_store_path_flag(tmp_path: Path, store_path: Path):
    other = tmp_path / "flag.json"
    assert main(["--store-path", str(other), "remember", "ls", "list files"]) == 0
    assert other.exists()
    assert not store_path.exists()


def test_aliases_resolve_to_same_handler():
    parser = build_parser()
    assert parser.parse_args(["set", "a", "b"]).func is parser.parse_args(["remember", "a", "b"]).func
    assert parser.parse_args(["get", "a"]).func is parser.parse_args(["find", "a"]).func
    assert parser.parse_args(["delete", "a"]).func is parser.parse_args(["forget", "a"]).func


class TestDotenv:
    def test_env_file_in_working_directory(self, tmp_path: Path, monkeypatch, capsys):
        target = tmp_path / "from_dotenv.json"
        (tmp_path / ".env").write_text(f"WWT_STORE_PATH={target}\n")
        monkeypatch.setenv("WWT_STORE_PATH", "unused")
        monkeypatch.delenv("WWT_STORE_PATH")
        monkeypatch.delenv("WWT_MIN_SCORE", raising=False)
        monkeypatch.chdir(tmp_path)

        assert main(["remember", "ls", "list files"]) == 0
        assert json.loads(target.read_text()) == {"ls": "list files"}

    def test_real_environment_wins(self, tmp_path: Path, store_path: Path):
        (tmp_path / ".env").write_text(f"WWT_STORE_PATH={tmp_path / 'ignored.json'}\n")
        assert main(["remember", "ls", "list files"]) == 0
        assert store_path.exists()
        assert not (tmp_path / "ignored.json").exists()


class TestUndecodableArguments:
    @pytest.mark.parametrize(
        "argv",
        [
            ["remember", "cat \udcff", "weird"],
            ["remember", "cat", "weird \udcff"],
            ["find", "weird \udcff"],
            ["forget", "cat \udcff"],
        ],
    )
    def test_usage_error_not_traceback(self, store_path: Path, capsys, argv):
        with pytest.raises(SystemExit) as info:
            main(argv)
        assert info.value.code == 2
        assert "not valid UTF-8" in capsys.readouterr().err
        assert not store_path.exists()


def test_find_help_mentions_short_words(capsys):
    with pytest.raises(SystemExit):
        main(["find", "--help"])
    assert '"ls" does not find "lsblk"' in capsys.readouterr().out

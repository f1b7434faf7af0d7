from pathlib import Path

import pytest

from dotforge.paths import expand_tilde, get_version, is_absolute, normalize


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


def test_version_matches_package():
    assert get_version() == "0.2.0"


def test_tilde_alone_is_home(fake_home):
    assert expand_tilde("~") == fake_home


def test_tilde_with_subpath(fake_home):
    assert expand_tilde("~/dots/vimrc") == fake_home / "dots" / "vimrc"


def test_tilde_only_as_whole_component(fake_home):
    assert expand_tilde("~other/file") == Path("~other/file")


def test_path_without_tilde_unchanged(fake_home, tmp_path):
    target = tmp_path / "plain"
    assert expand_tilde(target) == target
    assert expand_tilde("relative/path") == Path("relative/path")


def test_is_absolute(tmp_path):
    assert is_absolute(tmp_path) is True
    assert is_absolute("relative/path") is False


def test_normalize_relative_uses_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = normalize("sub/file")
    assert result == Path.cwd() / "sub" / "file"
    assert result.is_absolute()


def test_normalize_absolute_unchanged(tmp_path):
    assert normalize(tmp_path) == tmp_path


def test_normalize_expands_tilde(fake_home):
    result = normalize("~/x")
    assert result == fake_home / "x"
    assert result.is_absolute()
"""Tests for tap completion linking and persisted settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brewcomp.completions.linking import (
    LINK_SETTING,
    MESSAGE_SETTING,
    Tap,
    completions_to_link,
    iter_taps,
    link,
    link_completions,
    link_tap_completions,
    show_completions_message_if_needed,
    unlink,
    unlink_tap_completions,
)
from brewcomp.models import ConfigurationError
from brewcomp.settings import Settings


def _add_tap(taps_dir: Path, name: str, files: dict[str, list[str]]) -> Path:
    user, repo = name.split("/")
    tap_path = taps_dir / user / repo
    tap_path.mkdir(parents=True)
    for shell, names in files.items():
        shell_dir = tap_path / "completions" / shell
        shell_dir.mkdir(parents=True)
        for file_name in names:
            (shell_dir / file_name).write_text(f"# {name} {shell}\n")
    return tap_path


@pytest.fixture
def taps_dir(tmp_path: Path) -> Path:
    """A taps directory with an official tap, a third-party tap and a tap without completions."""
    taps = tmp_path / "taps"
    _add_tap(taps, "homebrew/core", {"zsh": ["_core"]})
    _add_tap(taps, "alice/tools", {"bash": ["tool"], "zsh": ["_tool"]})
    _add_tap(taps, "bob/empty", {})
    return taps


@pytest.fixture
def link_dirs(tmp_path: Path) -> dict[str, Path]:
    """Per-shell link directories."""
    return {"bash": tmp_path / "links" / "bash", "zsh": tmp_path / "links" / "zsh"}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings stored in a temporary file."""
    return Settings(tmp_path / "settings.json")


class TestSettings:
    """Test the JSON settings store."""

    def test_unset(self, settings):
        assert settings.read("anything") is None

    def test_write_read(self, settings):
        settings.write("a", True)
        settings.write("b", "x")
        assert settings.read("a") is True
        assert json.loads(settings.path.read_text()) == {"a": True, "b": "x"}

    def test_corrupt_file(self, settings):
        settings.path.write_text("{")
        with pytest.raises(ConfigurationError) as excinfo:
            settings.read("a")
        assert excinfo.value.resource == settings.path

    def test_not_an_object(self, settings):
        settings.path.write_text("[]")
        with pytest.raises(ConfigurationError):
            settings.read("a")


class TestTaps:
    """Test tap discovery."""

    def test_iter_taps(self, taps_dir):
        assert [tap.name for tap in iter_taps(taps_dir)] == ["alice/tools", "bob/empty", "homebrew/core"]

    def test_missing_dir(self, tmp_path):
        assert list(iter_taps(tmp_path / "nope")) == []

    def test_official(self, taps_dir):
        assert Tap("homebrew", "core", taps_dir / "homebrew" / "core").official is True
        assert Tap("alice", "tools", taps_dir / "alice" / "tools").official is False

    def test_completions_to_link(self, taps_dir):
        assert completions_to_link(taps_dir) is True

    def test_nothing_to_link(self, tmp_path):
        taps = tmp_path / "taps"
        _add_tap(taps, "homebrew/core", {"zsh": ["_core"]})
        _add_tap(taps, "bob/empty", {})
        assert completions_to_link(taps) is False


class TestLinkTap:
    """Test linking the files of a single tap."""

    def test_links_files(self, taps_dir, link_dirs):
        tap = Tap("alice", "tools", taps_dir / "alice" / "tools")
        assert link_tap_completions(tap, link_dirs) == 2
        assert (link_dirs["bash"] / "tool").resolve() == (tap.completions_dir("bash") / "tool").resolve()
        assert (link_dirs["zsh"] / "_tool").is_symlink()

    def test_relink_is_noop(self, taps_dir, link_dirs):
        tap = Tap("alice", "tools", taps_dir / "alice" / "tools")
        link_tap_completions(tap, link_dirs)
        assert link_tap_completions(tap, link_dirs) == 0

    def test_foreign_file_untouched(self, taps_dir, link_dirs):
        link_dirs["bash"].mkdir(parents=True)
        (link_dirs["bash"] / "tool").write_text("mine")
        tap = Tap("alice", "tools", taps_dir / "alice" / "tools")
        assert link_tap_completions(tap, link_dirs) == 1
        assert (link_dirs["bash"] / "tool").read_text() == "mine"

    def test_foreign_link_untouched(self, tmp_path, taps_dir, link_dirs):
        elsewhere = tmp_path / "elsewhere"
        elsewhere.write_text("other")
        link_dirs["zsh"].mkdir(parents=True)
        (link_dirs["zsh"] / "_tool").symlink_to(elsewhere)
        tap = Tap("alice", "tools", taps_dir / "alice" / "tools")
        link_tap_completions(tap, link_dirs)
        assert (link_dirs["zsh"] / "_tool").resolve() == elsewhere.resolve()

    def test_unlink_only_own_links(self, tmp_path, taps_dir, link_dirs):
        alice = Tap("alice", "tools", taps_dir / "alice" / "tools")
        core = Tap("homebrew", "core", taps_dir / "homebrew" / "core")
        link_tap_completions(alice, link_dirs)
        link_tap_completions(core, link_dirs)
        assert unlink_tap_completions(alice, link_dirs) == 2
        assert sorted(p.name for p in link_dirs["zsh"].iterdir()) == ["_core"]


class TestLinkCommands:
    """Test the link/unlink/state operations."""

    def test_link(self, settings, taps_dir, link_dirs):
        link(settings, taps_dir, link_dirs)
        assert link_completions(settings) is True
        assert settings.read(LINK_SETTING) is True
        assert sorted(p.name for p in link_dirs["zsh"].iterdir()) == ["_core", "_tool"]
        assert [p.name for p in link_dirs["bash"].iterdir()] == ["tool"]

    def test_unlink_keeps_official(self, settings, taps_dir, link_dirs):
        link(settings, taps_dir, link_dirs)
        unlink(settings, taps_dir, link_dirs)
        assert link_completions(settings) is False
        assert [p.name for p in link_dirs["zsh"].iterdir()] == ["_core"]
        assert list(link_dirs["bash"].iterdir()) == []

    def test_state_default(self, settings):
        assert link_completions(settings) is False


class TestCompletionsMessage:
    """Test the one-time opt-in message."""

    @pytest.fixture(autouse=True)
    def _plain_output(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

    def test_shown_once(self, settings, taps_dir, capsys):
        assert show_completions_message_if_needed(settings, taps_dir) is True
        out = capsys.readouterr().out
        assert out.startswith("==> Completions for external commands are unlinked by default!\n")
        assert "brewcomp link" in out
        assert settings.read(MESSAGE_SETTING) is True

        assert show_completions_message_if_needed(settings, taps_dir) is False
        assert capsys.readouterr().out == ""

    def test_nothing_to_link(self, settings, tmp_path, capsys):
        assert show_completions_message_if_needed(settings, tmp_path / "no-taps") is False
        assert capsys.readouterr().out == ""
        assert settings.read(MESSAGE_SETTING) is None

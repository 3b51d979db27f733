"""Linking of completion files shipped by third-party taps.

Taps live in `<taps_dir>/<user>/<repo>` and may provide completion files in
`completions/bash/` and `completions/zsh/`. Linking is opt-in: once enabled
with `link`, every tap's files are symlinked into the per-shell directories.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..ansi import ohai
from ..config import coerce_to_bool
from ..constants import OFFICIAL_TAP_USER, SUPPORTED_SHELLS
from ..logging_setup import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from ..settings import Settings

__all__ = [
    "Tap",
    "completions_to_link",
    "iter_taps",
    "link",
    "link_completions",
    "link_tap_completions",
    "show_completions_message_if_needed",
    "unlink",
    "unlink_tap_completions",
]

LINK_SETTING = "linkcompletions"
MESSAGE_SETTING = "completionsmessageshown"


@dataclass(frozen=True)
class Tap:
    """A tap directory."""

    user: str
    repo: str
    path: Path

    @property
    def name(self) -> str:
        return f"{self.user}/{self.repo}"

    @property
    def official(self) -> bool:
        return self.user == OFFICIAL_TAP_USER

    def completions_dir(self, shell: str) -> Path:
        return self.path / "completions" / shell


def iter_taps(taps_dir: Path) -> Iterator[Tap]:
    """Yield the taps found under `taps_dir`, sorted by name."""
    if not taps_dir.is_dir():
        return
    for user_dir in sorted(taps_dir.iterdir()):
        if not user_dir.is_dir():
            continue
        for repo_dir in sorted(user_dir.iterdir()):
            if repo_dir.is_dir():
                yield Tap(user=user_dir.name, repo=repo_dir.name, path=repo_dir)


def link_tap_completions(tap: Tap, link_dirs: Mapping[str, Path]) -> int:
    """Symlink the completion files of a tap into the per-shell directories.

    Files already present and not owned by the tap are left untouched.

    Returns:
        The number of links created
    """
    log = get_logger("link")
    created = 0
    for shell in SUPPORTED_SHELLS:
        source_dir = tap.completions_dir(shell)
        if shell not in link_dirs or not source_dir.is_dir():
            continue
        target_dir = link_dirs[shell]
        target_dir.mkdir(parents=True, exist_ok=True)
        for source in sorted(source_dir.iterdir()):
            target = target_dir / source.name
            if target.is_symlink():
                if target.resolve() == source.resolve():
                    continue
                if not _points_into(target, tap.path):
                    log.warning("Not linking %s: %s already links elsewhere", source, target)
                    continue
                target.unlink()
            elif target.exists():
                log.warning("Not linking %s: %s already exists", source, target)
                continue
            target.symlink_to(source)
            created += 1
    log.debug("%s: %d completion links created", tap.name, created)
    return created


def unlink_tap_completions(tap: Tap, link_dirs: Mapping[str, Path]) -> int:
    """Remove the links pointing into a tap's completion files.

    Returns:
        The number of links removed
    """
    removed = 0
    for shell in SUPPORTED_SHELLS:
        target_dir = link_dirs.get(shell)
        if target_dir is None or not target_dir.is_dir():
            continue
        for target in sorted(target_dir.iterdir()):
            if target.is_symlink() and _points_into(target, tap.path):
                target.unlink()
                removed += 1
    get_logger("link").debug("%s: %d completion links removed", tap.name, removed)
    return removed


def _points_into(link_path: Path, directory: Path) -> bool:
    """Tell whether a symlink targets a file inside `directory`."""
    target = link_path.readlink()
    if not target.is_absolute():
        target = link_path.parent / target
    return target.resolve().is_relative_to(directory.resolve())


def link(settings: Settings, taps_dir: Path, link_dirs: Mapping[str, Path]) -> None:
    """Enable linking and link the completions of every tap."""
    settings.write(LINK_SETTING, True)
    for tap in iter_taps(taps_dir):
        link_tap_completions(tap, link_dirs)


def unlink(settings: Settings, taps_dir: Path, link_dirs: Mapping[str, Path]) -> None:
    """Disable linking and unlink the completions of every non-official tap."""
    settings.write(LINK_SETTING, False)
    for tap in iter_taps(taps_dir):
        if tap.official:
            continue
        unlink_tap_completions(tap, link_dirs)


def link_completions(settings: Settings) -> bool:
    """Tell whether tap completions are linked."""
    return coerce_to_bool(settings.read(LINK_SETTING))


def completions_to_link(taps_dir: Path) -> bool:
    """Tell whether a non-official tap ships completions for a supported shell."""
    for tap in iter_taps(taps_dir):
        if tap.official:
            continue
        if any(tap.completions_dir(shell).exists() for shell in SUPPORTED_SHELLS):
            return True
    return False


def show_completions_message_if_needed(settings: Settings, taps_dir: Path) -> bool:
    """Explain the opt-in once, when some tap has completions to link.

    Returns:
        True if the message was shown
    """
    if coerce_to_bool(settings.read(MESSAGE_SETTING)):
        return False
    if not completions_to_link(taps_dir):
        return False

    ohai("Completions for external commands are unlinked by default!")
    print(
        "To opt-in to automatically linking external tap shell completion files, run:\n"
        "  brewcomp link\n"
        "Then, follow the directions at https://docs.brew.sh/Shell-Completion",
        file=sys.stdout,
    )

    settings.write(MESSAGE_SETTING, True)
    return True

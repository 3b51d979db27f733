"""Generic fixtures."""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path

import pytest

from brewcomp.commands import ManifestMetadata

SAMPLE_MANIFEST = {
    "aliases": {
        "ls": "list",
        "-S": "search",
        "--config": "config",
    },
    "commands": {
        "--cache": {
            "description": "Display Homebrew's download cache.",
            "options": [["--formula", "Only show formulae."]],
        },
        "config": {
            "description": "Show Homebrew and system configuration info useful for debugging.",
            "options": [["--debug", ""]],
        },
        "doctor": {
            "description": "Check your system for potential problems.",
            "options": [["--list-checks", "List all audit methods."]],
            "named_args": [{"kind": "diagnostic_check"}],
        },
        "install": {
            "description": "Install a formula or cask. Additional options specific to a formula may be appended.",
            "options": [
                ["--debug", "Display any debugging information."],
                ["--[no-]quarantine", "Disable/enable quarantining of downloads."],
                ["--force", ""],
            ],
            "named_args": [{"kind": "formula"}, {"kind": "cask"}],
        },
        "list": {
            "description": "List all installed formulae and casks.",
            "options": [
                ["--formula", "List only formulae."],
                ["--cask", "List only casks."],
                ["-1", "Force output to be one entry per line."],
            ],
            "named_args": [{"kind": "installed_formula"}, {"kind": "installed_cask"}],
        },
        "search": {
            "description": "Perform a substring search of cask tokens and formula names.",
            "options": [["--desc", "Search for formulae with a description matching <text>."]],
        },
        "services": {
            "description": "Manage background services.",
            "options": [["--all", "Run on all services."]],
            "named_args": ["list", "run", "start", {"kind": "installed_formula"}, "stop"],
        },
        "tap": {
            "description": "Tap a formula repository.",
            "options": [["--force", "Force install core taps."]],
            "named_args": [{"kind": "tap"}, {"kind": "future-kind"}],
        },
        "uninstal": {
            "description": "Uninstall a formula or cask.",
            "options": [["--force", "Delete all installed versions."]],
        },
        "cask install": {
            "description": "Removed.",
            "options": [["--force", ""]],
        },
        "update": {
            "description": "Fetch the newest version of Homebrew.",
            "options": [],
        },
    },
}


def pytest_configure():
    "Runs once before all"
    from brewcomp.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def manifest_data() -> dict:
    """A fresh copy of the sample manifest document."""
    return deepcopy(SAMPLE_MANIFEST)


@pytest.fixture
def metadata(manifest_data: dict) -> ManifestMetadata:
    """Command metadata built from the sample manifest."""
    return ManifestMetadata.from_dict(manifest_data)


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_data: dict) -> Path:
    """The sample manifest written as a JSON file."""
    path = tmp_path / "commands.json"
    path.write_text(json.dumps(manifest_data))
    return path


@pytest.fixture
def test_logger():
    """A logger for components requiring one."""
    from brewcomp.logging_setup import get_logger

    return get_logger("tests")

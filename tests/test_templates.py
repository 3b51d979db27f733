"""Tests for completion templates and slot rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from brewcomp.completions.templates import TEMPLATE_SLOTS, CompletionTemplate, load_template
from brewcomp.models import ConfigurationError

BASH_TEMPLATE = """# header
{{ completion_functions }}
case "$cmd" in
  {{ function_mappings }}
esac
"""


def _template(source: str, shell: str = "bash") -> CompletionTemplate:
    return CompletionTemplate(shell=shell, source=source, path=Path(f"/nowhere/{shell}.tmpl"))


class TestRender:
    """Test slot substitution."""

    def test_indentation_follows_placeholder(self):
        result = _template(BASH_TEMPLATE).render(completion_functions=[], function_mappings=["a) _a ;;", "b) _b ;;"])
        assert '  a) _a ;;\n  b) _b ;;\nesac\n' in result

    def test_multiline_blocks(self):
        result = _template(BASH_TEMPLATE).render(completion_functions=["f() {\n  x\n}\n", "g() {\n  y\n}\n"], function_mappings=[])
        assert result.startswith("# header\nf() {\n  x\n}\n\ng() {\n  y\n}\ncase")

    def test_empty_lines_not_indented(self):
        template = _template("x\n    {{ completion_functions }}\n    {{ function_mappings }}\n")
        result = template.render(completion_functions=["a\n\nb"], function_mappings=["c"])
        assert result == "x\n    a\n\n    b\n    c\n"

    def test_empty_slot(self):
        result = _template(BASH_TEMPLATE).render(completion_functions=[], function_mappings=[])
        assert result == '# header\n\ncase "$cmd" in\n\nesac\n'

    def test_missing_value(self):
        with pytest.raises(ConfigurationError, match="function_mappings"):
            _template(BASH_TEMPLATE).render(completion_functions=[])

    def test_slots(self):
        assert _template(BASH_TEMPLATE).slots == TEMPLATE_SLOTS["bash"]


class TestValidate:
    """Test template validation."""

    def test_valid(self):
        _template(BASH_TEMPLATE).validate()

    def test_missing_slot(self):
        with pytest.raises(ConfigurationError, match="missing slots: function_mappings"):
            _template("{{ completion_functions }}\n").validate()

    def test_unknown_slot(self):
        with pytest.raises(ConfigurationError, match="unknown slots: extra"):
            _template(BASH_TEMPLATE + "{{ extra }}\n").validate()

    def test_inline_placeholder(self):
        with pytest.raises(ConfigurationError, match="stand alone"):
            _template(BASH_TEMPLATE + "echo {{ completion_functions }}\n").validate()

    def test_slots_are_per_shell(self):
        with pytest.raises(ConfigurationError):
            _template(BASH_TEMPLATE, shell="zsh").validate()


class TestLoadTemplate:
    """Test reading templates from disk."""

    @pytest.mark.parametrize("shell", ["bash", "zsh"])
    def test_packaged_templates(self, shell):
        template = load_template(shell)
        assert template.slots == TEMPLATE_SLOTS[shell]

    def test_missing_template(self, tmp_path):
        with pytest.raises(ConfigurationError) as excinfo:
            load_template("bash", tmp_path)
        assert excinfo.value.resource == tmp_path / "bash.tmpl"

    def test_corrupt_template(self, tmp_path):
        (tmp_path / "zsh.tmpl").write_text("#compdef brew\n{{ aliases }}\n")
        with pytest.raises(ConfigurationError, match="missing slots"):
            load_template("zsh", tmp_path)

    def test_custom_template(self, tmp_path):
        (tmp_path / "bash.tmpl").write_text(BASH_TEMPLATE)
        assert load_template("bash", tmp_path).source == BASH_TEMPLATE

    def test_unsupported_shell(self):
        with pytest.raises(ConfigurationError, match="fish"):
            load_template("fish")

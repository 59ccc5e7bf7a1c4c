"""
Tests for template_loader module.
"""

import json

import pytest

from zeta.story.template_loader import (
    DEFAULT_TEMPLATE_PATH,
    load_prompt_template,
    render_template,
)


def _write_template(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadPromptTemplate:
    """Tests for load_prompt_template function."""

    def test_bundled_template_exists(self):
        assert DEFAULT_TEMPLATE_PATH.exists()

    def test_loads_bundled_template(self):
        template = load_prompt_template()

        assert template["template_id"] == "bedtime-toddler-v1"
        assert template["placeholders"] == [
            "hero", "setting", "helper", "challenge", "magical_element", "ending"
        ]
        assert isinstance(template["template"], list)

    def test_cached_per_path(self):
        assert load_prompt_template() is load_prompt_template()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_prompt_template(str(tmp_path / "missing.json"))

    def test_missing_keys_raise(self, tmp_path):
        path = _write_template(tmp_path / "bad.json", {"template_id": "x"})

        with pytest.raises(ValueError, match="missing keys"):
            load_prompt_template(path)

    def test_unused_placeholder_raises(self, tmp_path):
        path = _write_template(tmp_path / "unused.json", {
            "template_id": "x",
            "placeholders": ["hero", "setting"],
            "template": ["Hero: {hero}"],
        })

        with pytest.raises(ValueError, match="setting"):
            load_prompt_template(path)

    def test_loads_custom_template(self, tmp_path):
        path = _write_template(tmp_path / "custom.json", {
            "template_id": "custom",
            "placeholders": ["hero"],
            "template": ["A tale of {hero}."],
        })

        assert load_prompt_template(path)["template_id"] == "custom"


class TestRenderTemplate:
    """Tests for render_template function."""

    def test_fills_placeholders(self):
        template = {"template_id": "t", "placeholders": ["hero"], "template": ["Hi {hero}", "Bye"]}

        assert render_template(template, {"hero": "Mira"}) == "Hi Mira\nBye"

    def test_values_are_not_reformatted(self):
        template = {"template_id": "t", "placeholders": ["hero"], "template": ["{hero}"]}

        assert render_template(template, {"hero": "{setting}"}) == "{setting}"

    def test_missing_value_raises(self):
        template = {"template_id": "t", "placeholders": ["hero"], "template": ["{hero}"]}

        with pytest.raises(KeyError):
            render_template(template, {})

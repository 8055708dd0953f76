#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options_config.py
"""Unit tests for rendering options and configuration file loading."""

import argparse
import json

import pytest

from gdoc2html.api import _create_options_from_kwargs
from gdoc2html.cli.config import (
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)
from gdoc2html.options import GoogleDocsHtmlOptions, HtmlStyleTable


@pytest.mark.unit
class TestOptions:
    """Tests for option dataclasses."""

    def test_defaults(self):
        options = GoogleDocsHtmlOptions()
        assert options.escape_html is True
        assert options.image_proxy_path == "/api/image-proxy"
        assert options.points_to_pixels == 1.333
        assert options.max_nesting_depth == 32

    def test_create_updated_is_a_copy(self):
        options = GoogleDocsHtmlOptions()
        updated = options.create_updated(number_images=False)
        assert updated.number_images is False
        assert options.number_images is True

    @pytest.mark.parametrize(
        "kwargs",
        [{"points_to_pixels": 0}, {"list_indent_px": -1}, {"max_nesting_depth": 0}, {"image_proxy_path": "proxy"}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GoogleDocsHtmlOptions(**kwargs)

    def test_alignment_class(self):
        style = HtmlStyleTable()
        assert style.alignment_class("CENTER") == "text-center"
        assert style.alignment_class(None) == "text-left"
        assert style.alignment_class("START") == "text-left"

    def test_kwargs_overlay_style_fields(self):
        options = _create_options_from_kwargs(None, paragraph_class="prose", number_images=False, bogus=1)
        assert options.style.paragraph_class == "prose"
        assert options.number_images is False

    def test_no_kwargs_keeps_options(self):
        assert _create_options_from_kwargs(None) is None


@pytest.mark.unit
class TestConfigFiles:
    """Tests for configuration file formats and discovery."""

    def test_toml(self, tmp_path):
        path = tmp_path / ".gdoc2html.toml"
        path.write_text('number_images = false\n\n[style]\nparagraph_class = "prose"\n', encoding="utf-8")
        config = load_config_file(path)
        assert config == {"number_images": False, "style": {"paragraph_class": "prose"}}

    def test_yaml(self, tmp_path):
        path = tmp_path / "conf.yaml"
        path.write_text("proxy_domains:\n  - cdn.example.org\n", encoding="utf-8")
        assert load_config_file(path) == {"proxy_domains": ["cdn.example.org"]}

    def test_json(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text(json.dumps({"list_indent_px": 10}), encoding="utf-8")
        assert load_config_file(path) == {"list_indent_px": 10}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.gdoc2html]\nescape_html = false\n', encoding="utf-8")
        assert load_config_file(path) == {"escape_html": False}

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(tmp_path / "absent.toml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "conf.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported"):
            load_config_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "conf.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="mapping"):
            load_config_file(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "conf.toml"
        path.write_text("= nope", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(path)

    def test_find_in_parents(self, tmp_path):
        (tmp_path / ".gdoc2html.json").write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == (tmp_path / ".gdoc2html.json").resolve()

    def test_explicit_path_wins(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"list_indent_px": 5}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"list_indent_px": 7}', encoding="utf-8")
        assert load_config_with_priority(str(explicit), str(env)) == {"list_indent_px": 5}
        assert load_config_with_priority(None, str(env)) == {"list_indent_px": 7}


@pytest.mark.unit
class TestOptionsFromConfig:
    """Tests for building options from a configuration mapping."""

    def test_top_level_and_style(self):
        options = options_from_config(
            {
                "proxy_domains": ["cdn.example.org"],
                "style": {"list_class": "list", "named_styles": {"TITLE": ["h1", "big"]}},
            }
        )
        assert options.proxy_domains == ("cdn.example.org",)
        assert options.style.list_class == "list"
        assert options.style.named_styles == {"TITLE": ("h1", "big")}

    def test_unknown_keys_ignored(self, caplog):
        options = options_from_config({"colour": "red", "style": {"glow": True}})
        assert options == GoogleDocsHtmlOptions()
        assert "colour" in caplog.text
        assert "glow" in caplog.text

    def test_invalid_value(self):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid configuration"):
            options_from_config({"max_nesting_depth": 0})

    def test_style_must_be_table(self):
        with pytest.raises(argparse.ArgumentTypeError):
            options_from_config({"style": "dark"})

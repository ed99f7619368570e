"""Tests for ThreadConfig, config loading and the preprocessor hook."""

from __future__ import annotations

import json

import pytest

from threadstyle import ThreadConfig, load_config, thread_preprocessor
from threadstyle.errors import ConfigurationError, ThreadStyleError
from threadstyle.preprocessor import PREPROCESSOR_NAME


class TestThreadConfig:
    def test_defaults(self):
        config = ThreadConfig()
        assert config.attribute_name == "cs"
        assert config.element_names == frozenset()
        assert config.file_identifier is None
        assert not config.include_story_files
        assert config.custom_property_selector == ":root"

    def test_element_names_are_coerced(self):
        config = ThreadConfig(element_names=["Box", "Box", "Flexbox"])
        assert config.element_names == frozenset({"Box", "Flexbox"})

    def test_empty_attribute_name(self):
        with pytest.raises(ConfigurationError):
            ThreadConfig(attribute_name="")

    def test_design_system_must_be_a_mapping(self):
        with pytest.raises(ConfigurationError):
            ThreadConfig(design_system=["red"])

    @pytest.mark.parametrize(
        "filename, expected",
        [("Box.stories.svelte", True), ("Box.story.svelte", True), ("Box.svelte", False)],
    )
    def test_story_files(self, filename, expected):
        assert ThreadConfig().is_story_file(filename) is expected

    def test_file_identifier_gate(self):
        assert ThreadConfig().accepts_file("Box.svelte")
        config = ThreadConfig(file_identifier="thread")
        assert config.accepts_file("Box.thread.svelte")
        assert not config.accepts_file("Box.svelte")

    def test_merged_ignores_none(self):
        config = ThreadConfig(attribute_name="sx").merged(attribute_name=None, file_identifier="t")
        assert config.attribute_name == "sx"
        assert config.file_identifier == "t"


class TestFromDict:
    def test_camel_case_aliases(self):
        config = ThreadConfig.from_dict(
            {
                "attributeName": "sx",
                "elementNames": ["Box"],
                "shouldIncludeStorybookFiles": True,
                "designSystem": {"space": {"s": "4px"}},
            }
        )
        assert config.attribute_name == "sx"
        assert config.element_names == frozenset({"Box"})
        assert config.include_story_files
        assert config.design_system == {"space": {"s": "4px"}}

    def test_snake_case_keys(self):
        assert ThreadConfig.from_dict({"file_identifier": "t"}).file_identifier == "t"

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="colour"):
            ThreadConfig.from_dict({"colour": "red"})

    def test_element_names_string_is_rejected(self):
        with pytest.raises(ConfigurationError):
            ThreadConfig.from_dict({"elementNames": "Box"})


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "thread.json"
        path.write_text(json.dumps({"elementNames": ["Box"], "fileIdentifier": "thread"}))
        config = load_config(path)
        assert config.element_names == frozenset({"Box"})
        assert config.file_identifier == "thread"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "thread.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Could not read config"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.json")

    def test_top_level_must_be_an_object(self, tmp_path):
        path = tmp_path / "thread.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_config(path)


class TestPreprocessor:
    def test_name(self, config):
        assert thread_preprocessor(config).name == PREPROCESSOR_NAME == "thread-preprocessor"

    def test_markup_returns_code(self, config):
        preprocessor = thread_preprocessor(config)
        result = preprocessor.markup("<Box cs={{ gap: '1px' }} />", "Box.svelte")
        assert result == {"code": '<Box style="gap: 1px;" />'}

    def test_missing_filename(self, config):
        with pytest.raises(ConfigurationError, match="No filename provided"):
            thread_preprocessor(config).markup("<Box />")

    def test_errors_share_a_base_class(self):
        assert issubclass(ConfigurationError, ThreadStyleError)

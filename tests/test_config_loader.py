"""Tests for loading configuration fragments from disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from mcpbrowse.config import load_config_file
from mcpbrowse.errors import ConfigLoadError
from mcpbrowse.tools_metadata import ToolCapability


class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_no_path_returns_empty_fragment(self) -> None:
        """Omitting the file is not an error and sets nothing."""
        config = load_config_file(None)
        assert config.model_fields_set == set()

    def test_loads_yaml(self, tmp_path: Path) -> None:
        """A YAML document populates only the keys it contains."""
        path = tmp_path / "config.yaml"
        path.write_text(
            """
browser:
  browser_name: firefox
  launch_options:
    executable_path: /opt/firefox/firefox
server:
  port: 8931
capabilities: [tabs, pdf]
vision: true
""",
        )

        config = load_config_file(path)

        assert config.model_fields_set == {"browser", "server", "capabilities", "vision"}
        assert config.browser.browser_name == "firefox"
        assert config.browser.model_fields_set == {"browser_name", "launch_options"}
        assert config.browser.launch_options == {"executable_path": "/opt/firefox/firefox"}
        assert config.server.port == 8931
        assert config.capabilities == (ToolCapability.TABS, ToolCapability.PDF)
        assert config.vision is True

    def test_loads_json(self, tmp_path: Path) -> None:
        """JSON documents are accepted as well."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_dir": str(tmp_path / "out"), "server": {"host": "0.0.0.0"}}))

        config = load_config_file(path)

        assert config.output_dir == tmp_path / "out"
        assert config.server.host == "0.0.0.0"  # noqa: S104

    def test_empty_file_is_empty_fragment(self, tmp_path: Path) -> None:
        """An empty document sets nothing."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config_file(path).model_fields_set == set()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A path that was given but does not exist is fatal."""
        path = tmp_path / "missing.yaml"
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config_file(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert str(path) in str(exc_info.value)

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        """Unparsable content is fatal, not silently replaced by defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("browser: [unclosed")
        with pytest.raises(ConfigLoadError, match="Failed to load config file"):
            load_config_file(path)

    @pytest.mark.parametrize("content", ["- chromium\n- firefox\n", "false\n", "0\n", "[]\n", "''\n"])
    def test_non_mapping_document_raises(self, tmp_path: Path, content: str) -> None:
        """The top level must be a mapping, even when the document is falsy."""
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigLoadError, match="expected a mapping"):
            load_config_file(path)

    def test_undecodable_bytes_raise(self, tmp_path: Path) -> None:
        """Bytes that are not valid UTF-8 are a load error, not a raw decode error."""
        path = tmp_path / "config.yaml"
        path.write_bytes(b"vision: \xff\xfe true\n")
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config_file(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, yaml.YAMLError)

    @pytest.mark.parametrize(
        "content",
        [
            "server:\n  port: not-a-port\n",
            "browser:\n  browser_name: opera\n",
            "capabilities: [tabs, tbas]\n",
            "unknown_section: {}\n",
            "browser:\n  launch_options: headless\n",
        ],
    )
    def test_schema_mismatch_raises(self, tmp_path: Path, content: str) -> None:
        """Wrong value types, unknown keys and unknown capabilities are load errors."""
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config_file(path)
        assert isinstance(exc_info.value.cause, ValidationError)

"""Tests for openenum configuration loading."""

from pathlib import Path

import pytest

from openenum.core.config import AnnotatorKind, OpenEnumConfig, load_config
from openenum.core.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_files(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config == OpenEnumConfig()
        assert config.module == "generated"
        assert config.annotator == AnnotatorKind.PYDANTIC

    def test_openenum_toml(self, tmp_path: Path):
        (tmp_path / "openenum.toml").write_text(
            'module = "myapp.enums"\nannotator = "none"\noutput = "src/enums.py"\n'
        )
        config = load_config(tmp_path)
        assert config.module == "myapp.enums"
        assert config.annotator == AnnotatorKind.NONE
        assert config.get_output_path(tmp_path) == tmp_path / "src" / "enums.py"

    def test_pyproject_tool_table(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.openenum]\nuse_title_as_class_name = true\n'
        )
        config = load_config(tmp_path)
        assert config.use_title_as_class_name is True
        assert config.get_output_path(tmp_path) is None

    def test_pyproject_without_table(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert load_config(tmp_path) == OpenEnumConfig()

    def test_openenum_toml_takes_precedence(self, tmp_path: Path):
        (tmp_path / "openenum.toml").write_text('module = "first"\n')
        (tmp_path / "pyproject.toml").write_text('[tool.openenum]\nmodule = "second"\n')
        assert load_config(tmp_path).module == "first"

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "openenum.toml").write_text("module = ")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_unknown_key(self, tmp_path: Path):
        (tmp_path / "openenum.toml").write_text('modul = "typo"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_absolute_output(self, tmp_path: Path):
        config = OpenEnumConfig(output=str(tmp_path / "out.py"))
        assert config.get_output_path(Path("/elsewhere")) == tmp_path / "out.py"

import pytest

from lllcheck.core.lint.config import CheckConfig, ConfigLoader, find_config_file
from lllcheck.core.lint.errors import ConfigError


def test_defaults_without_file():
    config = ConfigLoader().load()
    assert config == CheckConfig(line_length=120, tab_width=1)


def test_missing_file_uses_defaults(tmp_path):
    config = ConfigLoader(tmp_path / "nope.yaml").load()
    assert config.line_length == 120
    assert config.tab_width == 1


def test_load_underscore_keys(tmp_path):
    path = tmp_path / ".lllcheck.yaml"
    path.write_text("line_length: 100\ntab_width: 4\n")
    config = ConfigLoader(str(path)).load()
    assert config == CheckConfig(line_length=100, tab_width=4)


def test_load_hyphenated_keys_under_section(tmp_path):
    path = tmp_path / "lllcheck.yaml"
    path.write_text("lll:\n  line-length: 80\n  tab-width: 8\n")
    config = ConfigLoader(path).load()
    assert config == CheckConfig(line_length=80, tab_width=8)


def test_partial_config_keeps_other_default(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("tab-width: 2\nsomething_else: true\n")
    config = ConfigLoader(path).load()
    assert config == CheckConfig(line_length=120, tab_width=2)


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("")
    assert ConfigLoader(path).load() == CheckConfig()


def test_invalid_yaml_raises_config_error(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("line_length: [1, 2\n")
    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


def test_non_mapping_yaml_raises_config_error(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


@pytest.mark.parametrize("content", [
    "line_length: 0\n",
    "line_length: -5\n",
    "tab_width: -1\n",
    "line_length: '120'\n",
    "tab_width: true\n",
])
def test_out_of_range_values_rejected(tmp_path, content):
    path = tmp_path / "c.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        ConfigLoader(path).load()


def test_zero_tab_width_is_valid():
    config = CheckConfig(line_length=10, tab_width=0).validate()
    assert config.tab_spaces == ""


def test_tab_spaces():
    assert CheckConfig(tab_width=3).tab_spaces == "   "


def test_raw_config_after_load(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("line-length: 99\n")
    loader = ConfigLoader(path)
    loader.load()
    assert loader.get_raw_config() == {"line_length": 99, "tab_width": 1}


def test_find_config_file_priority(tmp_path):
    assert find_config_file(tmp_path) is None

    (tmp_path / "lllcheck.yaml").write_text("line_length: 1\n")
    assert find_config_file(tmp_path) == tmp_path / "lllcheck.yaml"

    (tmp_path / ".lllcheck").mkdir()
    (tmp_path / ".lllcheck" / "config.yaml").write_text("line_length: 2\n")
    assert find_config_file(str(tmp_path)) == tmp_path / ".lllcheck" / "config.yaml"


def test_config_error_names_config_file(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("line-length: 0\n")

    with pytest.raises(ConfigError) as excinfo:
        ConfigLoader(path).load()

    assert excinfo.value.file_path == str(path)
    assert "line_length must be > 0" in str(excinfo.value)


def test_config_error_without_file():
    with pytest.raises(ConfigError) as excinfo:
        CheckConfig(tab_width=-2).validate()

    assert excinfo.value.file_path == "<config>"
    assert str(excinfo.value) == "invalid config <config>: tab_width must be >= 0, got -2"

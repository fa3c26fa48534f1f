import pytest
import yaml

from orientgrid.core.config import (
    Config,
    ExplorationConfig,
    GridConfig,
    create_default_config,
    load_config,
    validate_config,
)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return str(path)


def test_load_config(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {
        "runner": {"experiment_name": "demo", "log_dir": "out"},
        "grid": {"size": [4, 5, 6], "cell_size": 2.0},
        "exploration": {"attempts": 10, "seed": 3, "pattern": "i_tromino", "rotation_sampler": "rot24"},
    })

    config = load_config(path)

    assert config.runner.experiment_name == "demo"
    assert config.grid.size == (4, 5, 6)
    assert config.grid.cell_size == 2.0
    assert config.exploration.attempts == 10
    assert config.exploration.rotation_sampler == "rot24"
    assert validate_config(config) == []


def test_missing_sections_use_defaults(tmp_path):
    config = load_config(write_yaml(tmp_path / "config.yaml", {"grid": {"size": [3, 3, 3]}}))
    assert config.exploration.pattern == "l_hexomino"
    assert config.exploration.attempts == 200
    assert config.runner.log_dir == "logs"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_invalid_values_raise(tmp_path):
    path = write_yaml(tmp_path / "bad.yaml", {"grid": {"size": [3, -1, 3]}})
    with pytest.raises(ValueError):
        load_config(path)

    with pytest.raises(ValueError):
        GridConfig(cell_size=0)
    with pytest.raises(ValueError):
        ExplorationConfig(attempts=-5)
    with pytest.raises(ValueError):
        ExplorationConfig(first_tile=0)


def test_default_config_round_trip(tmp_path):
    path = str(tmp_path / "default.yaml")
    config = create_default_config(path)
    assert load_config(path) == config


def test_validate_reports_unknown_components():
    config = Config(exploration=ExplorationConfig(pattern="blob", rotation_sampler="spin"))
    issues = validate_config(config)
    assert "ERROR: Unknown pattern: blob" in issues
    assert "ERROR: Unknown rotation sampler: spin" in issues


def test_validate_warnings():
    issues = validate_config(Config(grid=GridConfig(size=(0, 4, 4))))
    assert any(i.startswith("WARNING") and "zero volume" in i for i in issues)

    issues = validate_config(Config(grid=GridConfig(size=(2, 2, 1))))
    assert any(i.startswith("WARNING") and "Pattern has 6 cells" in i for i in issues)

    offsets = Config(exploration=ExplorationConfig(offsets=[[0, 0, 0], [0, 0, 1]]))
    assert validate_config(offsets) == []


def test_attempts_above_grid_volume_warns():
    config = Config(
        grid=GridConfig(size=(10, 10, 10)),
        exploration=ExplorationConfig(attempts=5000),
    )
    assert any(i.startswith("WARNING") and "exceeds the grid volume" in i for i in validate_config(config))

    config.exploration.attempts = 1000
    assert not any("exceeds the grid volume" in i for i in validate_config(config))


@pytest.mark.parametrize("cell_size", [float("nan"), float("inf"), True])
def test_non_finite_cell_size_rejected(cell_size):
    with pytest.raises(ValueError):
        GridConfig(cell_size=cell_size)

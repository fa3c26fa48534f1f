import pytest

from orientgrid.core.config import Config, ExplorationConfig, GridConfig, RunnerConfig
from orientgrid.core.grid import OrientGrid


@pytest.fixture
def grid():
    return OrientGrid((10, 10, 10), cell_size=1.01)


@pytest.fixture
def quiet_config(tmp_path):
    return Config(
        runner=RunnerConfig(
            experiment_name="test_run",
            log_dir=str(tmp_path / "logs"),
            results_csv_path=str(tmp_path / "results" / "results.csv"),
            save_logs=False,
            verbose=False,
        ),
        grid=GridConfig(size=(10, 10, 10), cell_size=1.01),
        exploration=ExplorationConfig(attempts=200, seed=42),
    )

import json

import yaml

from orientgrid.cli import main


def test_no_arguments_prints_help(capsys):
    assert main([]) == 1
    assert "orientgrid" in capsys.readouterr().out


def test_orient(capsys):
    assert main(["orient", "--size", "10", "10", "10", "--offset", "1", "0", "0", "--anchor", "8", "0", "0"]) == 0
    assert "(9, 0, 0)" in capsys.readouterr().out

    assert main(["orient", "--size", "10", "10", "10", "--offset", "1", "0", "0", "--anchor", "9", "0", "0"]) == 1
    assert "OutOfBounds" in capsys.readouterr().out


def test_place(capsys):
    code = main([
        "place", "--size", "10", "10", "10", "--pattern", "l_hexomino",
        "--anchor", "2", "8", "0", "--euler", "0", "0", "-90",
    ])
    assert code == 0
    assert "(5, 8, 0)" in capsys.readouterr().out

    code = main(["place", "--size", "3", "3", "3", "--pattern", "l_hexomino", "--anchor", "0", "0", "0"])
    assert code == 1
    assert "OutOfBounds" in capsys.readouterr().out


def test_create_and_validate_config(tmp_path):
    path = str(tmp_path / "config.yaml")
    assert main(["create-config", "--output", path]) == 0
    assert main(["validate-config", path]) == 0


def test_validate_config_errors(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"exploration": {"pattern": "blob"}}))
    assert main(["validate-config", str(path)]) == 1

    path.write_text(yaml.safe_dump({"grid": {"size": [0, 1, 1]}}))
    assert main(["validate-config", str(path)]) == 0
    assert main(["validate-config", str(path), "--strict"]) == 1


def test_run(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump({
        "runner": {
            "experiment_name": "cli_run",
            "log_dir": str(tmp_path / "logs"),
            "results_csv_path": str(tmp_path / "results.csv"),
        },
        "grid": {"size": [6, 6, 6]},
        "exploration": {"attempts": 200, "pattern": "i_tromino"},
    }))

    assert main(["run", "--config", str(path), "--attempts", "20", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert "Exploration Results" in out
    assert (tmp_path / "results.csv").exists()


def test_run_missing_config(tmp_path):
    assert main(["run", "--config", str(tmp_path / "missing.yaml")]) == 1


def test_list_components_json(capsys):
    assert main(["list-components", "--format", "json"]) == 0
    components = json.loads(capsys.readouterr().out)
    assert "l_hexomino" in components["patterns"]
    assert set(components["samplers"]) >= {"euler90", "rot24", "identity"}


def write_run_config(tmp_path, runner=None):
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump({
        "runner": {
            "experiment_name": "cli_run",
            "log_dir": str(tmp_path / "logs"),
            "results_csv_path": str(tmp_path / "results.csv"),
            **(runner or {}),
        },
        "grid": {"size": [6, 6, 6]},
        "exploration": {"attempts": 30, "pattern": "i_tromino", "seed": 1},
    }))
    return str(path)


def test_run_rejects_negative_attempts_override(tmp_path, capsys):
    path = write_run_config(tmp_path)
    assert main(["run", "--config", path, "--attempts", "-5"]) == 1
    assert "attempts must be a non-negative integer" in capsys.readouterr().out
    assert not (tmp_path / "results.csv").exists()


def test_run_keeps_verbose_from_config(tmp_path, capsys):
    path = write_run_config(tmp_path, {"verbose": True})
    assert main(["run", "--config", path]) == 0
    assert "Progress: 30/30 attempts" in capsys.readouterr().out


def test_run_quiet_config_without_flag(tmp_path, capsys):
    path = write_run_config(tmp_path, {"verbose": False})
    assert main(["run", "--config", path]) == 0
    assert "Progress" not in capsys.readouterr().out

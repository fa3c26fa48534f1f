from orientgrid.core.grid import ErrorCode
from orientgrid.utils.display import LiveLogger, PlacementProgress, StatusDisplay


def test_progress_tallies_each_outcome(capsys):
    progress = PlacementProgress(4)
    for outcome in [ErrorCode.OK, ErrorCode.OVERLAP, ErrorCode.OUT_OF_BOUNDS, ErrorCode.OK]:
        progress.record(outcome)
    progress.finish()

    assert progress.attempts_done == 4
    assert progress.rejected == 2
    out = capsys.readouterr().out
    assert "Progress: 4/4 attempts | placed 2 | out-of-bounds 1 | overlap 1" in out
    assert "2 placed, 2 rejected" in out


def test_outcome_table_shows_shares(capsys):
    StatusDisplay.print_outcomes({ErrorCode.OK: 1, ErrorCode.OUT_OF_BOUNDS: 0, ErrorCode.OVERLAP: 3})
    lines = capsys.readouterr().out.splitlines()
    assert any("placed" in line and "25.0%" in line for line in lines)
    assert any("overlap" in line and "75.0%" in line for line in lines)


def test_outcome_table_without_attempts(capsys):
    StatusDisplay.print_outcomes({})
    assert "0.0%" in capsys.readouterr().out


def test_quiet_logger_still_reports_errors(capsys):
    logger = LiveLogger(verbose=False)
    logger.log_info("hidden")
    logger.log_warning("hidden")
    logger.log_error("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out

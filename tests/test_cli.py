"""Tests for the command line entry point and scheduler configuration."""

from __future__ import annotations

import json

import pytest

from conftest import make_entry


def _write(tmp_path, document, name="rooms.json"):
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return str(path)


class TestMain:

    def test_schedules_sample(self, sample_path, capsys):
        from housekeeping.cli import main

        assert main(["--seed", "fixed", "--no-color", str(sample_path)]) == 0
        out = capsys.readouterr().out.splitlines()

        assert len([line for line in out if "Cleaned #" in line]) == 4
        assert out[-1] == "1 rooms need cleaning but are occupied indefinitely."

    def test_all_clean(self, tmp_path, capsys):
        from housekeeping.cli import main

        path = _write(tmp_path, [make_entry(hasToBeCleaned=False)])
        assert main([path]) == 0
        assert capsys.readouterr().out.strip() == "All rooms are clean."

    def test_hire_crews_flag(self, tmp_path, capsys):
        from housekeeping.cli import main

        path = _write(tmp_path, [make_entry(cleaningDuration=10)])
        assert main(["-c", "0", "-C", "--no-color", path]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("hiring! 1 @ 10:")
        assert out[-1] == "Had to hire 1 new crews."

    def test_no_crews(self, tmp_path, capsys):
        from housekeeping.cli import EXIT_NO_CREWS, main

        path = _write(tmp_path, [make_entry()])
        assert main(["--cleaning-crews", "0", path]) == EXIT_NO_CREWS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Nobody to clean our rooms" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        from housekeeping.cli import EXIT_UNREADABLE, main

        assert main([str(tmp_path / "nope.json")]) == EXIT_UNREADABLE
        assert "Unable to read file" in capsys.readouterr().err

    def test_bad_json(self, tmp_path, capsys):
        from housekeeping.cli import EXIT_BAD_JSON, main

        path = tmp_path / "broken.json"
        path.write_text("[{")
        assert main([str(path)]) == EXIT_BAD_JSON
        assert "Unable to parse json" in capsys.readouterr().err

    def test_not_an_array(self, tmp_path, capsys):
        from housekeeping.cli import EXIT_NOT_ARRAY, main

        path = _write(tmp_path, {"rooms": []})
        assert main([path]) == EXIT_NOT_ARRAY
        assert "Expected array" in capsys.readouterr().err

    def test_invalid_record(self, invalid_path, capsys):
        from housekeeping.cli import EXIT_INVALID_RECORD, main

        assert main([str(invalid_path)]) == EXIT_INVALID_RECORD
        assert "Entry 3: expected object, got int" in capsys.readouterr().err

    def test_seeded_runs_match(self, sample_path, capsys):
        from housekeeping.cli import main

        main(["-s", "abc", str(sample_path)])
        first = capsys.readouterr().out
        main(["-s", "abc", str(sample_path)])
        assert capsys.readouterr().out == first


class TestSchedulerConfig:

    def test_defaults(self):
        from housekeeping.config import SchedulerConfig

        config = SchedulerConfig()
        assert config.initial_crew_count == 1
        assert config.hiring_enabled is False
        assert config.can_staff

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"initial_crew_count": -1},
            {"initial_crew_count": 1.5},
            {"initial_crew_count": True},
            {"hiring_enabled": "yes"},
        ],
        ids=["negative", "float", "bool_count", "str_flag"],
    )
    def test_invalid(self, kwargs):
        from housekeeping.config import SchedulerConfig, validate_scheduler_config

        with pytest.raises(ValueError):
            validate_scheduler_config(SchedulerConfig(**kwargs))

    def test_cannot_staff(self):
        from housekeeping.config import SchedulerConfig

        assert not SchedulerConfig(initial_crew_count=0).can_staff
        assert SchedulerConfig(initial_crew_count=0, hiring_enabled=True).can_staff


class TestArguments:
    """Bad arguments are usage errors, distinct from the scheduling exit codes."""

    def test_non_utf8_file_is_unreadable(self, tmp_path, capsys):
        from housekeeping.cli import EXIT_UNREADABLE, main

        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"roomNumber": 1, "x": "\xff\xfe"}]')
        assert main([str(path)]) == EXIT_UNREADABLE
        assert "Unable to read file" in capsys.readouterr().err

    def test_negative_crews_rejected_by_parser(self, sample_path, capsys):
        from housekeeping.cli import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--cleaning-crews", "-1", str(sample_path)])
        assert exc_info.value.code == 2
        assert "crew count must be >= 0" in capsys.readouterr().err

    def test_unknown_log_level_rejected_by_parser(self, sample_path, capsys):
        from housekeeping.cli import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", str(sample_path)])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, sample_path):
        from housekeeping.cli import build_parser

        args = build_parser().parse_args(["--log-level", "debug", str(sample_path)])
        assert args.log_level == "DEBUG"

    def test_later_calls_apply_their_log_level(self, sample_path, capsys):
        import logging

        from housekeeping.cli import main

        root = logging.getLogger()
        previous = root.level
        try:
            main(["--log-level", "ERROR", str(sample_path)])
            main(["--log-level", "DEBUG", str(sample_path)])
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)
        capsys.readouterr()

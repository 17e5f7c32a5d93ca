"""Unit tests for deterministic phase and skip log lines."""

from __future__ import annotations

from io import StringIO

from stringforge.telemetry.logger import RunLogger, log_entry_skipped


def test_run_logger_emits_sorted_sanitized_phase_lines() -> None:
    """Phase lines should be deterministic and free of unsafe characters."""

    sink = StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("read")
    run_logger.log_stage_complete("read")
    run_logger.log_stage_failure("write", "Permission Error!")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=read event=start",
        "[phase] level=INFO stage=read event=complete",
        "[phase] level=ERROR stage=write event=failure error_type=Permission_Error_",
    ]


def test_skipped_entries_are_reported_through_run_logger_sink() -> None:
    """Skip diagnostics share the run logger sink."""

    sink = StringIO()
    RunLogger(sink=sink)

    log_entry_skipped("terms notice", "ru", "empty_value")
    log_entry_skipped("apples", "", "malformed_compound_tag")

    assert sink.getvalue().splitlines() == [
        "[skip] key=terms_notice reason=empty_value tag=ru",
        "[skip] key=apples reason=malformed_compound_tag tag=none",
    ]

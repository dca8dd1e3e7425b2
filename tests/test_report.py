"""Tests for prefix.hooks.report."""

from __future__ import annotations

import io
from datetime import timedelta

from rich.console import Console

from prefix.hooks import ActionResult, ActionSpec, RunOutcome, SelectedAction, SpawnError
from prefix.hooks.report import BYPASS_HINT, render_dispatch, render_outcome


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, color_system=None, highlight=False), buf


def _result(action_id: str, returncode: int, **kw) -> ActionResult:
    return ActionResult(
        id=action_id,
        spec=kw.pop("spec", ActionSpec(run="x")),
        returncode=returncode,
        elapsed=kw.pop("elapsed", timedelta(milliseconds=5)),
        **kw,
    )


class TestRenderDispatch:
    def test_header_and_executing_lines(self):
        out, buf = _console()
        render_dispatch(
            "pre-commit",
            [SelectedAction("t", ActionSpec(run="x", name="Tests"), ("a",))],
            out,
        )
        lines = buf.getvalue().splitlines()
        assert lines == ["› Running pre-commit", "  › Executing Tests"]


class TestRenderOutcome:
    def test_passed_line(self):
        out, buf = _console()
        render_outcome(RunOutcome("pre-commit", results=[_result("t", 0)]), out)
        assert "✔ passed t (5 millis)" in buf.getvalue()

    def test_failed_line_with_stderr_and_stdout(self):
        out, buf = _console()
        result = _result("lint", 1, stdout=b"out\n", stderr=b"bad [thing]\n")
        render_outcome(RunOutcome("post-commit", results=[result]), out)
        text = buf.getvalue()
        assert "✘ failed lint (5 millis)" in text
        assert "bad [thing]" in text
        assert "out" in text

    def test_stderr_hidden_on_success(self):
        out, buf = _console()
        render_outcome(RunOutcome("post-commit", results=[_result("t", 0, stderr=b"noise")]), out)
        assert "noise" not in buf.getvalue()

    def test_selection_order(self):
        out, buf = _console()
        results = [_result("b", 1), _result("a", 0)]
        render_outcome(RunOutcome("post-commit", results=results), out)
        text = buf.getvalue()
        assert text.index("failed b") < text.index("passed a")

    def test_display_name(self):
        out, buf = _console()
        spec = ActionSpec(run="x", name="Unit tests")
        render_outcome(RunOutcome("post-commit", results=[_result("t", 0, spec=spec)]), out)
        assert "passed Unit tests" in buf.getvalue()

    def test_completion_line(self):
        out, buf = _console()
        render_outcome(RunOutcome("pre-commit", state="empty", elapsed=timedelta(seconds=2)), out)
        assert buf.getvalue().strip() == "› pre-commit complete (2 seconds)"

    def test_bypass_hint_for_noverify_hook(self):
        out, buf = _console()
        render_outcome(RunOutcome("pre-commit", results=[_result("t", 1)]), out)
        assert BYPASS_HINT in buf.getvalue()

    def test_no_bypass_hint_for_other_hooks(self):
        out, buf = _console()
        render_outcome(RunOutcome("post-merge", results=[_result("t", 1)]), out)
        assert BYPASS_HINT not in buf.getvalue()

    def test_no_bypass_hint_on_success(self):
        out, buf = _console()
        render_outcome(RunOutcome("pre-commit", results=[_result("t", 0)]), out)
        assert BYPASS_HINT not in buf.getvalue()

    def test_spawn_error_line(self):
        out, buf = _console()
        err, err_buf = _console()
        result = ActionResult(id="t", spec=ActionSpec(run="x"), error=SpawnError("no such dir"))
        outcome = RunOutcome("pre-push", results=[result])
        render_outcome(outcome, out, err)
        assert "error executing action t: no such dir" in err_buf.getvalue()
        assert "passed" not in buf.getvalue()
        assert BYPASS_HINT in buf.getvalue()

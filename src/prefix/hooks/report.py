"""Rich rendering of a hook run: progress lines, per-action results, summary."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from prefix.core.utils import decode_output, human_duration

from .engine import ActionResult, RunOutcome
from .models import NOVERIFY_HOOKS
from .selector import SelectedAction

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

BYPASS_HINT = "add --no-verify to bypass"


def render_dispatch(hook: str, actions: list[SelectedAction], out: Console | None = None) -> None:
    out = out or console
    header = Text("› Running ", style="bright_green")
    header.append(hook, style="bold bright_green")
    out.print(header)
    for action in actions:
        line = Text("  › Executing", style="bright_green")
        line.append(f" {action.display_name}")
        out.print(line)


def _result_line(result: ActionResult) -> Text:
    if result.failed:
        line = Text.assemble(("✘", "red"), " ", ("failed", "red"))
    else:
        line = Text.assemble(("✔", "green"), " ", ("passed", "green"))
    line.append(f" {result.display_name} ")
    line.append(f"({human_duration(result.elapsed)})", style="dim")
    return line


def render_result(result: ActionResult, out: Console | None = None, err: Console | None = None) -> None:
    out = out or console
    err = err or err_console
    if result.errored:
        err.print(
            Text(f"error executing action {result.display_name}: {result.error}", style="red")
        )
        return

    out.print(_result_line(result))
    stderr = decode_output(result.stderr)
    stdout = decode_output(result.stdout)
    if result.failed and stderr:
        out.print(Text(stderr.rstrip("\n")))
    if stdout:
        out.print(Text(stdout.rstrip("\n")))


def render_outcome(outcome: RunOutcome, out: Console | None = None, err: Console | None = None) -> None:
    """Print every result in selection order, then the completion line."""
    out = out or console
    for result in outcome.results:
        render_result(result, out, err)

    done = Text(f"› {outcome.hook} complete ", style="bright_green")
    done.append(f"({human_duration(outcome.elapsed)})", style="dim")
    out.print(done)

    if outcome.has_errors and outcome.hook in NOVERIFY_HOOKS:
        out.print(BYPASS_HINT)

"""CLI entry point: init, run, install and uninstall subcommands."""

from __future__ import annotations

import sys
from functools import partial

import click
from rich.console import Console

from .commands import init_project, install_hooks, uninstall_hooks
from .core.config import Settings, load_settings
from .core.git import file_context, git_dir
from .hooks import PrefixError, load_config, run_hook
from .hooks.report import render_dispatch, render_outcome

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _debug(settings: Settings, message: str) -> None:
    if settings.verbose:
        console.print(f"[dim]{message}[/dim]")


def _fail(message: str) -> None:
    err_console.print(f"error: {message}", style="bold red", markup=False)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """prefix: a managed git hook runner."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.pass_context
def init(ctx: click.Context):
    """Initialize the git repo with a sample config."""
    settings = load_settings(verbose=ctx.obj["verbose"])
    repo = git_dir(settings.cwd)
    if repo is None:
        _debug(settings, "not inside a git repository, nothing to do")
        return
    for path in init_project(repo.top_level):
        console.print(f"created [green]{path}[/green]")


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("hook")
@click.option("--config", "-c", "config_path", default=None, type=click.Path(dir_okay=False))
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, hook: str, config_path: str | None, args: tuple[str, ...]):
    """Run the actions configured for HOOK.

    See https://git-scm.com/book/en/v2/Customizing-Git-Git-Hooks for hook names.
    Any ARGS after -- are exposed to actions as $PREFIX_GIT_ARGS.
    """
    settings = load_settings(config_path=config_path, verbose=ctx.obj["verbose"])
    if settings.skip:
        _debug(settings, f"PREFIX_SKIP set, skipping {hook}")
        return

    repo = git_dir(settings.cwd)
    if repo is None:
        _debug(settings, "not inside a git repository, nothing to do")
        return

    path = settings.resolve_config_path(repo.top_level)
    _debug(settings, f"loading {path}")
    try:
        config = load_config(path)
        outcome = run_hook(
            hook,
            config,
            context=partial(file_context, repo.top_level),
            args=args,
            cwd=repo.top_level,
            on_dispatch=partial(render_dispatch, hook),
        )
    except PrefixError as e:
        _fail(str(e))
        return

    if outcome.state == "empty":
        _debug(settings, f"no actions to run for {hook}")
    render_outcome(outcome)
    if outcome.has_errors:
        sys.exit(1)


@cli.command()
@click.option(
    "--force", "-f", is_flag=True, help="Override existing hook scripts without a .bak copy"
)
@click.pass_context
def install(ctx: click.Context, force: bool):
    """Install git hook scripts."""
    settings = load_settings(verbose=ctx.obj["verbose"])
    repo = git_dir(settings.cwd)
    if repo is None:
        _debug(settings, "not inside a git repository, nothing to do")
        return
    report = install_hooks(repo.hooks_dir, force=force)
    for backup in report.backed_up:
        console.print(
            f"[yellow]warning:[/yellow] existing hook saved as {backup}. "
            "Pass --force to override hook scripts without a backup"
        )
    for hook in report.created:
        console.print(f"creating hook [bright_green]{hook}[/bright_green]")


@cli.command()
@click.pass_context
def uninstall(ctx: click.Context):
    """Uninstall git hook scripts."""
    settings = load_settings(verbose=ctx.obj["verbose"])
    repo = git_dir(settings.cwd)
    if repo is None:
        _debug(settings, "not inside a git repository, nothing to do")
        return
    for hook in uninstall_hooks(repo.hooks_dir):
        console.print(f"removing hook {hook}")


def main():
    cli()


if __name__ == "__main__":
    main()

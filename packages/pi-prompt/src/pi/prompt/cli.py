"""CLI entry point for pi-prompt. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from pi.prompt.config import LOG_LEVELS, load_config
from pi.prompt.formats import Shell
from pi.prompt.renderer import Renderer

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(invoke_without_command=True)
@click.option(
    "--shell",
    type=click.Choice([s.value for s in Shell]),
    default=None,
    help="Shell dialect to escape for (default: $PI_PROMPT_SHELL or $SHELL)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS),
    default=None,
    help="Logging level (default: $PI_PROMPT_LOG_LEVEL or warning)",
)
@click.pass_context
def main(ctx, shell, log_level):
    """Render colored prompt text for zsh, bash or a plain terminal."""
    config = load_config()
    if shell is not None:
        config.shell = Shell(shell)
    if log_level is not None:
        config.log_level = log_level
    _setup_logging(config.log_level)
    logger.debug("Rendering for %s", config.shell.value)

    ctx.obj = {"config": config, "renderer": Renderer(config.shell)}
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@main.command()
@click.argument("text")
@click.option("--fg", default="default", help="Ambient foreground color")
@click.option("--bg", default="", help="Ambient background color")
@click.option("--newline/--no-newline", default=True, help="End output with a newline")
@click.pass_obj
def render(obj, text, fg, bg, newline):
    """Render TEXT, expanding <fg,bg>...</> color tags."""
    renderer: Renderer = obj["renderer"]
    renderer.write(bg, fg, text)
    click.echo(renderer.string(), nl=newline)


@main.command()
@click.argument("text")
@click.pass_obj
def width(obj, text):
    """Print the visible width of TEXT."""
    renderer: Renderer = obj["renderer"]
    click.echo(renderer.visible_width(text))


@main.command()
@click.argument("text")
@click.option("--offset", type=int, default=0, help="Columns to leave free at the right edge")
@click.option("--fg", default="default", help="Ambient foreground color")
@click.option("--bg", default="", help="Ambient background color")
@click.pass_obj
def right(obj, text, offset, fg, bg):
    """Render TEXT aligned to the right edge of the terminal."""
    renderer: Renderer = obj["renderer"]
    renderer.write(bg, fg, text)
    rendered = renderer.string()
    click.echo(
        renderer.carriage_forward()
        + renderer.set_cursor_for_right_write(rendered, offset)
        + rendered,
        nl=False,
    )


@main.command()
@click.argument("title")
@click.pass_obj
def title(obj, title):
    """Set the terminal window title."""
    renderer: Renderer = obj["renderer"]
    renderer.set_console_title(title)


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

@main.command()
@click.option("--fg", default="yellow", help="Foreground color")
@click.option("--bg", default="", help="Background color")
@click.pass_obj
def python(obj, fg, bg):
    """Render the Python version and virtual environment, if any."""
    from pi.prompt.environment import ProcessEnvironment
    from pi.prompt.segments.python import PythonSegment

    segment = PythonSegment(
        ProcessEnvironment(),
        display_virtual_env=obj["config"].display_virtual_env,
    )
    if not segment.enabled():
        logger.debug("Python segment disabled")
        return
    renderer: Renderer = obj["renderer"]
    renderer.write(bg, fg, segment.string())
    click.echo(renderer.string())


if __name__ == "__main__":
    main()

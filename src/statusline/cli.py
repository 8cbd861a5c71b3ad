#!/usr/bin/env python3
"""statusline CLI - print a one-line session summary for the assistant shell.

The shell pipes a JSON payload to stdin and shows whatever is printed:

    echo '{"model": {"display_name": "Claude Opus"}, "cwd": "/src/app"}' | statusline
"""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .core.config import StatusConfig
from .core.debug_log import close_debug_logging, configure_debug_logging
from .core.git import make_branch_resolver
from .core.stdin import read_stdin
from .render import render

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="statusline")
@click.option(
    "--no-model",
    is_flag=True,
    help="Hide the model segment (same as CC_STATUSLINE_NO_MODEL=1).",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Print the percentage without ANSI colour.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Write a debug log (same as STATUSLINE_DEBUG=1).",
)
@click.option(
    "--timeout",
    "-t",
    type=float,
    default=None,
    help="Seconds to wait for stdin. Defaults to 3.",
)
@click.option(
    "--git-timeout",
    type=float,
    default=None,
    help="Seconds allowed for each git command. Defaults to 1.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file. Defaults to STATUSLINE_CONFIG or the user config dir.",
)
def main(
    no_model: bool,
    no_color: bool,
    debug: bool,
    timeout: Optional[float],
    git_timeout: Optional[float],
    config_path: Optional[Path],
):
    """Render the status line for the JSON payload on stdin.

    Always prints a line and exits 0: unreadable input, malformed JSON and
    git failures fall back to defaults.

    \b
    Environment:
        CC_STATUSLINE_NO_MODEL=1   hide the model segment
        STATUSLINE_DEBUG=1         log to ~/.claude/status_line_debug.log
        STATUSLINE_CONFIG=PATH     config file location
    """
    config = StatusConfig.load(config_path).with_overrides(
        show_model=False if no_model else None,
        colors=False if no_color else None,
        debug=True if debug else None,
        stdin_timeout=timeout if timeout and timeout > 0 else None,
        git_timeout=git_timeout if git_timeout and git_timeout > 0 else None,
    )

    handler = configure_debug_logging(config)
    try:
        logger.debug("=== START ===")
        for note in config.notes:
            logger.debug(note)
        logger.debug("config: %s", config.to_dict())
        logger.debug("waiting for stdin...")
        text = read_stdin(config.stdin_timeout)

        logger.debug("building status line...")
        line = render(text, config, make_branch_resolver(config.git_timeout))
        logger.debug("status line built")

        try:
            click.echo(line, color=config.colors)
        except OSError as e:
            raise click.ClickException(f"Failed to write status line: {e}")
        logger.debug("=== END ===")
    finally:
        close_debug_logging(handler)


if __name__ == "__main__":
    main()

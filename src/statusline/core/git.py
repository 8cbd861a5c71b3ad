"""Git branch lookup for the status line.

Branch lookup is best effort: any failure means "no branch segment".
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT = 1.0

# Injectable seam used by the renderer: directory -> branch name or None
BranchResolver = Callable[[str], Optional[str]]


class GitError(Exception):
    """Error running a git command."""

    pass


def run_git(
    args: list[str],
    cwd: Optional[Union[str, Path]] = None,
    timeout: float = DEFAULT_GIT_TIMEOUT,
) -> str:
    """Run a git command and return its stripped stdout.

    Args:
        args: Git command arguments (without 'git' prefix).
        cwd: Working directory. Defaults to current directory.
        timeout: Seconds before the command is killed.

    Returns:
        Stripped standard output.

    Raises:
        GitError: If git is missing, the directory is unusable, the command
            times out, or it exits non-zero.
    """
    cmd = ["git"] + args
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {args[0]} timed out after {timeout}s") from e
    except FileNotFoundError as e:
        # Raised both for a missing git binary and a missing cwd
        raise GitError(f"git {args[0]} could not start: {e}") from e
    except OSError as e:
        raise GitError(f"git {args[0]} failed: {e}") from e

    if result.returncode != 0:
        raise GitError(f"git {args[0]} exited with {result.returncode}")
    return result.stdout.strip()


def get_git_branch(directory: str, timeout: float = DEFAULT_GIT_TIMEOUT) -> Optional[str]:
    """Get the current branch of the working tree containing ``directory``.

    Tries ``git symbolic-ref --short HEAD`` first, which also works on a
    branch with no commits yet. On a detached HEAD falls back to the short
    commit id from ``git rev-parse --short HEAD``.

    Args:
        directory: Any directory inside the working tree.
        timeout: Seconds allowed per git command.

    Returns:
        Branch name, short commit id, or None when not in a working tree or
        the lookup fails for any reason.
    """
    logger.debug("get_git_branch: dir=%s", directory)

    for args in (["symbolic-ref", "--short", "HEAD"], ["rev-parse", "--short", "HEAD"]):
        logger.debug("git %s start", args[0])
        try:
            branch = run_git(args, cwd=directory, timeout=timeout)
        except GitError as e:
            logger.debug("git %s failed: %s", args[0], e)
            continue
        logger.debug("git %s done", args[0])
        if branch:
            return branch

    return None


def make_branch_resolver(timeout: float = DEFAULT_GIT_TIMEOUT) -> BranchResolver:
    """Bind a timeout into a BranchResolver."""

    def resolve(directory: str) -> Optional[str]:
        return get_git_branch(directory, timeout=timeout)

    return resolve

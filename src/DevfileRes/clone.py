"""Clone a repository with the external ``git`` tool."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from DevfileRes.exceptions import CloneError
from DevfileRes.git_url import GitUrl
from DevfileRes.logging_utils import get_logger

logger = get_logger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]

# Fail instead of waiting for a credential prompt
NON_INTERACTIVE_ENV = {
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_ASKPASS": "/bin/echo",
}


def _default_runner(
    args: Sequence[str], *, cwd: Path, env: dict[str, str]
) -> subprocess.CompletedProcess:
    return subprocess.run(
        list(args),
        cwd=str(cwd),
        env=env,
        check=False,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )


def clone_git_repo(
    git_url: GitUrl,
    dest_dir: str | Path,
    runner: Runner | None = None,
) -> None:
    """Clone the repository behind *git_url* into the existing *dest_dir*.

    A partially cloned directory is left in place on failure.

    Raises:
        CloneError: *dest_dir* does not exist, or ``git clone`` failed.
    """
    dest = Path(dest_dir).resolve()
    if not dest.is_dir():
        raise CloneError(
            f"failed to clone repo, destination directory: '{dest_dir}' does not exist"
        )

    remote = git_url.authenticated_clone_url()
    env = os.environ.copy()
    env.update(NON_INTERACTIVE_ENV)

    logger.info(
        "Cloning %s into %s (token=%s)",
        git_url.repo_url,
        dest,
        "yes" if git_url.has_token else "no",
    )
    run = runner or _default_runner
    try:
        # git runs inside dest, so the target must be absolute
        completed = run(["git", "clone", remote, str(dest)], cwd=dest, env=env)
    except OSError as exc:
        raise CloneError(f"failed to run git clone: {exc}") from exc

    if completed.returncode == 0:
        return

    output = git_url.redact((completed.stdout or "").strip())
    logger.debug("git clone exited with %s: %s", completed.returncode, output)

    if git_url.has_token:
        raise CloneError(
            "failed to clone repo with token, ensure that the url and token is "
            f"correct. error: exit status {completed.returncode}: {output}"
        )
    raise CloneError(
        "failed to clone repo without a token, ensure that a token is set if the "
        f"repo is private. error: exit status {completed.returncode}: {output}"
    )

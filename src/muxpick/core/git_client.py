"""
git worktree client.

Service layer over the ``git`` command line for listing, creating,
deleting and merging worktrees.

Modified: 2026-10-16
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

from muxpick.core.exceptions import GitError
from muxpick.core.models import GitWorktree


logger = logging.getLogger(__name__)


def run_git(path: Path, args: Iterable[str]) -> str:
    """
    Run ``git -C path args...`` and return stdout.

    Raises:
        GitError: If git cannot be run or exits non-zero
    """
    args = list(args)
    command = ["git", "-C", str(path), *args]
    logger.debug(f"Running {' '.join(command)}")

    try:
        completed = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise GitError("git not found", command=args[0]) from e
    except OSError as e:
        raise GitError(f"cannot run git: {e}", command=args[0]) from e

    if completed.returncode != 0:
        err = completed.stderr.strip() or completed.stdout.strip() or "git command failed"
        raise GitError(err, command=args[0])

    return completed.stdout


def branch_dir_name(branch: str) -> str:
    """Directory-safe form of a branch name (``feature/x`` → ``feature-x``)."""
    return re.sub(r"[^A-Za-z0-9._-]+", "-", branch).strip("-")


class GitClient:
    """
    Client for a single git repository.

    Construction fails when ``path`` is not inside a work tree; use
    ``is_git_repo`` to probe without raising.
    """

    def __init__(self, path: Path, base_dir: Optional[Path] = None):
        """
        Initialize git client.

        Args:
            path: Any path inside the repository
            base_dir: Directory new worktrees are created in (default:
                next to the main worktree)

        Raises:
            GitError: If path is not inside a git repository
        """
        self.path = Path(path)
        self.root = Path(run_git(self.path, ["rev-parse", "--show-toplevel"]).strip())
        self.base_dir = Path(base_dir).expanduser() if base_dir else None

    @staticmethod
    def is_git_repo(path: Path) -> bool:
        try:
            output = run_git(Path(path), ["rev-parse", "--is-inside-work-tree"])
        except (GitError, OSError):
            return False
        return output.strip() == "true"

    def list_worktrees(self) -> List[GitWorktree]:
        """
        List worktrees; the first one is the main worktree.

        Returns:
            List of GitWorktree objects
        """
        output = run_git(self.root, ["worktree", "list", "--porcelain"])
        worktrees: List[GitWorktree] = []

        for block in output.replace("\r\n", "\n").split("\n\n"):
            path = None
            head = ""
            branch = ""
            bare = False

            for line in block.splitlines():
                line = line.strip()
                if line.startswith("worktree "):
                    path = Path(line[len("worktree "):])
                elif line.startswith("HEAD "):
                    head = line[len("HEAD "):]
                elif line.startswith("branch "):
                    branch = line[len("branch "):]
                    if branch.startswith("refs/heads/"):
                        branch = branch[len("refs/heads/"):]
                elif line == "bare":
                    bare = True

            if path is None or bare:
                continue

            worktrees.append(
                GitWorktree(
                    path=path,
                    branch=branch,
                    head=head,
                    is_main=not worktrees,
                    has_changes=self._has_changes(path),
                )
            )

        return worktrees

    def _has_changes(self, path: Path) -> bool:
        try:
            return bool(run_git(path, ["status", "--porcelain"]).strip())
        except GitError as e:
            logger.warning(f"Could not read status of {path}: {e}")
            return False

    def main_worktree(self) -> GitWorktree:
        worktrees = self.list_worktrees()
        if not worktrees:
            raise GitError("no worktrees found", command="worktree")
        return worktrees[0]

    def worktree_path_for(self, branch: str) -> Path:
        main = self.main_worktree().path
        name = f"{main.name}-{branch_dir_name(branch)}"
        parent = self.base_dir if self.base_dir else main.parent
        return parent / name

    def create_worktree(self, branch: str) -> Path:
        """
        Create a worktree on a new branch.

        Args:
            branch: Name of the branch to create

        Returns:
            Path of the new worktree

        Raises:
            GitError: If the branch name is empty, the target path exists, or
                git refuses (e.g. the branch already exists)
        """
        branch = branch.strip()
        if not branch:
            raise GitError("branch name is empty", command="worktree")

        path = self.worktree_path_for(branch)
        if path.exists():
            raise GitError(f"{path} already exists", command="worktree")

        run_git(self.root, ["worktree", "add", "-b", branch, str(path)])
        logger.info(f"Created worktree {path} on branch {branch}")
        return path

    def delete_worktree(self, path: Path) -> None:
        """Remove a worktree, discarding uncommitted changes."""
        run_git(self.root, ["worktree", "remove", "--force", str(path)])
        logger.info(f"Deleted worktree {path}")

    def merge_to_main(self, path: Path, branch: str) -> None:
        """
        Merge ``branch`` into the main worktree, then remove the worktree.

        The merge is aborted on conflict so the main worktree is left clean.

        Raises:
            GitError: On merge conflict or if the main worktree is dirty
        """
        main = self.main_worktree()
        if main.path == Path(path):
            raise GitError("cannot merge the main worktree into itself", command="merge")
        if main.has_changes:
            raise GitError(f"main worktree {main.path} has uncommitted changes", command="merge")

        try:
            run_git(main.path, ["merge", "--no-ff", "--no-edit", branch])
        except GitError:
            try:
                run_git(main.path, ["merge", "--abort"])
            except GitError as abort_error:
                logger.warning(f"merge --abort failed: {abort_error}")
            raise

        self.delete_worktree(path)
        run_git(main.path, ["branch", "-d", branch])
        logger.info(f"Merged {branch} into {main.branch or 'main'}")

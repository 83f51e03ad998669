"""Change-set providers: which files a change request touches."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Protocol

from kovercov import logger
from kovercov.errors import ChangeSetError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# -z records: "<status>\0<path>\0" or "<status>\0<old_path>\0<new_path>\0"
_TWO_PATH_STATUSES = frozenset({"R", "C"})

_MODIFIED_STATUSES = frozenset({"M", "T"})
_ADDED_STATUSES = frozenset({"A", "C", "R"})


class ChangeSet(Protocol):
    """Subset of a review host's git abstraction consumed by the reporter."""

    def modified_files(self) -> Sequence[str]: ...

    def added_files(self) -> Sequence[str]: ...


@dataclass(frozen=True, slots=True)
class StaticChangeSet:
    """Change set given as explicit path lists."""

    modified: tuple[str, ...] = ()
    added: tuple[str, ...] = ()

    def modified_files(self) -> Sequence[str]:
        return self.modified

    def added_files(self) -> Sequence[str]:
        return self.added


def _git_executable() -> str:
    return shutil.which("git") or "git"


@dataclass
class GitChangeSet:
    """Change set computed with ``git diff --name-status -z``.

    With *head_ref* the diff is ``base_ref...head_ref`` (changes on head since
    the merge base), otherwise *base_ref* against the working tree. Renamed and
    copied files report their new path as added; deletions are ignored.
    """

    base_ref: str
    head_ref: str | None = None
    cwd: Path = field(default_factory=Path.cwd)
    _entries: list[tuple[str, str]] | None = field(default=None, init=False, repr=False)

    def modified_files(self) -> Sequence[str]:
        return [path for status, path in self._name_status() if status in _MODIFIED_STATUSES]

    def added_files(self) -> Sequence[str]:
        return [path for status, path in self._name_status() if status in _ADDED_STATUSES]

    def _name_status(self) -> list[tuple[str, str]]:
        if self._entries is None:
            self._entries = parse_name_status(self._run_diff())
        return self._entries

    def _run_diff(self) -> str:
        target = f"{self.base_ref}...{self.head_ref}" if self.head_ref else self.base_ref
        cmd = [_git_executable(), "diff", "--name-status", "-z", target]
        logger.debug("running %s in %s", " ".join(cmd), self.cwd)
        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            msg = f"git diff against {target!r} failed: {exc.stderr.strip() or exc}"
            raise ChangeSetError(msg) from exc
        except OSError as exc:
            msg = f"unable to run git: {exc}"
            raise ChangeSetError(msg) from exc
        return result.stdout


def parse_name_status(output: str) -> list[tuple[str, str]]:
    """Parse ``git diff --name-status -z`` output into ``(status, path)`` pairs.

    Fields are NUL-terminated and paths are verbatim, so names with spaces or
    non-ASCII characters come through unquoted. Similarity scores (``R100``)
    are dropped; renames and copies yield the new path. A truncated trailing
    record is skipped.
    """
    fields = output.split("\0")
    entries: list[tuple[str, str]] = []
    i = 0
    while i < len(fields):
        token = fields[i]
        i += 1
        if not token:
            continue
        status = token[0].upper()
        width = 2 if status in _TWO_PATH_STATUSES else 1
        paths = fields[i : i + width]
        i += width
        if len(paths) < width or not paths[-1]:
            break
        entries.append((status, paths[-1]))
    return entries


def touched_file_names(changes: ChangeSet, *, dedupe: bool = False) -> list[str]:
    """Return basenames of modified files followed by basenames of added files.

    Duplicates are kept unless *dedupe* is set, in which case the first
    occurrence wins.
    """
    names = [_basename(p) for p in changes.modified_files()]
    names += [_basename(p) for p in changes.added_files()]
    if dedupe:
        return _unique(names)
    return names


def _basename(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).name


def _unique(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))


__all__ = [
    "ChangeSet",
    "GitChangeSet",
    "StaticChangeSet",
    "parse_name_status",
    "touched_file_names",
]

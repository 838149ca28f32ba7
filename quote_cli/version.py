"""
Version information for the quote checker.

The patch number is derived from the git commit count so every commit gets a
distinct version without editing this file. Git being unavailable is not an
error; the base version is used instead.
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Optional


# Base version - this is the only place you need to update the version number
BASE_VERSION = "1.0.0"

REPO_ROOT = Path(__file__).parent.parent


def _run_git(args: List[str]) -> Optional[str]:
    """Run a git command in the repository root and return its stripped stdout."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=REPO_ROOT,
            capture_output=True,
            text=True,
            timeout=5
        )
    except (subprocess.TimeoutExpired, subprocess.SubprocessError, FileNotFoundError, OSError):
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip()


def get_git_commit_hash(short: bool = True) -> Optional[str]:
    args = ["rev-parse", "--short", "HEAD"] if short else ["rev-parse", "HEAD"]
    return _run_git(args) or None


def get_git_commit_count() -> int:
    output = _run_git(["rev-list", "--count", "HEAD"])
    try:
        return int(output) if output else 0
    except ValueError:
        return 0


def is_git_dirty() -> bool:
    return bool(_run_git(["status", "--porcelain"]))


def get_version(include_commit: bool = True, include_dirty: bool = True) -> str:
    """
    Get the full version string.

    Returns:
        Version string in format MAJOR.MINOR.PATCH[+dirty], where PATCH is the
        base patch plus the commit count
    """
    version = BASE_VERSION
    version_parts = BASE_VERSION.split('.')
    if include_commit and len(version_parts) == 3:
        major, minor, base_patch = version_parts
        version = f"{major}.{minor}.{int(base_patch) + get_git_commit_count()}"

    if include_dirty and is_git_dirty():
        version = f"{version}+dirty"
    return version


def get_version_info() -> dict:
    commit_hash = get_git_commit_hash(short=False)
    return {
        "version": get_version(),
        "base_version": BASE_VERSION,
        "commit_hash": commit_hash,
        "short_hash": get_git_commit_hash(short=True),
        "commit_count": get_git_commit_count(),
        "dirty": is_git_dirty(),
        "python_version": sys.version.split()[0],
        "git_available": commit_hash is not None
    }


__version__ = get_version()

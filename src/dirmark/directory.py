# topmark:header:start
#
#   project      : DirMark
#   file         : directory.py
#   file_relpath : src/dirmark/directory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the current directory as a prompt segment.

The renderer composes the pure path stages from `dirmark.paths`:

**Contraction**
    - Paths inside a repository (when ``truncate_to_repo`` is set and the
      repository root is not the home directory) are contracted to begin at the
      repository folder name.
    - Otherwise paths inside the home directory are contracted to ``~``.

**Truncation**
    Paths are limited to ``truncation_length`` trailing components (3 by
    default); the elided head becomes ``…`` or, with
    ``fish_style_pwd_dir_length > 0``, fish-style abbreviations.

Environment lookups (working directory, home directory, shell) happen once in
`RenderContext.from_environment`; `render_directory` itself does no I/O.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from dirmark.config.logging import get_logger
from dirmark.paths import (
    contract,
    decompose,
    format_path,
    get_separator,
    host_uses_windows_paths,
    is_within,
)

if TYPE_CHECKING:
    from dirmark.config.logging import DirmarkLogger
    from dirmark.config.model import DirectoryConfig
    from dirmark.paths import PathComponents

logger: DirmarkLogger = get_logger(__name__)

HOME_SYMBOL: Final[str] = "~"

SHELL_ENV_VAR: Final[str] = "DIRMARK_SHELL"
REPO_ROOT_ENV_VAR: Final[str] = "DIRMARK_REPO_ROOT"


class HomeDirectoryNotFoundError(RuntimeError):
    """Raised when the user's home directory cannot be determined."""


def _physical_path_of(path: str, *, windows: bool) -> str | None:
    """Return ``path`` with symlinks resolved, or None when this host cannot resolve it."""
    if windows != host_uses_windows_paths() or not os.path.isabs(path):
        logger.debug("Cannot resolve %s on this host; using the logical path", path)
        return None
    try:
        return os.path.realpath(path)
    except OSError as exc:
        logger.debug("Error resolving physical path of %s: %s", path, exc)
        return None


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Already-resolved environment inputs for a single render.

    Attributes:
        current_dir (str): Logical working directory (as reported by the shell).
        home_dir (str): Absolute home directory.
        physical_dir (str | None): Physical working directory (as reported by
            the OS), or None when it could not be resolved.
        repo_root (str | None): Root of the enclosing repository, if any.
        shell (str | None): Name of the invoking shell, if known.
        windows (bool): Parse paths with the Windows grammar.
    """

    current_dir: str
    home_dir: str
    physical_dir: str | None = None
    repo_root: str | None = None
    shell: str | None = None
    windows: bool = False

    @classmethod
    def from_environment(
        cls,
        *,
        env: Mapping[str, str] | None = None,
        current_dir: str | None = None,
        home_dir: str | None = None,
        repo_root: str | None = None,
        shell: str | None = None,
        windows: bool | None = None,
    ) -> RenderContext:
        """Resolve the render inputs from the process environment.

        Explicit arguments take precedence over the environment. An explicit
        ``current_dir`` is also the source of the physical path, so it is
        resolved with `os.path.realpath` instead of reading `os.getcwd`.

        Args:
            env (Mapping[str, str] | None): Environment mapping (``os.environ`` when None).
            current_dir (str | None): Logical working directory override.
            home_dir (str | None): Home directory override.
            repo_root (str | None): Repository root override.
            shell (str | None): Shell name override.
            windows (bool | None): Path grammar override; host grammar when None.

        Returns:
            RenderContext: The resolved inputs.

        Raises:
            HomeDirectoryNotFoundError: If no home directory can be determined.
        """
        environ: Mapping[str, str] = os.environ if env is None else env
        use_windows: bool = host_uses_windows_paths() if windows is None else windows

        physical: str | None
        if current_dir:
            physical = _physical_path_of(current_dir, windows=use_windows)
        else:
            try:
                physical = os.getcwd()
            except OSError as exc:
                logger.debug("Error getting physical current directory: %s", exc)
                physical = None

        logical: str | None = current_dir or environ.get("PWD") or physical
        if logical is None:
            raise FileNotFoundError("Cannot determine the current directory")

        home: str | None = home_dir
        if home is None:
            try:
                home = str(Path.home())
            except RuntimeError as exc:
                raise HomeDirectoryNotFoundError(
                    f"Cannot determine the home directory: {exc}"
                ) from exc

        return cls(
            current_dir=logical,
            home_dir=home,
            physical_dir=physical,
            repo_root=repo_root or environ.get(REPO_ROOT_ENV_VAR) or None,
            shell=shell or environ.get(SHELL_ENV_VAR) or None,
            windows=use_windows,
        )

    @property
    def separator(self) -> str:
        """Return the separator used to render paths for this context."""
        return get_separator(self.shell, windows=self.windows)


@dataclass(frozen=True, slots=True)
class DirectorySegment:
    """Rendered directory plus the opaque display association.

    Attributes:
        value (str): The rendered path.
        style (str): Style token, passed through from the configuration.
        prefix (str): Text shown before ``value``.
        suffix (str): Text shown after ``value``.
    """

    value: str
    style: str
    prefix: str = ""
    suffix: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the segment."""
        return {
            "value": self.value,
            "style": self.style,
            "prefix": self.prefix,
            "suffix": self.suffix,
        }


def select_current_dir(context: RenderContext, config: DirectoryConfig) -> str:
    """Return the working directory to render, honoring ``use_logical_path``.

    The physical path is used only when requested and resolvable; otherwise
    the logical path is used.
    """
    if not config.use_logical_path:
        if context.physical_dir is not None:
            return context.physical_dir
        logger.debug("Physical directory unavailable; falling back to %s", context.current_dir)
    return context.current_dir


def contract_current_dir(
    current_dir: str,
    context: RenderContext,
    config: DirectoryConfig,
) -> PathComponents:
    """Apply the repository-root or home-directory contraction rule.

    The repository root is tried first since a repository may live inside the
    home directory. The first rule that matches wins.
    """
    windows: bool = context.windows
    full: PathComponents = decompose(current_dir, windows=windows)
    home: PathComponents = decompose(context.home_dir, windows=windows)

    if config.truncate_to_repo and context.repo_root:
        repo: PathComponents = decompose(context.repo_root, windows=windows)
        repo_name: str | None = repo.last_name()
        if repo != home and repo_name and is_within(full, repo):
            logger.debug("Contracting repository root %s to %r", context.repo_root, repo_name)
            return contract(full, repo, repo_name)

    return contract(full, home, HOME_SYMBOL)


def render_path(context: RenderContext, config: DirectoryConfig) -> str:
    """Return the rendered directory string for ``context``."""
    current_dir: str = select_current_dir(context, config)
    logger.debug("Current directory: %s", current_dir)

    contracted: PathComponents = contract_current_dir(current_dir, context, config)
    return format_path(
        contracted,
        separator=context.separator,
        truncation_length=config.truncation_length,
        fish_style_length=config.fish_style_pwd_dir_length,
    )


def render_directory(context: RenderContext, config: DirectoryConfig) -> DirectorySegment:
    """Render the directory segment.

    Args:
        context (RenderContext): Resolved environment inputs.
        config (DirectoryConfig): Directory configuration.

    Returns:
        DirectorySegment: The rendered value with its style, prefix and suffix.

    Raises:
        NotAbsolutePathError: If the working, home, or repository directory
            is not absolute.
    """
    value: str = render_path(context, config)
    return DirectorySegment(
        value=value,
        style=config.style,
        prefix=config.prefix,
        suffix=config.suffix,
    )

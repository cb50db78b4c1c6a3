"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ProjectSpec
from .errors import AlreadyExistsError, BuildIOError
from .templates import FILE_TEMPLATES, FileTemplate, directory_plan, render_templates

__all__ = ["ProjectScaffolder", "build"]


LOGGER = logging.getLogger(__name__)


def _io_error(path: Path, exc: OSError) -> BuildIOError:
    return BuildIOError(path, exc.strerror or str(exc))


@dataclass(frozen=True, slots=True)
class ProjectScaffolder:
    """Create the standard data-science project tree.

    The build is not transactional: when a step fails, everything created
    before it stays on disk.
    """

    templates: tuple[FileTemplate, ...] = FILE_TEMPLATES

    def build(self, spec: ProjectSpec, base_dir: str | Path) -> Path:
        """Create the project described by ``spec`` inside ``base_dir``.

        Returns the path of the new project root.

        Raises
        ------
        AlreadyExistsError
            If ``base_dir / spec.project_name`` is already present.
        BuildIOError
            If any directory or file cannot be created. The error carries the
            offending path.
        """

        # Render before touching the disk so template errors leave no trace.
        files = render_templates(spec, templates=self.templates)
        directories = directory_plan(spec)

        base_path = Path(base_dir).expanduser()
        root = base_path / spec.project_name
        LOGGER.debug("Building %s with %d directories and %d files", root, len(directories), len(files))

        try:
            base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _io_error(base_path, exc) from exc

        try:
            root.mkdir()
        except FileExistsError as exc:
            raise AlreadyExistsError(root) from exc
        except OSError as exc:
            raise _io_error(root, exc) from exc
        LOGGER.info("Creating directory: %s", root)

        for relative_dir in directories:
            destination = root / relative_dir
            try:
                destination.mkdir()
            except OSError as exc:
                raise _io_error(destination, exc) from exc
            LOGGER.info("Creating directory: %s", destination)

        for relative_path, content in files:
            destination = root / relative_path
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise _io_error(destination, exc) from exc
            LOGGER.info("Created file %s", destination)

        return root


def build(spec: ProjectSpec, base_dir: str | Path) -> Path:
    """Scaffold ``spec`` into ``base_dir`` with the default templates."""

    return ProjectScaffolder().build(spec, base_dir)

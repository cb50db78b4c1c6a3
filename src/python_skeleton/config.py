"""The validated description of a project to scaffold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .naming import validate_package_name, validate_project_name


@dataclass(frozen=True, slots=True)
class ProjectSpec:
    """Names and options driving a single scaffold run.

    Attributes
    ----------
    project_name:
        Train-Case name of the project. It becomes the root directory name and
        appears in the generated README, never in code.
    package_name:
        snake_case name of the importable package created under ``src``.
    include_docs:
        When ``True`` an empty ``docs`` directory is added to the layout.

    Both names are validated on construction, so every instance is safe to
    use as a directory name and an import name.

    Raises
    ------
    InvalidProjectName
        If ``project_name`` is not Train-Case.
    InvalidPackageName
        If ``package_name`` is not a snake_case identifier.
    """

    project_name: str
    package_name: str
    include_docs: bool = False

    def __post_init__(self) -> None:
        validate_project_name(self.project_name)
        validate_package_name(self.package_name)

    @classmethod
    def from_names(
        cls,
        project_name: str,
        package_name: str,
        *,
        include_docs: bool = False,
    ) -> "ProjectSpec":
        """Build a :class:`ProjectSpec` from command line style arguments."""

        return cls(
            project_name=project_name,
            package_name=package_name,
            include_docs=bool(include_docs),
        )

    def context(self) -> Mapping[str, str]:
        """Return the placeholder values exposed to templates."""

        return {
            "project_name": self.project_name,
            "package_name": self.package_name,
        }

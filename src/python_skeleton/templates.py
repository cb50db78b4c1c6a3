"""Static content of every file written into a new project.

Paths and bodies may contain ``{{ package_name }}``; ``{{ project_name }}``
only appears in the README. Both tables are ordered: files and directories
are created in exactly the order listed here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import ProjectSpec
from .template import render

__all__ = [
    "BASE_DIRECTORIES",
    "DOCS_DIRECTORY",
    "FILE_TEMPLATES",
    "FileTemplate",
    "directory_plan",
    "render_templates",
]


@dataclass(frozen=True, slots=True)
class FileTemplate:
    """A file to generate, relative to the project root."""

    relative_path: str
    content: str


README_TEMPLATE = """# {{ project_name }}
A short tagline or description of what your project does.

## Project Structure
```
{{ project_name }}/
|- src/{{ package_name }}/  # Source code
|- test/                # Unit tests
|- pyproject.toml       # Python dependencies and setup
|- README.md            # Project documentation
|- config/              # Configuration of environments
|- notebooks/           # Development notebooks
|- files/               # Data related to the project
```

## Installation
Installation instructions go here.

## Usage
An explanation of how to use the package.

## Running Tests
How to test the project, environments of package.

## Configuration
How to configure the package.

## Documentation
Where do I find information?

## Contributing
How do we work together?

## Issues
How to report something.

## License
Only if needed.
"""

PYPROJECT_TEMPLATE = """[build-system]
requires = ["setuptools >= 70.0"]
build-backend = "setuptools.build_meta"

[project]
name = "{{ package_name }}"
version = "0.1.0"
description = "Some description of the project."
readme = "README.md"
requires-python = ">=3.12"
dependencies = [
    "oracledb",
    "sqlalchemy",
    "numpy",
    "polars",
    "plotly",
    "pyyaml",
    "structlog",
]

# Scripts here
[project.scripts]

# Uv groups dependencies
[dependency-groups]
dev = [
    "jupyterlab>=4.4.0",
    "pytest",
    "ipywidgets",
]

[tool.ruff]
target-version = "py312"

[tool.ruff.lint]
extend-select = ["SIM", "I", "D", "S", "PT"]

[tool.ruff.lint.pydocstyle]
convention = "numpy"

[tool.ruff.lint.per-file-ignores]
"test/*" = ["D", "S"]
"""

GITIGNORE_TEMPLATE = """# Python-generated files
__pycache__/
*.py[oc]
build/
dist/
wheels/
*.egg-info

# Virtual environments
.venv

# Jupyter checkpoints
.ipynb_checkpoints/
"""

SAMPLE_TEST_TEMPLATE = """import pytest


def test_sample():
    # Test something
    pass
"""

CONFIG_TEMPLATE = """# Environment variables are split in categories to make them easier
# to read.
DB:
    DB_USER: "some_user"
    DB_PASSWORD: "some_password"
    DB_HOST: "some_host"
    DB_DATABASE: "some_service"
"""

INIT_TEMPLATE = '''"""Package initiator.

Loads the environment variables.
"""

from .env import load_env

load_env()
'''

ENV_TEMPLATE = '''"""Load environment variables."""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

import yaml


def find_config_file(
    possible_names: Iterable[str] = ("config.yaml", "settings.yaml", "DEV.yaml"),
) -> Optional[Path]:
    """Search for a configuration file.

    Start searching in the current directory, then go up through the parents
    until one of the possible file names is found inside a ``config`` folder.

    Parameters
    ----------
    possible_names: Iterable[str], default = ("config.yaml", "settings.yaml", "DEV.yaml")
        Possible names of the YAML configuration file.

    Returns
    -------
    Optional[Path]
        Path where the file was found.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in possible_names:
            candidate = parent / "config" / name
            if candidate.exists():
                return candidate
    return None


def load_env(path: Optional[str | Path] = None):
    """Load the environment variables from a YAML file.

    Parameters
    ----------
    path: Optional[str | Path]
        Path to the configuration file. If None, search for it.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            raise FileNotFoundError("It was not possible to find a configuration file.")
    else:
        path = Path(path)
    with open(path, "r") as f:
        config = yaml.safe_load(f)

    for section in config:
        for key in config[section]:
            os.environ[key] = str(config[section][key])
'''

DB_TEMPLATE = '''"""Database connections.

This module builds connections to databases. Currently only Oracle is
supported, with the secrets configured through environment variables.

Functions
---------
get_engine
    Create the engine to the production database.
"""

import os
import sys

import oracledb
import sqlalchemy

STD_PRD = os.environ["DB_USER"]
STD_PRD_PASS = os.environ["DB_PASSWORD"]
STD_PRD_DSN = f"{os.environ.get('DB_HOST')}/{os.environ.get('DB_DATABASE')}"


def get_engine() -> sqlalchemy.Engine:
    """Create the Oracle connection engine.

    Uses ``oracledb`` as the backend for SQLAlchemy.

    Returns
    -------
    sqlalchemy.Engine
        Connection engine.

    Raises
    ------
    KeyError
        If an environment variable is missing (``DB_USER``, ``DB_PASSWORD``).
    sqlalchemy.exc.SQLAlchemyError
        Some error from SQLAlchemy when building the engine.

    Examples
    --------
    >>> engine = get_engine()
    >>> with engine.connect() as conn:
    ...     result = conn.execute(sqlalchemy.text("SELECT * FROM employees"))
    """
    oracledb.version = "8.3.0"
    sys.modules["cx_Oracle"] = oracledb
    engine = sqlalchemy.create_engine(
        "oracle://:@",
        connect_args={"user": STD_PRD, "password": STD_PRD_PASS, "dsn": STD_PRD_DSN},
    )
    return engine
'''

MAIN_TEMPLATE = '''"""Example of main file with logs."""

import polars as pl
import structlog

# This must be called in every file that logs.
logger = structlog.get_logger()

df = pl.DataFrame({"A": [1, 2], "B": [3, 4]})
logger.info("Hello world!", more_than_strings=df)
'''


FILE_TEMPLATES: tuple[FileTemplate, ...] = (
    FileTemplate("README.md", README_TEMPLATE),
    FileTemplate("pyproject.toml", PYPROJECT_TEMPLATE),
    FileTemplate(".gitignore", GITIGNORE_TEMPLATE),
    FileTemplate("test/sample_test.py", SAMPLE_TEST_TEMPLATE),
    FileTemplate("config/DEV.yaml", CONFIG_TEMPLATE),
    FileTemplate("src/{{ package_name }}/__init__.py", INIT_TEMPLATE),
    FileTemplate("src/{{ package_name }}/env.py", ENV_TEMPLATE),
    FileTemplate("src/{{ package_name }}/db.py", DB_TEMPLATE),
    FileTemplate("src/{{ package_name }}/main.py", MAIN_TEMPLATE),
)

BASE_DIRECTORIES: tuple[str, ...] = (
    "config",
    "files",
    "notebooks",
    "test",
    "src",
    "src/{{ package_name }}",
)

DOCS_DIRECTORY = "docs"


def directory_plan(spec: ProjectSpec) -> tuple[str, ...]:
    """Return the directories to create inside the project root, in order."""

    context = spec.context()
    plan = [render(path, context) for path in BASE_DIRECTORIES]
    if spec.include_docs:
        plan.append(DOCS_DIRECTORY)
    return tuple(plan)


def render_templates(
    spec: ProjectSpec,
    *,
    templates: tuple[FileTemplate, ...] = FILE_TEMPLATES,
) -> tuple[tuple[str, str], ...]:
    """Render ``templates`` for ``spec`` as ordered ``(relative_path, content)`` pairs.

    Rendering is a pure function of its inputs. Unresolved placeholders raise
    :class:`~python_skeleton.template.TemplateRenderingError`.
    """

    context = spec.context()
    return tuple(
        (render(template.relative_path, context), render(template.content, context))
        for template in templates
    )

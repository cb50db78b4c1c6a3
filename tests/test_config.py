from __future__ import annotations

import dataclasses

import pytest

from python_skeleton.config import ProjectSpec
from python_skeleton.errors import InvalidPackageName, InvalidProjectName


def test_from_names_builds_spec():
    spec = ProjectSpec.from_names("My-Project", "my_package", include_docs=True)
    assert spec == ProjectSpec("My-Project", "my_package", True)


def test_from_names_defaults_to_no_docs():
    assert ProjectSpec.from_names("Demo", "demo").include_docs is False


def test_from_names_validates_project_first():
    with pytest.raises(InvalidProjectName):
        ProjectSpec.from_names("bad-name", "Bad")


def test_from_names_rejects_package():
    with pytest.raises(InvalidPackageName):
        ProjectSpec.from_names("My-Project", "My_Package")


def test_spec_is_immutable():
    spec = ProjectSpec.from_names("Demo", "demo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.package_name = "other"  # type: ignore[misc]


def test_context_exposes_names():
    context = ProjectSpec.from_names("My-Project", "my_package").context()
    assert context == {"project_name": "My-Project", "package_name": "my_package"}


@pytest.mark.parametrize(
    "project_name, package_name, error",
    [
        ("../Escaped", "my_package", InvalidProjectName),
        ("My-Project", "../../pkg", InvalidPackageName),
        ("my-project", "my_package", InvalidProjectName),
        ("My-Project", "My_Package", InvalidPackageName),
    ],
)
def test_direct_construction_validates(project_name, package_name, error):
    with pytest.raises(error):
        ProjectSpec(project_name, package_name)


def test_replace_revalidates():
    spec = ProjectSpec.from_names("Demo", "demo")
    with pytest.raises(InvalidPackageName):
        dataclasses.replace(spec, package_name="not-valid")

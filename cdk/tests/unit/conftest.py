"""Shared fixtures for the fitness score CDK tests."""

import zipfile

import pytest
from aws_cdk import App, Stack

from fitness_score.constants import FITNESS_SCORE_GET, FITNESS_SCORE_STORE


def write_artifact(directory, name: str, payload: bytes = b"#!/bin/sh\n") -> str:
    """Write a minimal <name>.zip with an executable `main` at its root."""
    path = directory / f"{name}.zip"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("main", payload)
    return str(path)


@pytest.fixture
def artifact_dir(tmp_path):
    """Directory holding both function packages."""
    directory = tmp_path / "lambda"
    directory.mkdir()
    write_artifact(directory, FITNESS_SCORE_GET)
    write_artifact(directory, FITNESS_SCORE_STORE)
    return str(directory)


@pytest.fixture
def empty_artifact_dir(tmp_path):
    """Directory with no function packages in it."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return str(directory)


@pytest.fixture
def stack():
    """Create a test stack."""
    app = App()
    return Stack(app, "TestStack")


@pytest.fixture
def make_artifact():
    """Factory fixture writing <name>.zip into a directory."""
    return write_artifact

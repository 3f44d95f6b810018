"""
Deployment artifacts for the custom-runtime functions.

A function package is a zip archive named <name>.zip holding a single
executable `main` at its root. Packages are built outside this repository;
this module only locates them for the stack and wraps a built executable
into the expected layout.
"""

import os
import zipfile
from pathlib import Path
from typing import Any, Dict, Iterable

from .constants import ARTIFACT_SUFFIX
from .errors import ArtifactNotFoundError, InvalidFunctionNameError

ENTRY_NAME = "main"

# Fixed entry timestamp keeps the archive bytes (and the asset hash) stable
FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)

# Regular file, rwxr-xr-x
EXECUTABLE_ATTR = 0o100755 << 16


def validate_function_name(name: Any) -> str:
    """Return name unchanged, or raise InvalidFunctionNameError if it cannot name a package."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidFunctionNameError(name)
    if name in (".", "..") or "/" in name or "\\" in name or os.sep in name:
        raise InvalidFunctionNameError(name)
    return name


def artifact_path_for(name: str, artifact_dir: str) -> str:
    return os.path.abspath(os.path.join(artifact_dir, f"{validate_function_name(name)}{ARTIFACT_SUFFIX}"))


def locate_artifact(name: str, artifact_dir: str) -> str:
    """Return the absolute path of the deployment package for a function.

    Args:
        name: Function package name (e.g. 'fitness_score_get')
        artifact_dir: Directory holding the pre-built <name>.zip packages

    Returns:
        Absolute path to <artifact_dir>/<name>.zip

    Raises:
        InvalidFunctionNameError: name is empty or contains a path separator
        ArtifactNotFoundError: the package file does not exist
    """
    artifact_path = artifact_path_for(name, artifact_dir)
    if not os.path.isfile(artifact_path):
        raise ArtifactNotFoundError(name, artifact_path)
    return artifact_path


def locate_artifacts(names: Iterable[str], artifact_dir: str) -> Dict[str, str]:
    """Resolve every package up front so a missing one fails before any construct exists."""
    return {name: locate_artifact(name, artifact_dir) for name in names}


def package_artifact(executable: Path, name: str, output_dir: Path) -> Path:
    """Write <output_dir>/<name>.zip with the executable stored as `main`.

    Raises:
        InvalidFunctionNameError: name cannot name a package
        FileNotFoundError: the executable does not exist
    """
    artifact_path = Path(artifact_path_for(name, str(output_dir)))
    if not executable.is_file():
        raise FileNotFoundError(f"Executable not found: {executable}")

    output_dir.mkdir(parents=True, exist_ok=True)

    info = zipfile.ZipInfo(ENTRY_NAME, date_time=FIXED_DATE_TIME)
    info.external_attr = EXECUTABLE_ATTR
    info.compress_type = zipfile.ZIP_DEFLATED

    with zipfile.ZipFile(artifact_path, "w") as archive:
        archive.writestr(info, executable.read_bytes())

    return artifact_path

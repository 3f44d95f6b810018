#!/usr/bin/env python3
"""Package a pre-built function executable as a <name>.zip deployment artifact.

Usage:
    python scripts/package_artifact.py target/release/fitness_score_get fitness_score_get

The executable is stored at the root of the archive as `main`. Re-packaging
an unchanged binary yields the same bytes, so the CDK asset hash is stable.
"""

import argparse
from pathlib import Path

from fitness_score.artifacts import package_artifact
from fitness_score.helpers import DEFAULT_ARTIFACT_DIR


def main() -> None:
    parser = argparse.ArgumentParser(description="Package a function executable as <name>.zip")
    parser.add_argument("executable", type=Path, help="Path to the built executable")
    parser.add_argument("name", help="Function package name, e.g. fitness_score_get")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(DEFAULT_ARTIFACT_DIR),
        help="Directory to write <name>.zip into (default: cdk/lambda)",
    )
    args = parser.parse_args()

    artifact_path = package_artifact(args.executable, args.name, args.output_dir)
    print(f"Packaged {args.executable} -> {artifact_path}")


if __name__ == "__main__":
    main()

"""
Shared helper utilities for CDK stack construction.

This module provides:
- Region abbreviation mapping for resource naming
- Resource naming function (rn)
- Environment and CDK context configuration utilities
"""

import os
from pathlib import Path
from typing import Callable, Optional

from constructs import Construct

# Region abbreviation mapping for resource naming
# Pattern: {name}-{region_abbrev}-{env} e.g. fitness-score-ue1-dev
REGION_ABBREVIATIONS: dict[str, str] = {
    "us-east-1": "ue1",
    "us-east-2": "ue2",
    "us-west-1": "uw1",
    "us-west-2": "uw2",
    "eu-west-1": "ew1",
    "eu-west-2": "ew2",
    "eu-west-3": "ew3",
    "eu-central-1": "ec1",
    "eu-north-1": "en1",
    "ap-northeast-1": "ane1",  # Tokyo
    "ap-northeast-2": "ane2",  # Seoul
    "ap-northeast-3": "ane3",  # Osaka
    "ap-southeast-1": "ase1",  # Singapore
    "ap-southeast-2": "ase2",  # Sydney
    "ap-south-1": "as1",  # Mumbai
    "sa-east-1": "se1",  # Sao Paulo
    "ca-central-1": "cc1",  # Canada
}

DEFAULT_ENV_NAME = "dev"

# Pre-built function packages live next to the CDK package
DEFAULT_ARTIFACT_DIR = str(Path(__file__).resolve().parent.parent / "lambda")


def get_region() -> str:
    """Get the AWS region from environment variables or default to us-east-1."""
    return os.getenv("AWS_REGION") or os.getenv("CDK_DEFAULT_REGION") or "us-east-1"


def get_region_abbrev(region: Optional[str] = None) -> str:
    """Get the region abbreviation for resource naming.

    Args:
        region: AWS region code. If None, reads from environment.

    Returns:
        Region abbreviation (e.g., 'ue1' for 'us-east-1')
    """
    if region is None:
        region = get_region()
    return REGION_ABBREVIATIONS.get(region, region[:3])


def get_account() -> Optional[str]:
    """Get the AWS account ID from environment variables, if any."""
    return os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT") or None


def make_resource_namer(region_abbrev: str, env_name: str) -> Callable[..., str]:
    """Create a resource naming function.

    Args:
        region_abbrev: Region abbreviation (e.g., 'ue1')
        env_name: Environment name (e.g., 'dev', 'prod')

    Returns:
        A function that takes a base name and returns a fully qualified name
    """

    def rn(name: str, abbrev: str = region_abbrev, env: str = env_name) -> str:
        """Generate resource name with region and environment suffix."""
        return f"{name}-{abbrev}-{env}"

    return rn


def get_context_str(scope: Construct, key: str, default: Optional[str] = None) -> Optional[str]:
    """Read a string value from CDK context, falling back to default when unset or empty."""
    value = scope.node.try_get_context(key)
    if value is None or value == "":
        return default
    return str(value)


def get_environment_name(scope: Construct) -> str:
    """Get the deployment environment name (context 'environment', then ENVIRONMENT)."""
    return get_context_str(scope, "environment") or os.getenv("ENVIRONMENT") or DEFAULT_ENV_NAME


def get_artifact_dir(scope: Construct) -> str:
    """Get the directory holding the pre-built <name>.zip function packages.

    Resolution order: context 'artifact_dir', FITNESS_ARTIFACT_DIR, then the
    lambda/ directory next to this package.
    """
    return (
        get_context_str(scope, "artifact_dir")
        or os.getenv("FITNESS_ARTIFACT_DIR")
        or DEFAULT_ARTIFACT_DIR
    )


def load_dotenv_file(path: Path) -> None:
    """Load KEY=VALUE lines from a .env file into os.environ.

    Variables already present in the environment win.
    """
    if not path.exists():
        return
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                # Only set if not already in environment (allow override)
                if key.strip() and not os.getenv(key.strip()):
                    os.environ[key.strip()] = value.strip()

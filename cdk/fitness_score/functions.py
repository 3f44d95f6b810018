"""
Lambda function definitions for the fitness score stack.

Both functions run on a custom runtime: the deployment package carries its
own executable, so the handler setting is a placeholder the runtime never
reads. Packages are pre-built outside this repository and looked up by the
fixed convention <artifact_dir>/<name>.zip.
"""

from typing import Any, Dict

from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_s3_assets as s3_assets
from constructs import Construct

from .artifacts import locate_artifact, locate_artifacts
from .constants import (
    ENV_INDEX_NAME_AGE,
    ENV_INDEX_NAME_SCORE,
    ENV_TABLE_NAME,
    FITNESS_SCORE_GET,
    FITNESS_SCORE_STORE,
)
from .logging import SynthLogger

logger = SynthLogger(__name__)

CUSTOM_RUNTIME = lambda_.Runtime.PROVIDED_AL2023

# Ignored by the custom runtime
PLACEHOLDER_HANDLER = "main"


def create_function(
    scope: Construct,
    name: str,
    artifact_dir: str,
    **options: Any,
) -> lambda_.Function:
    """Create a custom-runtime Lambda function from <artifact_dir>/<name>.zip.

    The package is first staged as an S3 asset and the function code is then
    referenced by bucket and key.

    Args:
        scope: CDK construct scope
        name: Function package name, also used in the logical IDs
        artifact_dir: Directory holding the pre-built packages
        **options: Passed through to lambda_.Function (environment,
            memory_size, timeout, ...); may override runtime and handler

    Returns:
        The Lambda function
    """
    artifact_path = locate_artifact(name, artifact_dir)

    logger.debug("Staging function package", function_name=name, artifact_path=artifact_path)
    asset = s3_assets.Asset(
        scope,
        f"FitnessScoreAsset_{name}",
        path=artifact_path,
    )

    props: Dict[str, Any] = {
        "runtime": CUSTOM_RUNTIME,
        "code": lambda_.Code.from_bucket(asset.bucket, asset.s3_object_key),
        "handler": PLACEHOLDER_HANDLER,
        **options,
    }

    logger.info("Creating function", function_name=name)
    return lambda_.Function(scope, f"FitnessScoreFunction_{name}", **props)


def create_fitness_functions(
    scope: Construct,
    table_info: Dict[str, Any],
    artifact_dir: str,
    **options: Any,
) -> Dict[str, lambda_.Function]:
    """Create the read and write functions for the fitness score table.

    Args:
        scope: CDK construct scope
        table_info: Result of create_fitness_score_table
        artifact_dir: Directory holding the pre-built packages
        **options: Extra lambda_.Function options applied to both functions

    Returns:
        Dict with 'fitness_score_get_fn' and 'fitness_score_store_fn'
    """
    locate_artifacts([FITNESS_SCORE_GET, FITNESS_SCORE_STORE], artifact_dir)

    # Both functions see the same table and index names
    lambda_env = {
        **options.pop("environment", {}),
        ENV_TABLE_NAME: table_info["table"].table_name,
        ENV_INDEX_NAME_AGE: table_info["index_name_age"],
        ENV_INDEX_NAME_SCORE: table_info["index_name_score"],
    }

    fitness_score_get_fn = create_function(
        scope,
        FITNESS_SCORE_GET,
        artifact_dir,
        environment=dict(lambda_env),
        **options,
    )
    fitness_score_store_fn = create_function(
        scope,
        FITNESS_SCORE_STORE,
        artifact_dir,
        environment=dict(lambda_env),
        **options,
    )

    return {
        "fitness_score_get_fn": fitness_score_get_fn,
        "fitness_score_store_fn": fitness_score_store_fn,
    }

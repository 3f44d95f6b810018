"""DynamoDB table holding fitness score records."""

from typing import Any, Dict

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

from .constants import INDEX_NAME_AGE, INDEX_NAME_SCORE


def create_fitness_score_table(stack: Construct) -> Dict[str, Any]:
    """Create the fitness score table and its two sort-order indexes.

    Items are keyed by (username, version). Both indexes are partitioned by
    version so that all users of one version can be range-queried by age or
    by score.

    Args:
        stack: CDK Construct (usually the Stack instance)

    Returns:
        Dict with 'table', 'index_name_age' and 'index_name_score'
    """
    table = ddb.Table(
        stack,
        "FitnessScoreTable",
        partition_key=ddb.Attribute(name="username", type=ddb.AttributeType.STRING),
        sort_key=ddb.Attribute(name="version", type=ddb.AttributeType.STRING),
        billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
        removal_policy=RemovalPolicy.DESTROY,
    )
    table.add_global_secondary_index(
        index_name=INDEX_NAME_AGE,
        partition_key=ddb.Attribute(name="version", type=ddb.AttributeType.STRING),
        sort_key=ddb.Attribute(name="age", type=ddb.AttributeType.NUMBER),
        projection_type=ddb.ProjectionType.ALL,
    )
    table.add_global_secondary_index(
        index_name=INDEX_NAME_SCORE,
        partition_key=ddb.Attribute(name="version", type=ddb.AttributeType.STRING),
        sort_key=ddb.Attribute(name="score", type=ddb.AttributeType.NUMBER),
        projection_type=ddb.ProjectionType.ALL,
    )

    return {
        "table": table,
        "index_name_age": INDEX_NAME_AGE,
        "index_name_score": INDEX_NAME_SCORE,
    }

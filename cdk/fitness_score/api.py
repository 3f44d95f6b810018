"""REST API routing /fitness to the fitness score functions."""

from typing import Any, Dict, Optional

from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from .constants import FITNESS_RESOURCE_PATH


def create_fitness_api(
    scope: Construct,
    read_fn: lambda_.IFunction,
    write_fn: lambda_.IFunction,
    rest_api_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Create the REST API with GET and POST on /fitness.

    Both methods use a plain proxy integration: no authorizer, no request
    mapping and provider-default throttling.

    Args:
        scope: CDK construct scope
        read_fn: Function serving GET /fitness
        write_fn: Function serving POST /fitness
        rest_api_name: Optional display name for the API

    Returns:
        Dict with 'api', 'fitness_resource', 'get_method' and 'post_method'
    """
    api = apigw.RestApi(scope, "FitnessScoreApi", rest_api_name=rest_api_name)

    fitness_resource = api.root.add_resource(FITNESS_RESOURCE_PATH)
    get_method = fitness_resource.add_method("GET", apigw.LambdaIntegration(read_fn))
    post_method = fitness_resource.add_method("POST", apigw.LambdaIntegration(write_fn))

    return {
        "api": api,
        "fitness_resource": fitness_resource,
        "get_method": get_method,
        "post_method": post_method,
    }

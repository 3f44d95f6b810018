from typing import Any, Dict, Optional

from aws_cdk import CfnOutput, Stack, Tags
from constructs import Construct

from .api import create_fitness_api
from .artifacts import locate_artifacts
from .constants import FITNESS_SCORE_GET, FITNESS_SCORE_STORE, PROJECT_NAME
from .functions import create_fitness_functions
from .helpers import get_artifact_dir, get_region_abbrev, make_resource_namer
from .logging import SynthLogger
from .permissions import grant_table_access
from .table import create_fitness_score_table

logger = SynthLogger(__name__)


class FitnessScoreStack(Stack):
    """
    Fitness Score - REST API over a DynamoDB table

    Creates:
    - DynamoDB table keyed by (username, version) with age and score indexes
    - Read and write Lambda functions from pre-built custom-runtime packages
    - Read-only / write-only table grants for those functions
    - REST API with GET and POST on /fitness
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        env_name: str = "dev",
        artifact_dir: Optional[str] = None,
        function_options: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name
        self.artifact_dir = artifact_dir or get_artifact_dir(self)

        # Helper for consistent resource naming: {name}-{region}-{env}
        rn = make_resource_namer(get_region_abbrev(), env_name)
        self.resource_name = rn

        # Fail before declaring anything if a package is missing
        locate_artifacts([FITNESS_SCORE_GET, FITNESS_SCORE_STORE], self.artifact_dir)

        logger.info("Creating fitness score table", stack=construct_id)
        table_info = create_fitness_score_table(self)
        self.table = table_info["table"]

        functions = create_fitness_functions(
            self,
            table_info,
            self.artifact_dir,
            **(function_options or {}),
        )
        self.fitness_score_get_fn = functions["fitness_score_get_fn"]
        self.fitness_score_store_fn = functions["fitness_score_store_fn"]

        self.grants = grant_table_access(
            self.table,
            read_fn=self.fitness_score_get_fn,
            write_fn=self.fitness_score_store_fn,
        )

        logger.info("Creating fitness score API", stack=construct_id)
        api_info = create_fitness_api(
            self,
            read_fn=self.fitness_score_get_fn,
            write_fn=self.fitness_score_store_fn,
            rest_api_name=rn("fitness-score-api"),
        )
        self.api = api_info["api"]
        self.fitness_resource = api_info["fitness_resource"]

        Tags.of(self).add("Project", PROJECT_NAME)
        Tags.of(self).add("Environment", env_name)

        CfnOutput(self, "ApiUrl", value=self.api.url_for_path(self.fitness_resource.path))
        CfnOutput(self, "TableName", value=self.table.table_name)
        CfnOutput(self, "FitnessScoreGetFunctionName", value=self.fitness_score_get_fn.function_name)
        CfnOutput(self, "FitnessScoreStoreFunctionName", value=self.fitness_score_store_fn.function_name)

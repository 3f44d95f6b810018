#!/usr/bin/env python3
from pathlib import Path

import aws_cdk as cdk

from fitness_score.errors import StackConfigurationError
from fitness_score.fitness_score_stack import FitnessScoreStack
from fitness_score.helpers import (
    get_account,
    get_environment_name,
    get_region,
    get_region_abbrev,
    load_dotenv_file,
)
from fitness_score.logging import SynthLogger

logger = SynthLogger("app")

# Load environment variables from .env file if it exists
load_dotenv_file(Path(__file__).parent / ".env")

app = cdk.App()

# Get environment from context or environment variable (dev/prod)
env_name = get_environment_name(app)

# Get region and its abbreviation for stack naming
region = get_region()
region_abbrev = get_region_abbrev(region)

# Without an account the stack stays environment-agnostic
account = get_account()
env = cdk.Environment(account=account, region=region) if account else None

try:
    FitnessScoreStack(
        app,
        f"FitnessScoreStack-{region_abbrev}-{env_name}",
        stack_name=f"fitness-score-{region_abbrev}-{env_name}",
        env_name=env_name,
        env=env,
        description=f"Fitness Score - REST API and table ({region_abbrev}-{env_name})",
    )
except StackConfigurationError as e:
    logger.error("Stack synthesis aborted", error=e.to_dict())
    raise

app.synth()

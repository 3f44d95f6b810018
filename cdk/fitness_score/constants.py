"""Names shared between the stack and the function artifacts.

The index names and environment variable keys are read by the deployed
functions, so they must not change between deployments.
"""

# Global secondary index names
INDEX_NAME_AGE = "FitnessScoreSortByAge"
INDEX_NAME_SCORE = "FitnessScoreSortByScore"

# Function package names, also the artifact basenames (<name>.zip)
FITNESS_SCORE_GET = "fitness_score_get"
FITNESS_SCORE_STORE = "fitness_score_store"

ARTIFACT_SUFFIX = ".zip"

# API resource path segment
FITNESS_RESOURCE_PATH = "fitness"

# Environment variables passed to both functions
ENV_TABLE_NAME = "TABLE_NAME"
ENV_INDEX_NAME_AGE = "INDEX_NAME_AGE"
ENV_INDEX_NAME_SCORE = "INDEX_NAME_SCORE"

PROJECT_NAME = "fitness-score"

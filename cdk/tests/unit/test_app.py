"""End-to-end synthesis through the CDK app entry point."""

import runpy
from pathlib import Path

import pytest
from aws_cdk import assertions

from fitness_score.errors import ArtifactNotFoundError
from fitness_score.fitness_score_stack import FitnessScoreStack

APP_PATH = Path(__file__).resolve().parents[2] / "app.py"


@pytest.fixture
def app_env(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("AWS_ACCOUNT_ID", raising=False)
    monkeypatch.delenv("CDK_DEFAULT_ACCOUNT", raising=False)


def test_app_synthesizes_stack(app_env, artifact_dir, monkeypatch):
    monkeypatch.setenv("FITNESS_ARTIFACT_DIR", artifact_dir)

    app_globals = runpy.run_path(str(APP_PATH), run_name="__main__")

    stack = app_globals["app"].node.find_child("FitnessScoreStack-ue1-test")
    assert isinstance(stack, FitnessScoreStack)
    assert stack.stack_name == "fitness-score-ue1-test"
    assert stack.env_name == "test"

    template = assertions.Template.from_stack(stack)
    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.resource_count_is("AWS::Lambda::Function", 2)


def test_app_fails_without_artifacts(app_env, empty_artifact_dir, monkeypatch):
    monkeypatch.setenv("FITNESS_ARTIFACT_DIR", empty_artifact_dir)

    with pytest.raises(ArtifactNotFoundError):
        runpy.run_path(str(APP_PATH), run_name="__main__")

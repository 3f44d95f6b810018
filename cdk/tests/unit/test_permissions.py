"""Tests for table access grants."""

import pytest
from aws_cdk import assertions
from aws_cdk import aws_lambda as lambda_

from fitness_score.permissions import grant_table_access
from fitness_score.table import create_fitness_score_table

WRITE_ACTIONS = {"dynamodb:PutItem", "dynamodb:UpdateItem", "dynamodb:DeleteItem", "dynamodb:BatchWriteItem"}
READ_ACTIONS = {"dynamodb:GetItem", "dynamodb:Query", "dynamodb:Scan", "dynamodb:BatchGetItem"}


def _inline_function(stack, construct_id):
    return lambda_.Function(
        stack,
        construct_id,
        runtime=lambda_.Runtime.PYTHON_3_12,
        handler="index.handler",
        code=lambda_.Code.from_inline("def handler(event, context):\n    return None\n"),
    )


def policy_actions_for(stack, template, fn) -> set:
    """Collect every action in IAM policies attached to the function's role."""
    role_id = stack.get_logical_id(fn.role.node.default_child)
    actions: set = set()
    for policy in template.find_resources("AWS::IAM::Policy").values():
        if {"Ref": role_id} not in policy["Properties"]["Roles"]:
            continue
        for statement in policy["Properties"]["PolicyDocument"]["Statement"]:
            action = statement["Action"]
            actions.update([action] if isinstance(action, str) else action)
    return actions


class TestGrantTableAccess:
    """Tests for grant_table_access."""

    @pytest.fixture
    def resources(self, stack):
        table = create_fitness_score_table(stack)["table"]
        read_fn = _inline_function(stack, "ReadFn")
        write_fn = _inline_function(stack, "WriteFn")
        grants = grant_table_access(table, read_fn, write_fn)
        return {"table": table, "read_fn": read_fn, "write_fn": write_fn, "grants": grants}

    def test_returns_read_and_write_grants(self, resources):
        grants = resources["grants"]

        assert set(grants) == {"read", "write"}
        assert grants["read"].success
        assert grants["write"].success

    def test_one_policy_per_function(self, stack, resources):
        template = assertions.Template.from_stack(stack)

        template.resource_count_is("AWS::IAM::Policy", 2)

    def test_read_function_can_read_but_not_write(self, stack, resources):
        template = assertions.Template.from_stack(stack)

        actions = policy_actions_for(stack, template, resources["read_fn"])

        assert READ_ACTIONS <= actions
        assert not actions & WRITE_ACTIONS

    def test_write_function_can_write_but_not_read(self, stack, resources):
        template = assertions.Template.from_stack(stack)

        actions = policy_actions_for(stack, template, resources["write_fn"])

        assert WRITE_ACTIONS <= actions
        assert not actions & READ_ACTIONS

    def test_read_grant_covers_indexes(self, stack, resources):
        """Querying by age or score needs access to the index ARNs."""
        template = assertions.Template.from_stack(stack)
        table_id = stack.get_logical_id(resources["table"].node.default_child)

        template.has_resource_properties(
            "AWS::IAM::Policy",
            {
                "PolicyDocument": {
                    "Statement": assertions.Match.array_with(
                        [
                            assertions.Match.object_like(
                                {
                                    "Action": assertions.Match.array_with(["dynamodb:Query"]),
                                    "Resource": assertions.Match.array_with(
                                        [{"Fn::GetAtt": [table_id, "Arn"]}]
                                    ),
                                }
                            )
                        ]
                    )
                }
            },
        )

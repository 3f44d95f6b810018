"""Table access grants for the fitness score functions."""

from typing import Dict

from aws_cdk import aws_dynamodb as ddb
from aws_cdk import aws_iam as iam


def grant_table_access(
    table: ddb.ITable,
    read_fn: iam.IGrantable,
    write_fn: iam.IGrantable,
) -> Dict[str, iam.Grant]:
    """Grant read-only access to the read function and write-only access to the write function.

    Nothing else is granted: the read function can never write and the
    write function can never read or query.

    Returns:
        Dict with the 'read' and 'write' grants
    """
    return {
        "read": table.grant_read_data(read_fn),
        "write": table.grant_write_data(write_fn),
    }

# PURPOSE: Thin DynamoDB helpers for the wizard's session records.
# CONTEXT: Table name and region come from Settings; the table handle is created per
#          call so tests can swap the environment (and moto) underneath.

from __future__ import annotations
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError

from fund_selector.config import load_settings


def _table():
    settings = load_settings()
    return boto3.resource("dynamodb", region_name=settings.aws_region).Table(settings.session_table)


def get_item(session_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch one session by its partition key.

    returns:
    - dict or None – the stored record, or None if not found.

    raises:
    - RuntimeError – wraps ClientError with the AWS message.
    """
    try:
        res = _table().get_item(Key={"session_id": session_id})
        return res.get("Item")
    except ClientError as e:
        raise RuntimeError(f"DDB get_item failed: {e.response['Error']['Message']}")


def put_item(item: Dict[str, Any]) -> Dict[str, Any]:
    try:
        _table().put_item(Item=item)
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB put_item failed: {e.response['Error']['Message']}")


def update_json(session_id: str, path: str, value: Any) -> Dict[str, Any]:
    """Set one top-level attribute (e.g. 'fields') on a session record."""
    try:
        _table().update_item(
            Key={"session_id": session_id},
            UpdateExpression="SET #k = :v",
            ExpressionAttributeNames={"#k": path},
            ExpressionAttributeValues={":v": value},
        )
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB update_item failed: {e.response['Error']['Message']}")


def delete_item(session_id: str) -> Dict[str, Any]:
    try:
        _table().delete_item(Key={"session_id": session_id})
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB delete_item failed: {e.response['Error']['Message']}")

"""SNS client factory."""
from typing import Any, Optional

import boto3


def create_sns_client(region: Optional[str] = None) -> Any:
    """Create a boto3 SNS client for region (boto3 default when None)."""
    return boto3.client("sns", region_name=region)

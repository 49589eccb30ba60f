"""Shared fixtures."""
from datetime import datetime, timezone

import boto3
import pytest
from moto import mock_aws

from iot_button_notifier.infra.common import Clock


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches real AWS."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def sns_client():
    """SNS client backed by moto."""
    with mock_aws():
        yield boto3.client("sns", region_name="us-east-1")


class FixedClock(Clock):
    """Clock frozen at a given instant."""
    
    def __init__(self, instant: datetime):
        self.instant = instant
    
    def now(self) -> datetime:
        return self.instant


@pytest.fixture
def fixed_clock():
    """Clock frozen at Mon Oct 19 2026 08:15:00 UTC."""
    return FixedClock(datetime(2026, 10, 19, 8, 15, 0, tzinfo=timezone.utc))

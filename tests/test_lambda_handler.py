"""Tests for the Lambda entry point."""
import logging

import pytest
from unittest.mock import patch

from iot_button_notifier.app.lambda_handler import handler
from iot_button_notifier.domain.entities.app_config import AppConfig
from iot_button_notifier.infra.common import InvalidClickEvent, PublishFailed

EVENT = {"serialNumber": "G030JF053956LERW", "batteryVoltage": "1441mV", "clickType": "SINGLE"}


@pytest.fixture
def local_env(monkeypatch, sns_client):
    monkeypatch.setenv("ENV", "local")
    monkeypatch.setenv("RECIPIENT_EMAIL", "someone@example.com")
    monkeypatch.setenv("SNS_TOPIC_NAME", "handler-topic")
    return sns_client


def test_handler_returns_dispatch_result(local_env):
    result = handler(EVENT, None)
    
    assert result["topic_arn"].endswith(":handler-topic")
    assert result["message_id"]
    assert "subscription_arn" in result


def test_handler_raises_on_invalid_event(local_env):
    with pytest.raises(InvalidClickEvent):
        handler({"clickType": "SINGLE"}, None)


@patch("iot_button_notifier.app.lambda_handler.notify_button_press")
@patch("iot_button_notifier.app.lambda_handler.load_app_config")
def test_handler_propagates_step_errors(mock_load_app_config, mock_notify):
    mock_load_app_config.return_value = AppConfig(recipient_email="someone@example.com")
    error = PublishFailed("boom")
    mock_notify.side_effect = error
    
    with pytest.raises(PublishFailed) as exc_info:
        handler(EVENT, None)
    
    assert exc_info.value is error


@patch("iot_button_notifier.app.lambda_handler.notify_button_press")
@patch("iot_button_notifier.app.lambda_handler.load_app_config")
def test_handler_logs_unexpected_errors(mock_load_app_config, mock_notify, caplog):
    mock_load_app_config.return_value = AppConfig(recipient_email="someone@example.com")
    mock_notify.side_effect = KeyError("MessageId")
    
    with caplog.at_level(logging.ERROR, logger="iot_button_notifier.app.lambda_handler"):
        with pytest.raises(KeyError):
            handler(EVENT, None)
    
    assert "Unexpected error handling button press" in caplog.text

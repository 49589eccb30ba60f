"""Local environment configuration."""
import os
from iot_button_notifier.domain.entities.app_config import AppConfig


def build_config() -> AppConfig:
    return AppConfig(
        recipient_email=os.getenv("RECIPIENT_EMAIL", "email@domain.com"),
        topic_name=os.getenv("SNS_TOPIC_NAME", "aws-iot-button-sns-topic-local"),
        aws_region=os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
    )

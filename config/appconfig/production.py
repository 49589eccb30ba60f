"""Production environment configuration."""
import os
from iot_button_notifier.domain.entities.app_config import AppConfig


def build_config() -> AppConfig:
    return AppConfig(
        recipient_email=os.getenv("RECIPIENT_EMAIL"),
        topic_name=os.getenv("SNS_TOPIC_NAME", "aws-iot-button-sns-topic"),
        aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
        max_subscription_pages=os.getenv("MAX_SUBSCRIPTION_PAGES", "100"),
    )

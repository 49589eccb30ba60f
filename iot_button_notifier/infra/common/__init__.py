"""Common infrastructure utilities."""
from iot_button_notifier.infra.common.config import load_app_config
from iot_button_notifier.infra.common.clock import Clock, SystemClock
from iot_button_notifier.infra.common.logger import setup_logging, get_logger
from iot_button_notifier.infra.common.errors import (
    NotifierError,
    ConfigError,
    InvalidClickEvent,
    TopicCreationFailed,
    SubscriptionLookupFailed,
    SubscriptionCreateFailed,
    PublishFailed,
)

__all__ = [
    "load_app_config",
    "Clock",
    "SystemClock",
    "setup_logging",
    "get_logger",
    "NotifierError",
    "ConfigError",
    "InvalidClickEvent",
    "TopicCreationFailed",
    "SubscriptionLookupFailed",
    "SubscriptionCreateFailed",
    "PublishFailed",
]

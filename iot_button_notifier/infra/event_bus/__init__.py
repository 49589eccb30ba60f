"""SNS adapters."""
from iot_button_notifier.infra.event_bus.sns_client import create_sns_client
from iot_button_notifier.infra.event_bus.topic_provisioner import TopicProvisioner
from iot_button_notifier.infra.event_bus.subscription_manager import SubscriptionManager
from iot_button_notifier.infra.event_bus.sns_publisher import SNSPublisher

__all__ = [
    "create_sns_client",
    "TopicProvisioner",
    "SubscriptionManager",
    "SNSPublisher",
]

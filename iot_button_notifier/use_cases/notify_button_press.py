"""Button press orchestrator."""
from typing import Any, Optional

from iot_button_notifier.domain.entities.app_config import AppConfig
from iot_button_notifier.domain.entities.click_event import ClickEvent
from iot_button_notifier.domain.entities.notification import DispatchResult, NotificationMessage
from iot_button_notifier.domain.entities.topic import Subscription, Topic
from iot_button_notifier.domain.services.message_composer import compose
from iot_button_notifier.infra.common import Clock, SystemClock, get_logger
from iot_button_notifier.infra.event_bus import (
    create_sns_client,
    SNSPublisher,
    SubscriptionManager,
    TopicProvisioner,
)

logger = get_logger(__name__)


def _initialize_infrastructure(
    app_config: AppConfig,
    sns_client: Any = None,
) -> tuple[TopicProvisioner, SubscriptionManager, SNSPublisher]:
    """Initialize SNS adapters sharing one client."""
    if sns_client is None:
        sns_client = create_sns_client(app_config.aws_region)

    provisioner = TopicProvisioner(sns_client=sns_client)
    subscriptions = SubscriptionManager(
        sns_client=sns_client,
        max_pages=app_config.max_subscription_pages,
    )
    publisher = SNSPublisher(sns_client=sns_client)

    return provisioner, subscriptions, publisher


def notify_button_press(
    event: ClickEvent,
    app_config: AppConfig,
    clock: Optional[Clock] = None,
    sns_client: Any = None,
    provisioner: Optional[TopicProvisioner] = None,
    subscriptions: Optional[SubscriptionManager] = None,
    publisher: Optional[SNSPublisher] = None,
) -> DispatchResult:
    """
    Provision the topic and subscription, then publish the press.

    Steps run in order and the first failure propagates unchanged; nothing
    already provisioned is rolled back since every step is safe to repeat.

    Args:
        event: Click event
        app_config: Application configuration
        clock: Clock for the message timestamp (system clock if None)
        sns_client: boto3 SNS client shared by the default adapters
        provisioner: Topic provisioner override
        subscriptions: Subscription manager override
        publisher: Publisher override

    Returns:
        DispatchResult with topic, subscription and message identifiers
    """
    clock = clock or SystemClock()

    if provisioner is None or subscriptions is None or publisher is None:
        default_provisioner, default_subscriptions, default_publisher = _initialize_infrastructure(
            app_config, sns_client
        )
        provisioner = provisioner or default_provisioner
        subscriptions = subscriptions or default_subscriptions
        publisher = publisher or default_publisher

    logger.info("Handling %s click from %s", event.click_type, event.serial_number)

    topic = step_ensure_topic(provisioner, app_config)

    subscription = step_ensure_subscription(subscriptions, topic, app_config)

    message = step_compose(event, clock)

    message_id = step_publish(publisher, topic, message)

    return DispatchResult(
        topic_arn=topic.arn,
        subscription_arn=subscription.subscription_arn,
        message_id=message_id,
    )


def step_ensure_topic(provisioner: TopicProvisioner, app_config: AppConfig) -> Topic:
    """Step: Get or create the topic."""
    return provisioner.ensure_topic(app_config.topic_name)


def step_ensure_subscription(
    subscriptions: SubscriptionManager,
    topic: Topic,
    app_config: AppConfig,
) -> Subscription:
    """Step: Get or create the recipient subscription."""
    subscription = subscriptions.ensure_subscription(
        topic.arn,
        app_config.recipient_email,
        app_config.subscription_protocol,
    )
    logger.info("Topic setup complete")
    return subscription


def step_compose(event: ClickEvent, clock: Clock) -> NotificationMessage:
    """Step: Compose message."""
    return compose(event, clock.now())


def step_publish(publisher: SNSPublisher, topic: Topic, message: NotificationMessage) -> str:
    """Step: Publish message."""
    logger.info("Publishing to topic %s", topic.arn)
    return publisher.publish(topic.arn, message.subject, message.body)

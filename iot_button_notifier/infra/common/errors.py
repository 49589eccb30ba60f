"""Centralized error types."""


class NotifierError(Exception):
    """Base exception for notifier errors."""
    pass


class ConfigError(NotifierError):
    """Configuration error."""
    pass


class InvalidClickEvent(NotifierError):
    """Button payload could not be read."""
    pass


class TopicCreationFailed(NotifierError):
    """SNS CreateTopic call failed."""
    pass


class SubscriptionLookupFailed(NotifierError):
    """Listing topic subscriptions failed or did not terminate."""
    pass


class SubscriptionCreateFailed(NotifierError):
    """SNS Subscribe call failed."""
    pass


class PublishFailed(NotifierError):
    """SNS Publish call failed."""
    pass

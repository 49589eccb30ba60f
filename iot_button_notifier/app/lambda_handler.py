"""AWS Lambda handler."""
from typing import Any

from iot_button_notifier.domain.services.event_parser import parse_click_event
from iot_button_notifier.infra.common import (
    load_app_config,
    setup_logging,
    get_logger,
    NotifierError,
)
from iot_button_notifier.use_cases.notify_button_press import notify_button_press

setup_logging(force=True)
logger = get_logger(__name__)


def handler(event: Any, context: Any) -> dict[str, Any]:
    """
    Lambda handler for button presses.
    
    Expected event format:
    {
        "serialNumber": "GXXXXXXXXXXXXXXXXX",
        "batteryVoltage": "xxmV",
        "clickType": "SINGLE" | "DOUBLE" | "LONG"
    }
    
    Environment variables:
    - RECIPIENT_EMAIL: Address subscribed to the topic (required)
    - SNS_TOPIC_NAME: Topic name (optional, defaults to aws-iot-button-sns-topic)
    - AWS_REGION: AWS region (optional)
    - ENV: Environment name (local, staging, production) - optional, defaults to local
    
    Returns:
        {
            "topic_arn": "...",
            "subscription_arn": "...",
            "message_id": "..."
        }
    
    Raises:
        NotifierError: First failure of the chain, so the invocation fails
    """
    try:
        click_event = parse_click_event(event)
        logger.info("Received event: %s", click_event.click_type)
        
        app_config = load_app_config()
        logger.info("Configuration loaded: topic=%s, region=%s", app_config.topic_name, app_config.aws_region)
        
        result = notify_button_press(event=click_event, app_config=app_config)
        
        logger.info("Notification sent: %s", result.message_id)
        return result.model_dump()
    
    except NotifierError as e:
        logger.exception("Button press handling failed: %s", e)
        raise
    except Exception as e:
        logger.exception("Unexpected error handling button press: %s", e)
        raise

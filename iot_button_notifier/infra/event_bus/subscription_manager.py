"""Idempotent subscription of one endpoint to a topic."""
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from iot_button_notifier.domain.entities.topic import Subscription
from iot_button_notifier.infra.common import (
    get_logger,
    SubscriptionLookupFailed,
    SubscriptionCreateFailed,
)
from iot_button_notifier.infra.event_bus.sns_client import create_sns_client

logger = get_logger(__name__)

DEFAULT_MAX_PAGES = 100


class SubscriptionManager:
    """
    Finds or creates the subscription of an endpoint on a topic.
    
    Lookup walks ListSubscriptionsByTopic pages until a (protocol, endpoint)
    match is found or the listing ends. Any existing match counts, including
    subscriptions still pending confirmation.
    """
    
    def __init__(
        self,
        sns_client: Any = None,
        region: Optional[str] = None,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        """
        Initialize subscription manager.
        
        Args:
            sns_client: boto3 SNS client (created for region when None)
            region: AWS region
            max_pages: Maximum number of listing pages read per lookup
        """
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self.sns_client = sns_client or create_sns_client(region)
        self.max_pages = max_pages
    
    def _list_page(self, topic_arn: str, next_token: Optional[str]) -> dict[str, Any]:
        params = {"TopicArn": topic_arn}
        if next_token:
            params["NextToken"] = next_token
        try:
            return self.sns_client.list_subscriptions_by_topic(**params)
        except (ClientError, BotoCoreError) as e:
            raise SubscriptionLookupFailed(f"Listing subscriptions of {topic_arn} failed: {e}") from e
    
    def find_subscription(
        self,
        topic_arn: str,
        endpoint: str,
        protocol: str,
    ) -> Optional[Subscription]:
        """
        Find the subscription of endpoint on topic.
        
        Args:
            topic_arn: SNS topic ARN
            endpoint: Recipient endpoint (e.g. email address)
            protocol: Delivery protocol (e.g. email)
            
        Returns:
            Matching subscription, or None once all pages are read
            
        Raises:
            SubscriptionLookupFailed: On SNS error, or if the listing is still
                returning cursors after max_pages pages
        """
        next_token: Optional[str] = None
        for page_number in range(1, self.max_pages + 1):
            page = self._list_page(topic_arn, next_token)
            
            for entry in page.get("Subscriptions", []):
                if entry.get("Protocol") == protocol and entry.get("Endpoint") == endpoint:
                    logger.debug("Subscription found on page %d", page_number)
                    return Subscription(
                        topic_arn=entry.get("TopicArn", topic_arn),
                        protocol=entry["Protocol"],
                        endpoint=entry["Endpoint"],
                        subscription_arn=entry["SubscriptionArn"],
                    )
            
            next_token = page.get("NextToken")
            if not next_token:
                logger.debug("No subscription for %s after %d page(s)", endpoint, page_number)
                return None
        
        raise SubscriptionLookupFailed(
            f"Listing subscriptions of {topic_arn} did not finish within {self.max_pages} pages"
        )
    
    def ensure_subscription(
        self,
        topic_arn: str,
        endpoint: str,
        protocol: str,
    ) -> Subscription:
        """
        Subscribe endpoint to topic unless already subscribed.
        
        Args:
            topic_arn: SNS topic ARN
            endpoint: Recipient endpoint
            protocol: Delivery protocol
            
        Returns:
            Existing or newly created subscription
            
        Raises:
            SubscriptionLookupFailed: If the lookup fails
            SubscriptionCreateFailed: If the Subscribe call fails
        """
        existing = self.find_subscription(topic_arn, endpoint, protocol)
        if existing is not None:
            if existing.pending_confirmation:
                # Still counted as subscribed; delivery starts once confirmed.
                logger.warning("Subscription of %s to %s is pending confirmation", endpoint, topic_arn)
            else:
                logger.info("Subscription already exists: %s", existing.subscription_arn)
            return existing
        
        try:
            response = self.sns_client.subscribe(
                TopicArn=topic_arn,
                Protocol=protocol,
                Endpoint=endpoint,
            )
        except (ClientError, BotoCoreError) as e:
            raise SubscriptionCreateFailed(
                f"Subscribing {endpoint} ({protocol}) to {topic_arn} failed: {e}"
            ) from e
        
        subscription = Subscription(
            topic_arn=topic_arn,
            protocol=protocol,
            endpoint=endpoint,
            subscription_arn=response.get("SubscriptionArn", ""),
        )
        if subscription.pending_confirmation:
            logger.info("Subscribed %s to %s, awaiting confirmation", endpoint, topic_arn)
        else:
            logger.info("Subscribed %s to %s", endpoint, topic_arn)
        return subscription

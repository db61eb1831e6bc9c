"""
NotificationStatus.

Handed to subscription and unsubscription handlers so they can confirm the
request with SNS.
"""

import logging
from abc import ABC, abstractmethod

from botocore.exceptions import ClientError

logger = logging.getLogger("notification.status")


class NotificationStatus(ABC):
    @abstractmethod
    def confirm_subscription(self) -> str:
        """Confirm the pending subscription and return the subscription ARN."""


class SnsNotificationStatus(NotificationStatus):
    """
    Confirms subscriptions through the SNS ConfirmSubscription API.

    Args:
        sns_client: boto3 SNS client
        topic_arn: TopicArn of the received envelope
        token: Token of the received envelope
    """

    def __init__(self, sns_client, topic_arn: str, token: str):
        self.sns_client = sns_client
        self.topic_arn = topic_arn
        self.token = token

    def confirm_subscription(self) -> str:
        logger.info(f"Confirming subscription to {self.topic_arn}")
        try:
            response = self.sns_client.confirm_subscription(
                TopicArn=self.topic_arn, Token=self.token
            )
        except ClientError as e:
            logger.error(f"Failed to confirm subscription to {self.topic_arn}: {e}")
            raise

        subscription_arn = response.get("SubscriptionArn", "")
        logger.info(f"Confirmed subscription {subscription_arn}")
        return subscription_arn

    def __repr__(self) -> str:
        return f"SnsNotificationStatus(topic_arn={self.topic_arn!r})"

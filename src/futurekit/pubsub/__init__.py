"""Channel subscription management for broadcast servers."""

from .manager import ChannelCallbacks, SubscriptionCallbacks, SubscriptionManager

__all__ = ["ChannelCallbacks", "SubscriptionCallbacks", "SubscriptionManager"]

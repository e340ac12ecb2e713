"""Channel subscription bookkeeping.

Tracks which clients are subscribed to which named channels and notifies an
injected callback set when a channel comes into existence, gains a client,
or loses its last client.

All mutations are synchronous, so a single event loop never observes a
half-applied add/delete and no locking is needed.

Example:
    >>> manager = SubscriptionManager(ChannelCallbacks(
    ...     new_channel=lambda channel, subscribers: feed.open(channel),
    ...     remove_channel=feed.close,
    ... ))
    >>> manager.add("block", websocket)
    >>> manager.delete_client(websocket)   # closes "block" if websocket was its last subscriber
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Set
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from futurekit.runtime.observability import get_logger

log = get_logger("futurekit.pubsub")


@runtime_checkable
class SubscriptionCallbacks(Protocol):
    """Lifecycle hooks invoked by SubscriptionManager.

    new_client is optional on implementations; a missing one is a no-op.
    """

    def new_channel(self, channel: str, subscribers: Set[Hashable]) -> None:
        """Called once when ``channel`` goes from absent to present.

        ``subscribers`` is the live (still empty) subscriber set. Raising
        aborts the subscription and the channel is not created.
        """
        ...

    def remove_channel(self, channel: str) -> None:
        """Called once when the last subscriber leaves ``channel``."""
        ...


def _no_new_client(channel: str, client: Hashable) -> None:
    pass


@dataclass(frozen=True, slots=True)
class ChannelCallbacks:
    """Callback set built from plain functions."""

    new_channel: Callable[[str, Set[Hashable]], None]
    remove_channel: Callable[[str], None]
    new_client: Callable[[str, Hashable], None] = _no_new_client


class SubscriptionManager:
    """Owns the channel -> subscribers map.

    Clients may be any hashable object (sockets, connection ids).
    """

    __slots__ = ("_subscriptions", "_callbacks", "_new_client")

    def __init__(self, callbacks: SubscriptionCallbacks) -> None:
        self._subscriptions: dict[str, set[Hashable]] = {}
        self._callbacks = callbacks
        self._new_client: Callable[[str, Hashable], None] = getattr(callbacks, "new_client", _no_new_client)

    def add(self, channel: str, client: Hashable) -> None:
        """Subscribe ``client`` to ``channel``. Re-adding an existing subscriber is a no-op."""
        subscribers = self._subscriptions.get(channel)
        if subscribers is None:
            subscribers = self._subscriptions[channel] = set()
            try:
                self._callbacks.new_channel(channel, subscribers)
            except Exception:
                del self._subscriptions[channel]
                raise
            log.debug("channel created", channel=channel)

        if client in subscribers:
            return

        subscribers.add(client)
        self._new_client(channel, client)

    def delete(self, channel: str, client: Hashable) -> None:
        """Unsubscribe ``client`` from ``channel``; unknown channels and clients are ignored."""
        subscribers = self._subscriptions.get(channel)
        if subscribers is None:
            return

        subscribers.discard(client)
        if not subscribers:
            del self._subscriptions[channel]
            log.debug("channel removed", channel=channel, reason="all subscriptions removed")
            self._callbacks.remove_channel(channel)

    def client_subscriptions(self, client: Hashable) -> set[str]:
        """Channels ``client`` is currently subscribed to."""
        return {channel for channel, subscribers in self._subscriptions.items() if client in subscribers}

    def delete_client(self, client: Hashable) -> None:
        """Unsubscribe ``client`` from every channel."""
        for channel in list(self._subscriptions):
            if client in self._subscriptions.get(channel, ()):
                self.delete(channel, client)

    @property
    def channels(self) -> frozenset[str]:
        return frozenset(self._subscriptions)

    def subscribers(self, channel: str) -> frozenset[Hashable]:
        return frozenset(self._subscriptions.get(channel, ()))

    def __contains__(self, channel: object) -> bool:
        return channel in self._subscriptions

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __repr__(self) -> str:
        return f"SubscriptionManager(channels={sorted(self._subscriptions)})"

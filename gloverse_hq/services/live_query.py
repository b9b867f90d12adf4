"""
Live queries: standing collection queries that push snapshots on change

gloverse_hq/services/live_query.py

"""
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union
import asyncio
import inspect
import itertools
from gloverse_hq.core.config import settings
from gloverse_hq.core.database import get_database
import logging

logger = logging.getLogger(__name__)

Snapshot = List[Dict[str, Any]]
SnapshotCallback = Callable[[Snapshot], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[Exception], Union[None, Awaitable[None]]]


async def _invoke(callback: Optional[Callable], value) -> None:
    if callback is None:
        return
    result = callback(value)
    if inspect.isawaitable(result):
        await result


class LiveSubscription:
    """
    One registered query. Polls the collection and calls ``on_snapshot``
    with the full result set once initially and again whenever it changes.
    """
    def __init__(
        self,
        subscription_id: int,
        collection: str,
        query: Optional[Dict[str, Any]],
        on_snapshot: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
        interval: Optional[float] = None,
        registry: Optional["LiveQueryRegistry"] = None,
    ):
        self.id = subscription_id
        self.collection = collection
        self.query = query or {}
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self.interval = settings.LIVE_QUERY_INTERVAL if interval is None else interval
        self._registry = registry
        self._last: Optional[Snapshot] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> "LiveSubscription":
        self._task = asyncio.create_task(self._run())
        logger.info(f"Live query {self.id} started on '{self.collection}' {self.query}")
        return self

    def unsubscribe(self) -> None:
        """Stop polling; safe to call more than once"""
        if self._task and not self._task.done():
            self._task.cancel()
        if self._registry is not None:
            self._registry._forget(self)
            self._registry = None

    async def wait_closed(self) -> None:
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def fetch(self) -> Snapshot:
        db = get_database()
        cursor = db[self.collection].find(self.query)
        documents = []
        async for document in cursor:
            document["_id"] = str(document["_id"])
            documents.append(document)
        return documents

    async def poll_once(self) -> bool:
        """Fetch and deliver if changed; returns whether a snapshot was pushed"""
        snapshot = await self.fetch()
        if snapshot == self._last:
            return False
        self._last = snapshot
        await _invoke(self.on_snapshot, snapshot)
        return True

    async def _run(self):
        while True:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                logger.info(f"Live query {self.id} on '{self.collection}' cancelled")
                raise
            except Exception as e:
                logger.error(f"Error with live query {self.id} on '{self.collection}': {e}")
                try:
                    await _invoke(self.on_error, e)
                except Exception as callback_error:
                    logger.error(f"Error callback for live query {self.id} failed: {callback_error}")
            await asyncio.sleep(self.interval)


class LiveQueryRegistry:
    """Tracks every open live query so shutdown can tear them all down"""
    def __init__(self, interval: Optional[float] = None):
        self.interval = interval
        self._subscriptions: Dict[int, LiveSubscription] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        collection: str,
        on_snapshot: SnapshotCallback,
        query: Optional[Dict[str, Any]] = None,
        on_error: Optional[ErrorCallback] = None,
        interval: Optional[float] = None,
    ) -> LiveSubscription:
        subscription = LiveSubscription(
            next(self._ids),
            collection,
            query,
            on_snapshot,
            on_error=on_error,
            interval=interval if interval is not None else self.interval,
            registry=self,
        )
        self._subscriptions[subscription.id] = subscription
        return subscription.start()

    def _forget(self, subscription: LiveSubscription) -> None:
        self._subscriptions.pop(subscription.id, None)

    async def close_all(self) -> None:
        subscriptions = list(self._subscriptions.values())
        for subscription in subscriptions:
            subscription.unsubscribe()
        for subscription in subscriptions:
            await subscription.wait_closed()
        logger.info(f"Closed {len(subscriptions)} live queries")

    async def stream(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        interval: Optional[float] = None,
    ):
        """Async iterator over snapshots; unsubscribes when the consumer stops"""
        queue: asyncio.Queue = asyncio.Queue()
        subscription = self.subscribe(
            collection,
            queue.put_nowait,
            query=query,
            interval=interval,
        )
        try:
            while True:
                yield await queue.get()
        finally:
            subscription.unsubscribe()


# Global registry instance
live_queries = LiveQueryRegistry()

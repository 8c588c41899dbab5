"""RoutineBusClient — Envelopes over NATS JetStream for sequencer services."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

import nats
from nats.aio.client import Client as NATSClient
from nats.aio.msg import Msg
from nats.errors import Error as NATSError
from nats.js.api import DeliverPolicy
from nats.js.client import JetStreamContext
from nats.js.errors import NotFoundError

from routine.models.envelope import Envelope
from routine.models.topics import to_nats_subject

logger = logging.getLogger(__name__)

STREAM_NAME = "ROUTINE"
STREAM_SUBJECTS = ["system.>", "routine.>"]
RECONNECT_ATTEMPTS = 10
RECONNECT_WAIT = 2

Handler = Callable[[Envelope], Coroutine[Any, Any, None]]
MsgCallback = Callable[[Msg], Coroutine[Any, Any, None]]


class RoutineBusClient:
    """Publish and subscribe to Envelopes on the ROUTINE stream.

    Usage:
        bus = RoutineBusClient("nats://localhost:4222")
        await bus.connect()
        await bus.subscribe(Topics.TICK, on_tick)
        await bus.publish(Topics.STATUS, status_envelope)
        await bus.close()
    """

    def __init__(self, url: str = "nats://localhost:4222") -> None:
        self._url = url
        self._nc: NATSClient | None = None
        self._js: JetStreamContext | None = None
        self._subscriptions: list[Any] = []
        self._consumers: list[asyncio.Task[None]] = []

    @property
    def is_connected(self) -> bool:
        return self._nc is not None and self._nc.is_connected

    def _connection(self) -> tuple[NATSClient, JetStreamContext]:
        if self._nc is None or self._js is None:
            raise RuntimeError("RoutineBusClient is not connected; call connect() first")
        return self._nc, self._js

    async def connect(self) -> None:
        """Open the connection and create the ROUTINE stream if it is missing."""
        self._nc = await nats.connect(
            self._url,
            reconnected_cb=self._on_reconnect,
            disconnected_cb=self._on_disconnect,
            error_cb=self._on_error,
            max_reconnect_attempts=RECONNECT_ATTEMPTS,
            reconnect_time_wait=RECONNECT_WAIT,
        )
        self._js = self._nc.jetstream()

        try:
            name = await self._js.find_stream_name_by_subject(STREAM_SUBJECTS[0])
            logger.info("Using existing stream %s", name)
        except NotFoundError:
            await self._js.add_stream(name=STREAM_NAME, subjects=STREAM_SUBJECTS)
            logger.info("Created stream %s for %s", STREAM_NAME, STREAM_SUBJECTS)

    async def publish(self, topic: str, envelope: Envelope) -> None:
        """Send ``envelope`` on a topic path such as `/routine/status`."""
        _, js = self._connection()
        subject = to_nats_subject(topic)
        await js.publish(subject, envelope.to_wire())
        logger.debug("-> %s %s (tick %d)", subject, envelope.type, envelope.tick)

    async def subscribe(self, topic: str, handler: Handler) -> None:
        """Deliver every new Envelope on ``topic`` to ``handler``.

        Uses a JetStream push subscription, falling back to core NATS when
        JetStream refuses it. A handler that raises is logged; the message
        is still acknowledged.
        """
        nc, js = self._connection()
        subject = to_nats_subject(topic)

        async def _on_msg(msg: Msg) -> None:
            try:
                await handler(Envelope.from_wire(msg.data))
            except Exception:
                logger.exception("Handler for %s failed", subject)
            finally:
                if msg.reply:
                    await self._ack(msg)

        try:
            sub = await js.subscribe(subject, manual_ack=True, deliver_policy=DeliverPolicy.NEW)
        except NATSError as e:
            logger.debug("JetStream refused %s (%s); using core NATS", subject, e)
            sub = await nc.subscribe(subject, cb=_on_msg)
        else:
            self._consumers.append(asyncio.create_task(self._consume(sub, _on_msg)))
        self._subscriptions.append(sub)
        logger.info("Subscribed to %s", subject)

    async def _consume(self, sub: Any, on_msg: MsgCallback) -> None:
        async for msg in sub.messages:
            await on_msg(msg)

    async def _ack(self, msg: Msg) -> None:
        try:
            await msg.ack()
        except NATSError as e:
            logger.debug("Ack failed: %s", e)

    async def close(self) -> None:
        """Cancel consumers, drop subscriptions and drain the connection."""
        for task in self._consumers:
            task.cancel()
        self._consumers.clear()

        while self._subscriptions:
            sub = self._subscriptions.pop()
            try:
                await sub.unsubscribe()
            except NATSError as e:
                logger.debug("Unsubscribe failed: %s", e)

        if self._nc is None:
            return
        nc, self._nc, self._js = self._nc, None, None
        await nc.drain()
        logger.info("Closed connection to %s", self._url)

    async def _on_reconnect(self, _: Any = None) -> None:
        logger.info("Reconnected to %s", self._url)

    async def _on_disconnect(self, _: Any = None) -> None:
        logger.warning("Lost connection to %s", self._url)

    async def _on_error(self, e: Exception) -> None:
        logger.error("Bus error: %s", e)

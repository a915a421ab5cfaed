# src/todoist_deck/connectors/streamdeck.py

from __future__ import annotations

"""
Stream Deck host connector (WebSocket).

The host launches the plugin with -port/-pluginUUID/-registerEvent/-info,
the plugin connects back to ws://127.0.0.1:<port> and registers itself.
After that the host pushes lifecycle events as JSON and the plugin sends
commands (getSettings, getGlobalSettings, setImage) on the same socket.

This module implements HostPort for the core:
- get_settings() sends getSettings and waits for the matching didReceiveSettings
- get_global_settings() sends getGlobalSettings and waits for didReceiveGlobalSettings
- set_image() sends setImage

Everything else is translated into core.events messages and handed to the action.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

import websockets

from ..core.events import Appear, Disappear, HostMessage, KeyPressed, SettingsChanged
from ..core.ports import SettingsPayload

logger = logging.getLogger(__name__)

MessageHandler = Callable[[HostMessage], None]

# setImage target: 0 = hardware and software, 1 = hardware only, 2 = software only.
TARGET_BOTH = 0

# The host answers getSettings/getGlobalSettings from memory; a missing reply means it never will.
DEFAULT_REPLY_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class LaunchInfo:
    """Arguments the host passes when it starts the plugin process."""

    port: int
    plugin_uuid: str
    register_event: str
    info: dict[str, Any]

    @property
    def url(self) -> str:
        return f"ws://127.0.0.1:{self.port}"


def _settings_of(payload: dict[str, Any]) -> dict[str, Any]:
    settings = (payload.get("payload") or {}).get("settings")
    return dict(settings) if isinstance(settings, dict) else {}


def parse_host_event(payload: dict[str, Any], action_uuid: str) -> HostMessage | None:
    """
    Translate one host event into a core message.

    Events for other actions, plugin-level events and unknown events -> None.
    """
    event = payload.get("event")
    if payload.get("action") != action_uuid:
        return None

    context = str(payload.get("context") or "")
    if not context:
        return None

    if event == "willAppear":
        return Appear(instance_id=context, settings=_settings_of(payload))
    if event == "willDisappear":
        return Disappear(instance_id=context)
    if event == "didReceiveSettings":
        return SettingsChanged(instance_id=context, settings=_settings_of(payload))
    if event == "keyDown":
        return KeyPressed(instance_id=context)
    return None


class StreamDeckConnector:
    def __init__(
        self,
        launch: LaunchInfo,
        *,
        action_uuid: str,
        ws_connect: Callable[[str], Any] = websockets.connect,
        reply_timeout_seconds: float = DEFAULT_REPLY_TIMEOUT_SECONDS,
    ) -> None:
        self.launch = launch
        self.action_uuid = action_uuid
        self.reply_timeout_seconds = float(reply_timeout_seconds)
        self._ws_connect = ws_connect
        self._ws: Any | None = None
        self._settings_waiters: dict[str, list[asyncio.Future[SettingsPayload]]] = {}
        self._global_waiters: list[asyncio.Future[SettingsPayload]] = []

    # ---- HostPort ----

    async def get_settings(self, instance_id: str) -> SettingsPayload:
        waiters = self._settings_waiters.setdefault(instance_id, [])
        try:
            return await self._request(waiters, {"event": "getSettings", "context": instance_id})
        finally:
            if not self._settings_waiters.get(instance_id):
                self._settings_waiters.pop(instance_id, None)

    async def get_global_settings(self) -> SettingsPayload:
        return await self._request(
            self._global_waiters, {"event": "getGlobalSettings", "context": self.launch.plugin_uuid}
        )

    async def set_image(self, instance_id: str, image: str) -> None:
        await self._send(
            {
                "event": "setImage",
                "context": instance_id,
                "payload": {"image": image, "target": TARGET_BOTH},
            }
        )

    # ---- connection ----

    async def run(self, on_message: MessageHandler) -> None:
        """
        Register with the host and pump events until the host closes the socket.

        The host owns the plugin's lifetime: a closed socket means we are done,
        so there is no reconnect loop here.
        """
        logger.info("Connecting to host at %s", self.launch.url)
        async with self._ws_connect(self.launch.url) as ws:
            self._ws = ws
            try:
                await self._send({"event": self.launch.register_event, "uuid": self.launch.plugin_uuid})
                logger.info("Registered plugin %s", self.launch.plugin_uuid)
                async for raw in ws:
                    self._dispatch(raw, on_message)
            finally:
                self._ws = None
                self._cancel_waiters()
        logger.info("Host connection closed")

    def _dispatch(self, raw: str | bytes, on_message: MessageHandler) -> None:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Failed to decode host message: %r", raw)
            return
        if not isinstance(payload, dict):
            logger.warning("Ignoring non-object host message: %r", raw)
            return

        event = payload.get("event")
        if event == "didReceiveGlobalSettings":
            self._resolve(self._global_waiters, _settings_of(payload))
            return

        if event == "willDisappear":
            # Nothing will answer for a key that is gone.
            for fut in self._settings_waiters.pop(str(payload.get("context") or ""), []):
                fut.cancel()

        if event == "didReceiveSettings":
            waiters = self._settings_waiters.pop(str(payload.get("context") or ""), None)
            if waiters:
                # Answer to our own getSettings: the waiting refresh renders it.
                self._resolve(waiters, _settings_of(payload))
                return

        message = parse_host_event(payload, self.action_uuid)
        if message is None:
            logger.debug("Ignoring host event %s", event)
            return
        try:
            on_message(message)
        except Exception:
            logger.exception("Handler failed for %s", message)

    async def _request(
        self, waiters: list[asyncio.Future[SettingsPayload]], payload: dict[str, Any]
    ) -> SettingsPayload:
        """
        Send a request and wait for the reply event that resolves `fut`.

        Raises TimeoutError when the host stays silent past reply_timeout_seconds;
        the waiter is removed either way.
        """
        fut: asyncio.Future[SettingsPayload] = asyncio.get_running_loop().create_future()
        waiters.append(fut)
        try:
            await self._send(payload)
            return await asyncio.wait_for(fut, self.reply_timeout_seconds)
        finally:
            self._drop_waiter(waiters, fut)

    async def _send(self, payload: dict[str, Any]) -> None:
        if self._ws is None:
            raise ConnectionError("not connected to the host")
        await self._ws.send(json.dumps(payload))

    @staticmethod
    def _resolve(waiters: list[asyncio.Future[SettingsPayload]], settings: SettingsPayload) -> None:
        pending = list(waiters)
        waiters.clear()
        for fut in pending:
            if not fut.done():
                fut.set_result(dict(settings))

    @staticmethod
    def _drop_waiter(
        waiters: list[asyncio.Future[SettingsPayload]], fut: asyncio.Future[SettingsPayload]
    ) -> None:
        if fut in waiters:
            waiters.remove(fut)

    def _cancel_waiters(self) -> None:
        for waiters in list(self._settings_waiters.values()) + [self._global_waiters]:
            for fut in waiters:
                fut.cancel()
        self._settings_waiters.clear()
        self._global_waiters = []

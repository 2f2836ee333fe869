"""
Terminal Session
================

The caller side of the command system: one TerminalSession per
connected user (CLI, web socket, test harness).

    line ──► parse_input ──► CommandInput ──► dispatcher.execute ──► reply
                        └──► MessageInput ──► message responder ──► reply

The dispatcher lets handler exceptions through. This is where they
stop: the failure is logged and the user sees COMMAND_FAILED_MESSAGE.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from portfolio_terminal.dispatcher import CommandDispatcher
from portfolio_terminal.parser import CommandInput, MessageInput, parse_input

COMMAND_FAILED_MESSAGE = "Something went wrong running that command. Please try again."
RESPONDER_FAILED_MESSAGE = "Something went wrong answering that. Please try again."
NO_RESPONDER_MESSAGE = "Chat is not available here. Type /help for available commands."

MessageResponder = Callable[[str], Union[str, Awaitable[str]]]


@dataclass(frozen=True)
class TerminalReply:
    """What the UI should display for one input line.

    kind is one of "command", "message", "error" or "empty".
    """
    kind: str
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


class TerminalSession:
    """Parses lines and routes them to the dispatcher or the responder."""

    def __init__(self, dispatcher: CommandDispatcher,
                 message_responder: Optional[MessageResponder] = None):
        self.dispatcher = dispatcher
        self.message_responder = message_responder
        self.logger = logging.getLogger(__name__)

    async def handle_line(self, line: str) -> TerminalReply:
        parsed = parse_input(line)

        if isinstance(parsed, CommandInput):
            try:
                text = await self.dispatcher.execute(parsed.command, parsed.args)
            except Exception as e:
                self.logger.error(f"Command '/{parsed.command}' failed: {e}", exc_info=True)
                return TerminalReply("error", COMMAND_FAILED_MESSAGE)
            return TerminalReply("command", text)

        if isinstance(parsed, MessageInput):
            return await self._respond(parsed.raw)

        raise TypeError(f"Unhandled input type: {type(parsed).__name__}")

    async def _respond(self, text: str) -> TerminalReply:
        if not text:
            return TerminalReply("empty", "")
        if self.message_responder is None:
            return TerminalReply("message", NO_RESPONDER_MESSAGE)

        try:
            reply = self.message_responder(text)
            if inspect.isawaitable(reply):
                reply = await reply
        except Exception as e:
            self.logger.error(f"Message responder failed: {e}", exc_info=True)
            return TerminalReply("error", RESPONDER_FAILED_MESSAGE)
        return TerminalReply("message", reply)

"""
Command Dispatcher
==================

The central routing table for portfolio terminal slash-commands.

Role in the System
------------------
The dispatcher does not parse lines. It receives a command name and
an argument list (normally produced by parser.parse_input) and routes
them to the matching registered handler.

    parse_input("/skills react") → CommandInput("skills", ("react",))
                  ↓
    dispatcher.execute("skills", ["react"])
                  ↓
    Validate name → look up "skills" → found!
                  ↓
    await handler(["react"]) → "react, react-native"
                  ↓
    Returns the string to the caller (session / REPL / web handler)

Design Decisions
----------------
- Command names are validated again here, even though the parser
  already lowercased them. Programmatic callers can reach execute()
  without going through the parser.
- Invalid and unknown commands come back as display strings, never
  as exceptions.
- Handler errors are NOT caught. The dispatcher only routes; the
  caller decides how a failed command looks to the user
  (see session.TerminalSession).
- Registering an existing name replaces the old definition. Last
  registration wins.
- There is no timeout. If a handler never completes, execute() never
  returns; wrap it in asyncio.wait_for() if you need a deadline.

Classes
-------
CommandDefinition
    Name, description, usage string and handler for one command.

CommandDispatcher
    The registry and router.

Extending
---------
    async def fetch_repos(args):
        ...
        return "3 public repositories"

    dispatcher.register(CommandDefinition(
        name="repos",
        description="List public repositories",
        usage="/repos",
        handler=fetch_repos,
    ))
"""

from __future__ import annotations

import inspect
import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence, Union

MAX_COMMAND_LENGTH = 32
_COMMAND_NAME_PATTERN = re.compile(r'[a-z0-9-]+')

INVALID_COMMAND_MESSAGE = "Invalid command. Type /help for available commands."

CommandHandler = Callable[[list[str]], Union[str, Awaitable[str]]]


def unknown_command_message(command: str) -> str:
    """Reply for a well-formed command name with no registered handler."""
    return f"Unknown command: /{command}. Type /help for available commands."


def is_valid_command_name(command: str) -> bool:
    """Check a command name: 1-32 chars of lowercase letters, digits, '-'."""
    return (
        0 < len(command) <= MAX_COMMAND_LENGTH
        and _COMMAND_NAME_PATTERN.fullmatch(command) is not None
    )


@dataclass
class CommandDefinition:
    """A command the dispatcher can route to.

    Attributes
    ----------
    name : str
        What the user types after '/'. Not validated at registration;
        a name that fails is_valid_command_name() can never be reached.
    description : str
        One-line description for /help listings.
    usage : str
        Usage string, e.g. "/skills [filter...]".
    handler : callable
        Called with the argument list. Returns the display string, or
        an awaitable resolving to it.
    """
    name: str
    description: str
    usage: str
    handler: CommandHandler


class CommandDispatcher:
    """Routes (command, args) pairs to registered handlers.

    Thread Safety
    -------------
    Registration should happen at startup. After that the registry is
    only read, so independent sessions can share one dispatcher.

    Usage
    -----
        dispatcher = CommandDispatcher()
        dispatcher.register(CommandDefinition("about", "Who am I", "/about",
                                              lambda args: "Hi!"))

        reply = await dispatcher.execute("about", [])
    """

    def __init__(self):
        self._commands: dict[str, CommandDefinition] = {}
        self.logger = logging.getLogger(__name__)

    def register(self, definition: CommandDefinition) -> None:
        """Register a command, replacing any existing one with the same name."""
        if definition.name in self._commands:
            self.logger.info(f"Replacing registered command '{definition.name}'")
        else:
            self.logger.debug(f"Registered command '{definition.name}'")
        self._commands[definition.name] = definition

    async def execute(self, command: str, args: Sequence[str]) -> str:
        """Run the handler registered for `command`.

        Parameters
        ----------
        command : str
            Command name without the slash.
        args : sequence of str
            Arguments passed to the handler as a list.

        Returns
        -------
        str
            The handler's result, or the invalid/unknown command reply.

        Raises
        ------
        Exception
            Whatever the handler raises is propagated unchanged.
        """
        if not is_valid_command_name(command):
            self.logger.debug(f"Rejected command name {command!r}")
            return INVALID_COMMAND_MESSAGE

        definition = self._commands.get(command)
        if definition is None:
            self.logger.debug(f"Unknown command '{command}'")
            return unknown_command_message(command)

        result = definition.handler(list(args))
        if inspect.isawaitable(result):
            result = await result
        return result

    def get_commands(self) -> list[CommandDefinition]:
        """Return a snapshot of all registered definitions."""
        return list(self._commands.values())

    def has_command(self, name: str) -> bool:
        """Exact, case-sensitive registry lookup."""
        return name in self._commands

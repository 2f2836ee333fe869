"""
Portfolio Terminal Command System
=================================

A slash-command front end for the terminal mode of a portfolio site.
User lines that start with '/' are commands; everything else is a
free-text message for whatever chat responder the host wires in.

Architecture Overview
---------------------

    ┌─────────────────┐     ┌──────────────┐     ┌──────────────────┐
    │  User Input      │────►│  Parser      │────►│  Command         │
    │  (CLI or Web)    │     │  parse_input │     │  Dispatcher      │
    └─────────────────┘     └──────┬───────┘     └────────┬─────────┘
                                   │ message               │ str
                              ┌────▼──────┐         ┌──────▼───────┐
                              │ Responder │         │ Display      │
                              │ (AI, etc.)│         │ locally      │
                              └───────────┘         └──────────────┘

Typical use goes through a TerminalSession, which also turns handler
failures into a generic error line:

    from config_manager import ProfileConfig
    from portfolio_terminal import TerminalSession
    from portfolio_terminal.builtin_commands import build_dispatcher

    session = TerminalSession(build_dispatcher(ProfileConfig()))
    reply = await session.handle_line("/skills react")

Extending the Command System
----------------------------
Register a CommandDefinition. The handler receives the argument list
and returns a string, or an awaitable resolving to one:

    from portfolio_terminal import CommandDefinition

    dispatcher.register(CommandDefinition(
        name="contact",
        description="How to reach me",
        usage="/contact",
        handler=lambda args: "mail@example.com",
    ))

Module Structure
----------------
    portfolio_terminal/
    ├── __init__.py         ← This file. Public API.
    ├── parser.py           ← parse_input(), CommandInput, MessageInput.
    ├── dispatcher.py       ← CommandDispatcher, CommandDefinition.
    ├── builtin_commands.py ← /help, /about, /skills, /projects.
    ├── session.py          ← TerminalSession, TerminalReply.
    └── demo.py             ← Interactive REPL.
"""

from portfolio_terminal.dispatcher import (
    CommandDefinition,
    CommandDispatcher,
    INVALID_COMMAND_MESSAGE,
    is_valid_command_name,
    unknown_command_message,
)
from portfolio_terminal.parser import (
    CommandInput,
    MessageInput,
    ParsedInput,
    parse_input,
    sanitize_input,
)
from portfolio_terminal.session import TerminalReply, TerminalSession

__all__ = [
    'CommandDefinition',
    'CommandDispatcher',
    'CommandInput',
    'INVALID_COMMAND_MESSAGE',
    'MessageInput',
    'ParsedInput',
    'TerminalReply',
    'TerminalSession',
    'is_valid_command_name',
    'parse_input',
    'sanitize_input',
    'unknown_command_message',
]

"""
Input Parser
============

Classifies one line of terminal input as either a slash-command or a
free-text message.

    User types: "/skills   react   typescript"
                  ↓
    Sanitize: strip control chars, cap length, trim
                  ↓
    Starts with "/" → CommandInput(command="skills",
                                   args=("react", "typescript"))

    User types: "tell me about your projects"
                  ↓
    No "/" prefix → MessageInput(raw="tell me about your projects")

Design Decisions
----------------
- Sanitization always runs first, so `raw` never carries the
  unsanitized text. Sanitizing an already-sanitized line is a no-op.
- The command name is lowercased here, but the dispatcher still
  validates it on its own. The parser never rejects anything.
- A bare "/" is still a command, with an empty name. The dispatcher
  turns that into the invalid-command reply.
- Trimming and argument splitting use the _WS set below, not
  str.split(). The BOM counts as whitespace; U+0085 does not.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Union

MAX_INPUT_LENGTH = 1000

# C0 controls plus DEL
_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')

# Unicode space separators, line breaks and BOM; U+0085 (NEL) is not whitespace here
_WS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_WHITESPACE = re.compile(f"[{_WS}]+")
_EDGE_WHITESPACE = re.compile(f"^[{_WS}]+|[{_WS}]+$")


@dataclass(frozen=True)
class CommandInput:
    """A line that started with '/'.

    Attributes
    ----------
    command : str
        First token after the slash, lowercased. Empty for "/" alone.
    args : tuple[str, ...]
        Remaining tokens in their original order and case.
    raw : str
        The sanitized input line.
    """
    command: str
    args: tuple[str, ...]
    raw: str
    type: Literal["command"] = field(default="command", init=False)


@dataclass(frozen=True)
class MessageInput:
    """Any other line; handled outside the command system."""
    raw: str
    type: Literal["message"] = field(default="message", init=False)


ParsedInput = Union[CommandInput, MessageInput]


def sanitize_input(text: str) -> str:
    """Remove control characters, truncate to MAX_INPUT_LENGTH, trim."""
    cleaned = _CONTROL_CHARS.sub('', text)
    return _EDGE_WHITESPACE.sub('', cleaned[:MAX_INPUT_LENGTH])


def parse_input(text: str) -> ParsedInput:
    """Parse user input into a command or a message.

    Never raises. Empty, whitespace-only and oversized input are all
    normalized by sanitize_input() first.

    Examples
    --------
        parse_input("/help")
            → CommandInput(command="help", args=(), raw="/help")
        parse_input("/skills react")
            → CommandInput(command="skills", args=("react",), raw="/skills react")
        parse_input("hello there")
            → MessageInput(raw="hello there")
    """
    sanitized = sanitize_input(text)

    if not sanitized.startswith('/'):
        return MessageInput(raw=sanitized)

    parts = [p for p in _WHITESPACE.split(sanitized[1:]) if p]
    command = parts[0].lower() if parts else ""
    return CommandInput(command=command, args=tuple(parts[1:]), raw=sanitized)

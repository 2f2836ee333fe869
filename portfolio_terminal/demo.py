#!/usr/bin/env python3
"""
Portfolio Terminal — Interactive Demo

This simulates the terminal page's input loop. Type chat text or
use slash-commands. Try:

    /help
    /skills react
    /projects portfolio
    /HELP!!
    tell me about your projects
    /quit

Run with:  python -m portfolio_terminal.demo [-c config.yaml]
"""

import asyncio
import sys

from config_manager import setup_configuration, setup_logging
from portfolio_terminal.builtin_commands import build_dispatcher
from portfolio_terminal.session import TerminalReply, TerminalSession


def run(session: TerminalSession, prompt: str) -> None:
    # input() stays on the main thread, outside the loop, so Ctrl-C lands here
    loop = asyncio.new_event_loop()
    try:
        while True:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print("\nbye!")
                break

            if line.strip().lower() == "/quit":
                print("bye!")
                break

            try:
                reply = loop.run_until_complete(session.handle_line(line))
            except KeyboardInterrupt:
                print("\nbye!")
                break

            show(reply)
    finally:
        loop.close()


def show(reply: TerminalReply) -> None:
    if reply.kind == "empty":
        return
    if reply.is_error:
        print(f"  [error] {reply.text}")
    elif reply.kind == "message":
        print(f"  [chat] {reply.text}")
    else:
        print(reply.text)


def main(argv=None) -> int:
    config, should_exit, exit_code = setup_configuration(argv)
    if should_exit:
        return exit_code

    setup_logging(config)
    session = TerminalSession(build_dispatcher(config.profile))

    print("=" * 60)
    print(f"  {config.profile.name} — {config.profile.title}")
    print(f"  {config.terminal.banner}")
    print("  /quit to exit")
    print("=" * 60)
    print()

    run(session, config.terminal.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())

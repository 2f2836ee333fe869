"""
Built-in Commands
=================

The commands every portfolio terminal ships with:

    /help [command]       List commands, or show one command's usage
    /about                Name, title and summary
    /skills [filter...]   Skills, optionally filtered by substring
    /projects [slug]      Project list, or one project's details

Each command is a plain CommandDefinition whose handler closes over
the profile (or, for /help, over the dispatcher itself) so that the
dispatcher stays ignorant of portfolio content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_terminal.dispatcher import (
    CommandDefinition,
    CommandDispatcher,
    unknown_command_message,
)

if TYPE_CHECKING:
    from config_manager import ProfileConfig


def make_help_command(dispatcher: CommandDispatcher) -> CommandDefinition:
    """/help reads the registry at call time, so later registrations show up."""

    def handle(args: list[str]) -> str:
        if args:
            name = args[0].lower().lstrip('/')
            if not dispatcher.has_command(name):
                return unknown_command_message(name)
            definition = next(d for d in dispatcher.get_commands() if d.name == name)
            return f"{definition.usage}\n  {definition.description}"

        definitions = sorted(dispatcher.get_commands(), key=lambda d: d.name)
        width = max(len(d.usage) for d in definitions)
        lines = ["Available commands:"]
        for d in definitions:
            lines.append(f"  {d.usage.ljust(width)}  {d.description}")
        return "\n".join(lines)

    return CommandDefinition(
        name="help",
        description="List available commands",
        usage="/help [command]",
        handler=handle,
    )


def make_about_command(profile: ProfileConfig) -> CommandDefinition:
    def handle(args: list[str]) -> str:
        return f"{profile.name} — {profile.title}\n\n{profile.summary}"

    return CommandDefinition(
        name="about",
        description="Who I am",
        usage="/about",
        handler=handle,
    )


def make_skills_command(profile: ProfileConfig) -> CommandDefinition:
    """/skills with arguments keeps skills containing any of the terms."""

    def handle(args: list[str]) -> str:
        skills = profile.skills
        if args:
            terms = [a.lower() for a in args]
            skills = [s for s in skills if any(t in s.lower() for t in terms)]
            if not skills:
                return f"No skills match: {' '.join(args)}"
        if not skills:
            return "No skills listed."
        return "Skills: " + ", ".join(skills)

    return CommandDefinition(
        name="skills",
        description="List my skills, optionally filtered",
        usage="/skills [filter...]",
        handler=handle,
    )


def make_projects_command(profile: ProfileConfig) -> CommandDefinition:
    def handle(args: list[str]) -> str:
        if args:
            slug = args[0].lower()
            for project in profile.projects:
                if project.slug.lower() == slug:
                    lines = [project.name]
                    if project.description:
                        lines.append(f"  {project.description}")
                    if project.url:
                        lines.append(f"  {project.url}")
                    return "\n".join(lines)
            return f"No project named '{args[0]}'. Type /projects to list them."

        if not profile.projects:
            return "No projects listed."
        lines = ["Projects:"]
        for project in profile.projects:
            lines.append(f"  {project.slug} — {project.description or project.name}")
        lines.append("Type /projects <name> for details.")
        return "\n".join(lines)

    return CommandDefinition(
        name="projects",
        description="List my projects, or show one",
        usage="/projects [name]",
        handler=handle,
    )


def register_builtin_commands(dispatcher: CommandDispatcher, profile: ProfileConfig) -> None:
    """Register /help, /about, /skills and /projects on `dispatcher`."""
    dispatcher.register(make_help_command(dispatcher))
    dispatcher.register(make_about_command(profile))
    dispatcher.register(make_skills_command(profile))
    dispatcher.register(make_projects_command(profile))


def build_dispatcher(profile: ProfileConfig) -> CommandDispatcher:
    """A new dispatcher with all built-in commands registered."""
    dispatcher = CommandDispatcher()
    register_builtin_commands(dispatcher, profile)
    return dispatcher

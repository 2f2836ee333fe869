#!/usr/bin/env python3
"""
Configuration system for the portfolio terminal
Supports YAML files, CLI overrides, and programmatic access
"""

import yaml
import argparse
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from copy import deepcopy

from portfolio_terminal.dispatcher import is_valid_command_name


@dataclass
class ProjectEntry:
	"""One project shown by /projects"""
	slug: str
	name: str
	description: str = ""
	url: str = ""

	def to_dict(self) -> Dict[str, Any]:
		return {
			'slug': self.slug,
			'name': self.name,
			'description': self.description,
			'url': self.url
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'ProjectEntry':
		name = str(data.get('name', ''))
		return cls(
			slug=str(data.get('slug') or name.lower().replace(' ', '-')),
			name=name,
			description=str(data.get('description') or ''),
			url=str(data.get('url') or '')
		)


def _default_skills() -> List[str]:
	return ["Python", "TypeScript", "React", "React Native", "Next.js", "PostgreSQL"]


def _default_projects() -> List[ProjectEntry]:
	return [
		ProjectEntry(
			slug="portfolio",
			name="Portfolio",
			description="This site, with a terminal mode",
		),
	]


@dataclass
class ProfileConfig:
	"""Portfolio content served by the built-in commands"""
	name: str = "Anonymous Developer"
	title: str = "Software Engineer"
	summary: str = "I build things for the web."
	skills: List[str] = field(default_factory=_default_skills)
	projects: List[ProjectEntry] = field(default_factory=_default_projects)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert to dictionary for YAML serialization"""
		return {
			'name': self.name,
			'title': self.title,
			'summary': self.summary,
			'skills': list(self.skills),
			'projects': [p.to_dict() for p in self.projects]
		}

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'ProfileConfig':
		"""Create from dictionary (YAML loading)"""
		defaults = cls()
		projects = data.get('projects')
		return cls(
			name=data.get('name', defaults.name),
			title=data.get('title', defaults.title),
			summary=data.get('summary', defaults.summary),
			skills=[str(s) for s in data.get('skills', defaults.skills)],
			projects=[ProjectEntry.from_dict(p) for p in projects] if projects is not None else defaults.projects
		)


@dataclass
class ConsoleConfig:
	"""Console messages logging level configuration"""
	verbose: bool = False
	quiet: bool = False


@dataclass
class TerminalUIConfig:
	"""Prompt and banner for the interactive terminal"""
	prompt: str = "guest@portfolio:~$ "
	banner: str = "Welcome! Type /help for available commands."


@dataclass
class TerminalConfig:
	"""Complete configuration for the portfolio terminal"""
	console: ConsoleConfig = field(default_factory=ConsoleConfig)
	terminal: TerminalUIConfig = field(default_factory=TerminalUIConfig)
	profile: ProfileConfig = field(default_factory=ProfileConfig)

	config_version: str = "1.0"

	def to_dict(self) -> Dict[str, Any]:
		"""Convert to dictionary for YAML serialization"""
		return {
			'config_version': self.config_version,
			'console': {
				'verbose': self.console.verbose,
				'quiet': self.console.quiet,
			},
			'terminal': {
				'prompt': self.terminal.prompt,
				'banner': self.terminal.banner,
			},
			'profile': self.profile.to_dict(),
		}


class ConfigurationManager:
	"""
	Manages configuration loading, merging, and validation
	"""

	def __init__(self):
		self.config = TerminalConfig()
		self.config_file_path: Optional[Path] = None

		self.logger = logging.getLogger(__name__)

		# Standard config file locations (in order of preference)
		self.config_search_paths = [
			Path.cwd() / "portfolio_terminal.yaml",  # Current directory
			Path.cwd() / "config" / "portfolio_terminal.yaml",  # Config subdirectory
			Path.home() / ".config" / "portfolio_terminal" / "config.yaml",  # User config
		]

	def load_config(self, config_file: Optional[str] = None) -> TerminalConfig:
		"""
		Load configuration from file with fallback chain

		Args:
			config_file: Specific config file path, or None for auto-discovery

		Returns:
			Loaded configuration object (defaults if nothing usable was found)
		"""
		if config_file:
			config_path = Path(config_file)
			if config_path.exists():
				self.config = self._load_yaml_file(config_path)
				self.config_file_path = config_path
				self.logger.info(f"Loaded config from: {config_path}")
			else:
				self.logger.warning(f"Config file not found: {config_path}")
				self.logger.info("Using default configuration")
		else:
			for path in self.config_search_paths:
				if path.exists():
					self.config = self._load_yaml_file(path)
					self.config_file_path = path
					self.logger.info(f"Auto-discovered config: {path}")
					break
			else:
				self.logger.info("No config file found, using defaults")

		return self.config

	def _load_yaml_file(self, file_path: Path) -> TerminalConfig:
		"""Load configuration from YAML file"""
		try:
			with open(file_path, 'r', encoding='utf-8') as f:
				yaml_data = yaml.safe_load(f) or {}

			if not isinstance(yaml_data, dict):
				self.logger.error(f"Config file {file_path} does not contain a mapping")
				return TerminalConfig()

			config = TerminalConfig()
			if 'config_version' in yaml_data:
				config.config_version = str(yaml_data['config_version'])
			if 'console' in yaml_data:
				config.console = self._dict_to_dataclass(ConsoleConfig, yaml_data['console'] or {})
			if 'terminal' in yaml_data:
				config.terminal = self._dict_to_dataclass(TerminalUIConfig, yaml_data['terminal'] or {})
			if 'profile' in yaml_data:
				config.profile = ProfileConfig.from_dict(yaml_data['profile'] or {})

			for key in yaml_data:
				if key not in ('config_version', 'console', 'terminal', 'profile'):
					self.logger.warning(f"Unknown config section '{key}'")

			return config

		except (OSError, yaml.YAMLError, TypeError, ValueError, AttributeError) as e:
			self.logger.error(f"Error loading config file {file_path}: {e}")
			return TerminalConfig()

	def _dict_to_dataclass(self, dataclass_type, data_dict):
		"""Convert dictionary to dataclass, preserving defaults for missing keys"""
		instance = dataclass_type()

		for key, value in data_dict.items():
			if hasattr(instance, key):
				setattr(instance, key, value)
			else:
				self.logger.warning(f"Unknown config key '{key}' in {dataclass_type.__name__}")

		return instance

	def merge_cli_args(self, args: argparse.Namespace) -> TerminalConfig:
		"""Apply command line overrides (CLI wins over the config file)"""
		if getattr(args, 'verbose', False):
			self.config.console.verbose = True
		if getattr(args, 'quiet', False):
			self.config.console.quiet = True
		if getattr(args, 'prompt', None) is not None:
			self.config.terminal.prompt = args.prompt
		return self.config

	def save_config(self, file_path: Optional[str] = None) -> bool:
		"""
		Save current configuration to YAML file

		Args:
			file_path: Target file path, or None to use loaded file path

		Returns:
			True if saved successfully
		"""
		if file_path:
			target_path = Path(file_path)
		elif self.config_file_path:
			target_path = self.config_file_path
		else:
			target_path = Path("portfolio_terminal.yaml")

		try:
			target_path.parent.mkdir(parents=True, exist_ok=True)

			with open(target_path, 'w', encoding='utf-8') as f:
				f.write("# Portfolio Terminal Configuration\n")
				f.write(f"# Version: {self.config.config_version}\n\n")

				yaml.safe_dump(self.config.to_dict(), f,
							   default_flow_style=False,
							   sort_keys=False,
							   indent=2,
							   allow_unicode=True)

			self.logger.info(f"Configuration saved to: {target_path}")
			return True

		except OSError as e:
			self.logger.error(f"Error saving config to {target_path}: {e}")
			return False

	def create_sample_config(self, file_path: str = "portfolio_terminal_sample.yaml") -> bool:
		"""Write the default configuration as a starting point"""
		previous = self.config
		self.config = TerminalConfig()
		try:
			return self.save_config(file_path)
		finally:
			self.config = previous

	def validate_config(self) -> tuple[bool, list[str]]:
		"""
		Validate configuration for common issues

		Returns:
			(is_valid, list_of_errors)
		"""
		errors = []

		if not self.config.terminal.prompt:
			errors.append("Terminal prompt must not be empty")

		if self.config.console.verbose and self.config.console.quiet:
			errors.append("Console cannot be both verbose and quiet")

		if not self.config.profile.name:
			errors.append("Profile name must be set")

		seen = set()
		for project in self.config.profile.projects:
			slug = project.slug.lower()
			# Slugs are typed as /projects arguments, so they share the command-name alphabet
			if not is_valid_command_name(slug):
				errors.append(f"Invalid project slug: {project.slug!r}")
			if slug in seen:
				errors.append(f"Duplicate project slug: {project.slug!r}")
			seen.add(slug)

		return len(errors) == 0, errors

	def get_config(self) -> TerminalConfig:
		"""Get current configuration"""
		return deepcopy(self.config)


def setup_logging(config: TerminalConfig) -> None:
	"""Configure the root logger from the console section"""
	if config.console.verbose:
		level = logging.DEBUG
	elif config.console.quiet:
		level = logging.WARNING
	else:
		level = logging.INFO

	logging.basicConfig(
		level=level,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
	)


def create_argument_parser() -> argparse.ArgumentParser:
	"""Argument parser for the interactive terminal"""
	parser = argparse.ArgumentParser(
		description='Portfolio Terminal',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  %(prog)s                                 # Start with default settings
  %(prog)s -c my_config.yaml               # Use specific config file
  %(prog)s --create-config sample.yaml     # Create sample config file

Configuration:
  Configuration is loaded in this order (later overrides earlier):
  1. Built-in defaults
  2. Configuration file (YAML)
  3. Command line arguments

  Config file search order:
  - portfolio_terminal.yaml (current directory)
  - config/portfolio_terminal.yaml
  - ~/.config/portfolio_terminal/config.yaml
		"""
	)

	config_group = parser.add_argument_group('Configuration')
	config_group.add_argument(
		'-c', '--config',
		help='Configuration file path'
	)
	config_group.add_argument(
		'--create-config',
		metavar='PATH',
		help='Create a sample configuration file and exit'
	)

	console_group = parser.add_argument_group('Console')
	verbosity = console_group.add_mutually_exclusive_group()
	verbosity.add_argument(
		'-v', '--verbose',
		action='store_true',
		help='Enable debug logging'
	)
	verbosity.add_argument(
		'-q', '--quiet',
		action='store_true',
		help='Only log warnings and errors'
	)
	console_group.add_argument(
		'--prompt',
		help='Override the terminal prompt'
	)

	return parser


def setup_configuration(argv=None) -> tuple[Optional[TerminalConfig], bool, int]:
	"""
	Setup configuration system with CLI integration

	Args:
		argv: Command line arguments (None for sys.argv)

	Returns:
		(config_object, should_exit, exit_code)
	"""
	parser = create_argument_parser()
	args = parser.parse_args(argv)

	manager = ConfigurationManager()

	if args.create_config:
		if manager.create_sample_config(args.create_config):
			print(f"Sample configuration created: {args.create_config}")
			print(f"Edit the file and run again with: -c {args.create_config}")
			return None, True, 0
		return None, True, 1

	manager.load_config(args.config)
	manager.merge_cli_args(args)

	is_valid, errors = manager.validate_config()
	if not is_valid:
		print("Configuration errors:")
		for error in errors:
			print(f"  ✗ {error}")
		return None, True, 1

	return manager.get_config(), False, 0

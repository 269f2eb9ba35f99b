# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative option definitions loaded from YAML or TOML files.

Example (YAML):
    usage: "example [args]"
    options:
      - short: f
        long: flag
        description: Set flag
        action: myapp.cli.set_flag
      - long: filename
        description: Specify filename
        expects_value: true
        action: myapp.cli.set_filename

Actions are dotted import paths. Options without a value are called with no
arguments; options with a value are called with the value string.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from jargs.exceptions import ConfigError, InvalidOptionError
from jargs.logger import logger
from jargs.option import OptionSpec
from jargs.parser import Parser
from jargs.registry import OptionRegistry


def import_action(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid action path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(f"Could not import '{dotted_path}': {error}") from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(action):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return action


class RawOption(BaseModel):
    """Raw option model for jargs configuration files."""

    short: str | None = None
    long: str | None = None
    description: str = ""
    expects_value: bool = False
    action: str

    @model_validator(mode="after")
    def validate_names(self) -> RawOption:
        if self.short is None and self.long is None:
            raise ValueError("Option must define 'short' or 'long'")
        return self

    def to_spec(self) -> OptionSpec:
        action = import_action(self.action)
        if self.expects_value:
            return OptionSpec.value(self.short, self.long, self.description, action)
        return OptionSpec.flag(self.short, self.long, self.description, action)


class JargsConfig(BaseModel):
    """Top-level configuration model."""

    usage: str | None = None
    program: str | None = None
    options: list[RawOption] = Field(default_factory=list)

    def to_specs(self) -> list[OptionSpec]:
        return [raw_option.to_spec() for raw_option in self.options]

    def to_registry(self) -> OptionRegistry:
        registry = OptionRegistry()
        try:
            for spec in self.to_specs():
                registry.register(spec)
        except InvalidOptionError as error:
            raise ConfigError(f"Invalid option definition: {error}") from error
        return registry

    def to_parser(self, **kwargs: Any) -> Parser:
        parser = Parser(program=self.program, **kwargs)
        try:
            for spec in self.to_specs():
                parser.add(spec)
        except InvalidOptionError as error:
            raise ConfigError(f"Invalid option definition: {error}") from error
        if self.usage is not None:
            parser.add_help(self.usage)
        return parser


def read_config(file_path: Path | str) -> JargsConfig:
    """
    Read and validate a YAML or TOML option file.

    Raises:
        ConfigError: If the file is missing, has an unsupported suffix,
            cannot be parsed, or fails validation.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise ConfigError(f"Could not parse '{file_path}': {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError("Configuration file must contain a mapping at the top level")

    try:
        config = JargsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in '{file_path}':\n{error}") from error
    logger.debug("Loaded %d option(s) from '%s'", len(config.options), path)
    return config


def load_options(file_path: Path | str) -> OptionRegistry:
    """Load option definitions from a YAML or TOML file into an `OptionRegistry`."""
    return read_config(file_path).to_registry()


def loader(file_path: Path | str, **kwargs: Any) -> Parser:
    """
    Build a `Parser` from a YAML or TOML file.

    The help option is registered after the configured options when the file
    defines `usage`. Extra keyword arguments are passed to `Parser`.
    """
    return read_config(file_path).to_parser(**kwargs)

"""Runtime configuration: enums, defaults, and TOML persistence."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

import tomli_w

from .utils import file_exists, write_to_file

DEFAULT_CONFIG_DIR = "/.config/reposcan/"
DEFAULT_CONFIG_TOML = "config.toml"
DEFAULT_LOG_FILE_DIR = "/.config/reposcan/logs/"


class OnlyFilter(StrEnum):
    """Which repositories are included in results."""

    ALL = "all"
    DIRTY = "dirty"
    UNCOMMITTED = "uncommitted"
    UNPUSHED = "unpushed"
    UNPULLED = "unpulled"


class OutputFormat(StrEnum):
    """How scan results are rendered."""

    JSON = "json"
    TABLE = "table"
    INTERACTIVE = "interactive"
    NONE = "none"


class Source(StrEnum):
    """Where a configuration value came from, lowest precedence first."""

    DEFAULTS = "defaults"
    FILE = "file"
    ENV = "env"
    FLAGS = "flags"


def is_valid_only_filter(value: Any) -> bool:
    return value in {f.value for f in OnlyFilter}


def create_only_filter(s: str) -> OnlyFilter:
    """Parse s case-insensitively into an OnlyFilter; raise ValueError otherwise."""
    try:
        return OnlyFilter(s.strip().lower())
    except ValueError:
        raise ValueError(f"{s} is not valid only filter") from None


def is_valid_output_format(value: Any) -> bool:
    return value in {f.value for f in OutputFormat}


def create_output_format(s: str) -> OutputFormat:
    """Parse s case-insensitively; "table" maps to the interactive view."""
    text = s.strip().lower()
    if text == OutputFormat.TABLE:
        return OutputFormat.INTERACTIVE
    try:
        return OutputFormat(text)
    except ValueError:
        raise ValueError(f"'{s}' is not valid output format") from None


@dataclass
class Output:
    type: OutputFormat | str = ""
    json_path: str = ""
    colorscheme_name: str = ""


@dataclass
class Config:
    """All runtime options; zero values unless populated from defaults or a file."""

    roots: list[str] = field(default_factory=list)
    dir_ignore: list[str] = field(default_factory=list)
    only: OnlyFilter | str = ""
    output: Output = field(default_factory=Output)
    max_workers: int = 0
    debug: bool = False
    version: int = 0

    def to_dict(self) -> dict[str, Any]:
        """The TOML document layout; empty roots, dirignore and only are omitted."""
        data: dict[str, Any] = {}
        if self.roots:
            data["roots"] = list(self.roots)
        if self.dir_ignore:
            data["dirignore"] = list(self.dir_ignore)
        if self.only:
            data["only"] = str(self.only)
        data["output"] = {
            "type": str(self.output.type),
            "jsonPath": self.output.json_path,
            "colorscheme": self.output.colorscheme_name,
        }
        data["maxWorkers"] = self.max_workers
        data["debug"] = self.debug
        data["version"] = self.version
        return data


@dataclass(frozen=True)
class Paths:
    config_dir: str
    config_file_path: str
    log_file_dir: str


def default_paths() -> Paths:
    """Config locations relative to the user's home directory."""
    return Paths(
        config_dir=DEFAULT_CONFIG_DIR,
        config_file_path=DEFAULT_CONFIG_DIR + DEFAULT_CONFIG_TOML,
        log_file_dir=DEFAULT_LOG_FILE_DIR,
    )


_DEFAULT_DIR_IGNORE = (
    "**/node_modules/**",
    "**/vendor/**",
    "**/.venv/**",
    "**/venv/**",
    "**/.m2/**",
    "**/.gradle/**",
    "**/.cargo/**",
    "**/.gradle/**",
    "**/.kotlin/**",
    "**/.java/**",
    "**/.cargo/**",
    "**/.zen/**",
    "**/.bun/**",
    "**/.codex/**",
    "**/.android/**",
    "**/.config/Google/**",
    "**/.config/JetBrains/**",
    "**/target/**",
    "**/build/**",
    "**/dist/**",
    "**/.next/**",
    "**/.nuxt/**",
    "**/.cache/**",
    "**/.local/**",
    "**/.pytest_cache/**",
    "**/.idea/**",
    "**/.vscode/**",
    "**/.terraform/**",
    "**/.docker/**",
    "**/.DS_Store",
    "**/Thumbs.db",
    "/proc/**",
    "/sys/**",
    "/dev/**",
    "/run/**",
    "/tmp/**",
    "/var/log/**",
    "/var/tmp/**",
    "/System/**",
    "/Library/**",
    "~/Library/**",
)


def _home() -> str:
    try:
        return str(Path.home())
    except (RuntimeError, KeyError):
        return ""


def defaults() -> Config:
    """A configuration suitable for a typical development machine."""
    return Config(
        roots=[_home()],
        dir_ignore=list(_DEFAULT_DIR_IGNORE),
        only=OnlyFilter.DIRTY,
        output=Output(type=OutputFormat.INTERACTIVE, json_path=""),
        max_workers=8,
        debug=False,
        version=1,
    )


def _coerce(enum_cls: type[StrEnum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a Config from a parsed TOML document; missing keys stay zero."""
    output = data.get("output", {}) or {}
    return Config(
        roots=list(data.get("roots", [])),
        dir_ignore=list(data.get("dirignore", [])),
        only=_coerce(OnlyFilter, data.get("only", "")),
        output=Output(
            type=_coerce(OutputFormat, output.get("type", "")),
            json_path=output.get("jsonPath", ""),
            colorscheme_name=output.get("colorscheme", ""),
        ),
        max_workers=int(data.get("maxWorkers", 0)),
        debug=bool(data.get("debug", False)),
        version=int(data.get("version", 0)),
    )


def write_config(config: Config, path: str) -> None:
    """Serialize config to TOML at path, creating parent directories."""
    write_to_file(tomli_w.dumps(config.to_dict()), str(path))


def load_config(path: str) -> Config:
    """Read a TOML configuration file."""
    with open(path, "rb") as handle:
        return config_from_dict(tomllib.load(handle))


def create_or_read_configs(config_file_path: str) -> Config:
    """Load the config under the home directory, writing defaults if it is missing."""
    file_path = Path.home() / config_file_path.lstrip("/\\")
    if file_exists(file_path):
        try:
            return load_config(str(file_path))
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError):
            return Config()

    configs = defaults()
    try:
        write_config(configs, str(file_path))
    except OSError:
        pass
    return configs
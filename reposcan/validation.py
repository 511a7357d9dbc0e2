"""Checks of a Config for missing paths and invalid values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from . import logger, stdout
from .config import Config, is_valid_only_filter, is_valid_output_format
from .schemes import is_known_scheme
from .utils import dir_exists

_ENV_VAR = re.compile(r"\$(?:\{([^}]*)\}|([A-Za-z0-9_]+))")


def _expand_env(text: str) -> str:
    """Replace $VAR and ${VAR} with environment values; unset variables become empty."""
    return _ENV_VAR.sub(lambda m: os.environ.get(m.group(1) or m.group(2) or "", ""), text)


@dataclass
class Issue:
    field: str
    message: str


@dataclass
class ValidationResult:
    warnings: list[Issue] = field(default_factory=list)
    errors: list[Issue] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def log(self) -> None:
        for warning in self.warnings:
            logger.warn(
                f"Configs Validation Warning: Field={warning.field}, message={warning.message}"
            )
        for err in self.errors:
            logger.error(f"Configs Validation Errors: Field={err.field}, message={err.message}")

    def print_issues(self) -> None:
        for warning in self.warnings:
            stdout.print_warning(f"Confg\tfield={warning.field} , message={warning.message}\n")
        for err in self.errors:
            stdout.print_error(f"Config\tfield={err.field}, message={err.message}\n")


def validate(config: Config) -> ValidationResult:
    """Collect errors for bad roots and enum values, warnings for output issues."""
    result = ValidationResult()

    for raw_root in config.roots:
        root = _expand_env(raw_root)
        try:
            exists = dir_exists(root)
        except OSError as exc:
            result.errors.append(Issue("root", f"Failed to read {root} error={exc}"))
            continue
        if not exists:
            result.errors.append(
                Issue("root", f"root '{root}' does not exist or not a directory")
            )

    if not is_valid_only_filter(config.only):
        result.errors.append(Issue("Only", f"'{config.only}' is not a valid OnlyFilter"))

    if not is_valid_output_format(config.output.type):
        result.errors.append(
            Issue("Output", f"'{config.output.type}' is not a valid OutputFormat")
        )

    json_path = config.output.json_path
    if json_path.strip():
        try:
            exists = dir_exists(json_path)
        except OSError as exc:
            result.warnings.append(
                Issue("jsonOutputPath", f"error reading path: '{json_path}' error={exc}")
            )
        else:
            if not exists:
                result.warnings.append(
                    Issue("jsonOutputPath", f"output path '{json_path}' does not exists!")
                )

    scheme = config.output.colorscheme_name.strip().lower()
    if scheme and not is_known_scheme(scheme):
        result.warnings.append(
            Issue(
                "output.colorscheme",
                f"colorscheme='{config.output.colorscheme_name}' is invalid",
            )
        )

    return result
"""Interactive first-run setup that writes a project-local config."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import Config, ConfigDraft
from .errors import AgentIOError, InternalError
from .output import print_blank_line, print_field, print_heading, print_info, print_success
from .prompts import prompt_confirm, prompt_project_name, prompt_store_path_default

__all__ = ["OnboardingResult", "run_onboarding", "run_onboarding_in"]


@dataclass(frozen=True)
class OnboardingResult:
    """The validated config and the path it was written to."""

    config: Config
    config_path: Path


def run_onboarding() -> OnboardingResult:
    """Run onboarding for the current working directory."""
    try:
        cwd = Path.cwd()
    except OSError as error:
        raise AgentIOError(error) from error
    return run_onboarding_in(cwd)


def run_onboarding_in(project_root: str | os.PathLike[str]) -> OnboardingResult:
    """Run onboarding for ``project_root``; nothing is written until confirmed."""
    project_root = Path(project_root)

    print_heading("Agent Memory Setup")
    print_info("Create a local project memory store.")
    print_blank_line()

    project_name = prompt_project_name()
    store_path = prompt_store_path_default(Config.project_store_path(project_root))
    draft = ConfigDraft(project_name, store_path)

    print_blank_line()
    _preview(project_name, store_path, project_root)

    if not prompt_confirm("Create configuration now?", True):
        raise InternalError("onboarding cancelled by user")

    config = draft.finalize()
    config_path = Config.project_config_path(project_root)
    config.save(config_path)

    print_blank_line()
    print_success("Configuration created.")
    print_field("Config file", config_path)
    print_field("Store file", store_path)

    return OnboardingResult(config=config, config_path=config_path)


def _preview(project_name: str, store_path: Path, project_root: Path) -> None:
    print_heading("Preview")
    print_field("Project", project_name)
    print_field("Config file", Config.project_config_path(project_root))
    print_field("Store file", store_path)
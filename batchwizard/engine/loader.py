"""TemplateLoader - loads and validates template settings from YAML."""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .errors import TemplateConfigError
from .schema import TemplateConfig, TemplateItem

logger = logging.getLogger(__name__)

WORKSPACE_SETTINGS_FILE = ".create-files-batch.yaml"
CONFIG_ENV_VAR = "CREATE_FILES_BATCH_CONFIG"
DEFAULT_USER_CONFIG = Path("~/.config/create-files-batch/config.yaml")

CUSTOM_TEMPLATE = TemplateConfig(
    label="Custom",
    description="Create multiple files based on input",
    files=[],
)


class TemplateLoader:
    """
    Loads template definitions from YAML settings files.

    Lookup order (first existing file wins):
    1. <workspace>/.create-files-batch.yaml
    2. File named by $CREATE_FILES_BATCH_CONFIG
    3. ~/.config/create-files-batch/config.yaml
    """

    def __init__(self, user_config: Optional[Path] = None):
        """
        Initialize loader.

        Args:
            user_config: User level settings file; replaces both the env var
                and ~/.config/create-files-batch/config.yaml when given
        """
        self.user_config = Path(user_config).expanduser() if user_config is not None else None

    def user_config_candidates(self) -> List[Path]:
        if self.user_config is not None:
            return [self.user_config]
        candidates = []
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidates.append(Path(env_path).expanduser())
        candidates.append(DEFAULT_USER_CONFIG.expanduser())
        return candidates

    def find_settings_file(self, workspace: Optional[Path] = None) -> Optional[Path]:
        candidates = []
        if workspace is not None:
            candidates.append(Path(workspace) / WORKSPACE_SETTINGS_FILE)
        candidates.extend(self.user_config_candidates())

        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None

    def load_templates(self, workspace: Optional[Path] = None) -> List[TemplateConfig]:
        """
        Load the configured templates for a workspace.

        Args:
            workspace: Workspace root whose settings file takes precedence

        Returns:
            Validated templates; empty when no settings file exists

        Raises:
            TemplateConfigError: If the YAML is malformed or fails validation
        """
        settings_path = self.find_settings_file(workspace)
        if settings_path is None:
            logger.debug("No template settings found for workspace %s", workspace)
            return []

        logger.debug("Loading templates from %s", settings_path)
        try:
            with open(settings_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TemplateConfigError(f"Invalid YAML in {settings_path}: {e}") from e

        return self.parse_templates(data, source=str(settings_path))

    @staticmethod
    def parse_templates(data, source: str = "<settings>") -> List[TemplateConfig]:
        if data is None:
            return []
        if not isinstance(data, dict):
            raise TemplateConfigError(f"{source}: expected a mapping with a 'templates' key")

        raw_templates = data.get('templates') or []
        if not isinstance(raw_templates, list):
            raise TemplateConfigError(f"{source}: 'templates' must be a list")

        templates = []
        for index, raw in enumerate(raw_templates):
            try:
                templates.append(TemplateConfig.model_validate(raw))
            except ValidationError as e:
                raise TemplateConfigError(f"{source}: template #{index + 1} is invalid: {e}") from e
        return templates

    def load_template_items(self, workspace: Optional[Path] = None) -> List[TemplateItem]:
        """Configured templates followed by the Custom template, as pick items."""
        configs = self.load_templates(workspace) + [CUSTOM_TEMPLATE]
        return [TemplateItem.from_config(config) for config in configs]


def is_custom_template(template: Optional[TemplateItem]) -> bool:
    return template is not None and template.label.lower() == CUSTOM_TEMPLATE.label.lower()

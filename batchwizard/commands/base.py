"""Shared behaviour of the create-files commands."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from batchwizard.engine.engine import WizardEngine
from batchwizard.engine.loader import TemplateLoader, is_custom_template
from batchwizard.engine.schema import CreateFilesState, StepDefinition
from batchwizard.engine.signals import PromptResult
from batchwizard.services.files import create_files, create_folder_structure

from . import steps

logger = logging.getLogger(__name__)


class CreateFilesCommand(ABC):
    """
    Runs a create-files wizard and, when it completes, creates the files.

    Subclasses provide the step table. The engine is created once per
    command; each ``execute`` call starts a fresh run over it.
    """

    def __init__(self, runner, loader: Optional[TemplateLoader] = None):
        self.runner = runner
        self.loader = loader or TemplateLoader()
        self.engine: WizardEngine[CreateFilesState] = WizardEngine(
            self.define_steps(), CreateFilesState()
        )

    @abstractmethod
    def define_steps(self) -> Dict[int, StepDefinition]:
        """Step table of this command, keyed 1..N."""
        pass

    @property
    def state(self) -> CreateFilesState:
        return self.engine.state

    async def execute(self) -> Optional[List[Path]]:
        """
        Run the wizard and create the files.

        Returns:
            Paths of the created files, or None if the wizard was cancelled
            or finished without every required answer
        """
        state = await self.engine.run_to_completion()

        if not state.is_complete:
            logger.info("Wizard ended without all answers (%s); nothing created", self.engine.status.value)
            return None

        destination = state.folder.path
        workspace_path = state.workspace.path
        inside_workspace = destination == workspace_path or workspace_path in destination.parents
        base = workspace_path if inside_workspace else None
        create_folder_structure(destination, self.runner, base=base)
        written = create_files(state.template.files, destination, state.prefix, self.runner)

        for path in written:
            self.runner.display(f"✓ Created {path}")
        return written

    # Step bodies shared by the commands

    def template_step(self) -> StepDefinition:
        return StepDefinition(execute=self._select_template)

    def custom_suffixes_step(self) -> StepDefinition:
        return StepDefinition(
            execute=self._input_custom_suffixes,
            should_skip=lambda state: not is_custom_template(state.template),
        )

    def prefix_step(self) -> StepDefinition:
        return StepDefinition(execute=self._input_files_prefix)

    async def _select_template(self) -> PromptResult:
        workspace_path = self.state.workspace.path if self.state.workspace else None
        templates = self.loader.load_template_items(workspace_path)

        result = await steps.select_template(
            self.runner, self.engine.position, templates, self.state.template
        )
        if result.is_ok:
            self.engine.update_state('template', result.value)
        return result

    async def _input_custom_suffixes(self) -> PromptResult:
        result = await steps.input_suffixes(self.runner, self.engine.position, self.state.template)
        if result.is_ok:
            self.engine.update_state('template', result.value)
        return result

    async def _input_files_prefix(self) -> PromptResult:
        result = await steps.input_files_prefix(self.runner, self.engine.position, self.state.prefix)
        if result.is_ok:
            self.engine.update_state('prefix', result.value)
        return result

"""Create files from the command palette: every answer is asked for."""

from typing import Dict, List, Optional

from batchwizard.engine.errors import WizardError
from batchwizard.engine.loader import TemplateLoader
from batchwizard.engine.schema import StepDefinition, WorkspaceFolder
from batchwizard.engine.signals import PromptResult

from . import steps
from .base import CreateFilesCommand


class CreateFromCommandPaletteCommand(CreateFilesCommand):
    """
    Five step wizard: workspace, template, custom suffixes, destination
    folder, prefix.

    The workspace step is skipped when there is a single workspace, and
    the suffix step unless the Custom template was picked.
    """

    def __init__(self, runner, workspaces: List[WorkspaceFolder], loader: Optional[TemplateLoader] = None):
        if not workspaces:
            raise WizardError("Could not determine workspace folders.")
        self.workspaces = list(workspaces)
        super().__init__(runner, loader)

    def define_steps(self) -> Dict[int, StepDefinition]:
        return {
            1: StepDefinition(
                execute=self._select_workspace,
                should_skip=lambda state: len(self.workspaces) == 1,
                when_skip=lambda: self.engine.update_state('workspace', self.workspaces[0]),
            ),
            2: self.template_step(),
            3: self.custom_suffixes_step(),
            4: StepDefinition(execute=self._input_destination_folder),
            5: self.prefix_step(),
        }

    async def _select_workspace(self) -> PromptResult:
        result = await steps.select_workspace(
            self.runner, self.engine.position, self.workspaces, self.state.workspace
        )
        if result.is_ok:
            self.engine.update_state('workspace', result.value)
        return result

    async def _input_destination_folder(self) -> PromptResult:
        workspace_path = self.state.workspace.path if self.state.workspace else None
        selected = self.state.folder.relative_path if self.state.folder else None

        result = await steps.input_destination_folder(
            self.runner, self.engine.position, workspace_path, selected
        )
        if result.is_ok:
            self.engine.update_state('folder', result.value)
        return result

"""Create files inside a given folder: workspace and folder are known."""

from pathlib import Path
from typing import Dict, List, Optional

from batchwizard.engine.errors import WizardError
from batchwizard.engine.loader import TemplateLoader
from batchwizard.engine.schema import DestinationFolder, StepDefinition, WorkspaceFolder
from batchwizard.services.files import identify_workspace

from .base import CreateFilesCommand


class CreateFromMenuCommand(CreateFilesCommand):
    """Three step wizard: template, custom suffixes, prefix."""

    def __init__(
        self,
        runner,
        target_folder: Path,
        workspaces: List[WorkspaceFolder],
        loader: Optional[TemplateLoader] = None,
    ):
        self.target_folder = Path(target_folder).resolve()
        self.workspaces = list(workspaces)
        super().__init__(runner, loader)
        self._set_workspace_and_folder()

    def define_steps(self) -> Dict[int, StepDefinition]:
        return {
            1: self.template_step(),
            2: self.custom_suffixes_step(),
            3: self.prefix_step(),
        }

    def _set_workspace_and_folder(self) -> None:
        target_workspace = identify_workspace(self.target_folder, self.workspaces)
        if target_workspace is None:
            raise WizardError(f"Unable to find workspace from folder: {self.target_folder}")

        self.engine.update_state(
            'folder',
            DestinationFolder(path=self.target_folder, relative_path=str(self.target_folder)),
        )
        self.engine.update_state('workspace', target_workspace)

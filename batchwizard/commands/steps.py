"""Prompts used by the create-files step tables.

Each helper asks one question through the runner and returns the
runner's PromptResult, with the accepted value converted to the form
state's field type.
"""

from pathlib import Path
from typing import List, Optional

from batchwizard.engine.schema import (
    DestinationFolder,
    InputBoxParameters,
    QuickPickParameters,
    StepPosition,
    TemplateItem,
    WorkspaceFolder,
)
from batchwizard.engine.signals import PromptResult
from batchwizard.services.files import parse_suffixes


async def select_workspace(
    runner,
    position: StepPosition,
    workspaces: List[WorkspaceFolder],
    selected: Optional[WorkspaceFolder] = None,
) -> PromptResult:
    return await runner.pick_one(
        QuickPickParameters(
            title="Workspace selection",
            placeholder="Select the workspace in which the files will be created",
            items=workspaces,
            active_item=selected,
        ),
        position,
    )


async def select_template(
    runner,
    position: StepPosition,
    templates: List[TemplateItem],
    selected: Optional[TemplateItem] = None,
) -> PromptResult:
    return await runner.pick_one(
        QuickPickParameters(
            title="Template selection",
            placeholder="Select a predefined template or use a custom creation",
            items=templates,
            active_item=selected,
        ),
        position,
    )


async def input_suffixes(
    runner,
    position: StepPosition,
    selected: Optional[TemplateItem] = None,
) -> PromptResult:
    """Ask for custom suffixes; ok(None) when nothing was entered."""
    current_files = selected.files if selected is not None else []
    result = await runner.input_text(
        InputBoxParameters(
            title="Files custom suffixes",
            prompt="Each item must start with a dot. The files will be created as `{prefix}{suffix}`.",
            placeholder="Enter comma separated values...",
            value=",".join(config.suffix for config in current_files),
        ),
        position,
    )
    if not result.is_ok:
        return result

    files = parse_suffixes(result.value, current_files)
    if not files:
        return PromptResult.ok(None)

    label = selected.label if selected is not None else ""
    template = TemplateItem(
        label=label,
        detail=selected.detail if selected is not None else None,
        files=files,
    )
    return PromptResult.ok(template)


async def input_destination_folder(
    runner,
    position: StepPosition,
    workspace_path: Optional[Path],
    selected_relative_path: Optional[str] = None,
) -> PromptResult:
    """Ask for a folder relative to the workspace; ok(None) when empty."""
    result = await runner.input_text(
        InputBoxParameters(
            title="Destination folder",
            prompt=(
                "Enter the relative path for the folder that will hold the new files "
                "(e.g., 'src/components'). If the folder path does not fully exists "
                "the needed folders will be created."
            ),
            placeholder="Enter relative folder path...",
            value=selected_relative_path,
        ),
        position,
    )
    if not result.is_ok:
        return result

    relative_path = result.value
    if not relative_path or workspace_path is None:
        return PromptResult.ok(None)
    return PromptResult.ok(
        DestinationFolder(path=Path(workspace_path) / relative_path, relative_path=relative_path)
    )


async def input_files_prefix(
    runner,
    position: StepPosition,
    selected_prefix: Optional[str] = None,
) -> PromptResult:
    """Ask for the file name prefix; ok(None) when empty."""
    result = await runner.input_text(
        InputBoxParameters(
            title="Files start name or prefix",
            prompt=(
                "The files will be created as `{prefix}{suffix}`. The suffixes are the ones "
                "defined in your settings for the template you have selected or the ones "
                "you have specified for a custom template."
            ),
            placeholder="Enter the prefix...",
            value=selected_prefix,
        ),
        position,
    )
    if not result.is_ok:
        return result
    return PromptResult.ok(result.value or None)

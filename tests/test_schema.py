"""Tests for Pydantic schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from batchwizard.engine.errors import UnknownFieldError
from batchwizard.engine.schema import (
    CreateFilesState,
    DestinationFolder,
    FileConfig,
    StepDefinition,
    StepPosition,
    TemplateConfig,
    TemplateItem,
    WorkspaceFolder,
)
from batchwizard.engine.signals import Outcome, PromptResult


def test_with_field_returns_new_record():
    """with_field copies the record and replaces one field."""
    state = CreateFilesState()

    updated = state.with_field('prefix', 'Button')

    assert updated is not state
    assert updated.prefix == 'Button'
    assert state.prefix is None
    assert set(updated.as_dict()) == {'workspace', 'template', 'folder', 'prefix'}


def test_with_field_rejects_unknown_key():
    """The set of fields is fixed."""
    with pytest.raises(UnknownFieldError) as excinfo:
        CreateFilesState().with_field('suffix', '.ts')

    # Message is reported as-is, without KeyError quoting
    assert str(excinfo.value) == "CreateFilesState has no field 'suffix'"


def test_form_state_is_frozen():
    state = CreateFilesState()

    with pytest.raises(ValidationError):
        state.prefix = 'Button'


def test_create_files_state_completeness():
    state = CreateFilesState()
    assert state.is_complete is False

    state = (
        state.with_field('workspace', WorkspaceFolder(label='app', name='app', path=Path('/ws/app')))
        .with_field('template', TemplateItem(label='Component'))
        .with_field('folder', DestinationFolder(path=Path('/ws/app/src'), relative_path='src'))
        .with_field('prefix', '')
    )
    assert state.is_complete is False

    assert state.with_field('prefix', 'Button').is_complete is True


def test_step_definition_defaults():
    """should_skip defaults to never skipping and when_skip to nothing."""
    async def execute():
        return None

    step = StepDefinition(execute=execute)

    assert step.should_skip(CreateFilesState()) is False
    assert step.when_skip is None


def test_step_definition_requires_callable():
    with pytest.raises(ValidationError):
        StepDefinition(execute='not callable')


def test_step_position_back_affordance():
    assert StepPosition(display_step=1, display_total_steps=3).can_go_back is False
    assert StepPosition(display_step=2, display_total_steps=3).can_go_back is True


def test_prompt_result_variants():
    assert PromptResult.ok('x').outcome is Outcome.OK
    assert PromptResult.ok('x').value == 'x'
    assert PromptResult.go_back().is_go_back
    assert PromptResult.cancel().is_cancel
    assert not PromptResult.cancel().is_ok


def test_file_config_reads_dashed_alias():
    config = FileConfig.model_validate({
        'suffix': '.module.css',
        'content': ['.root {}'],
        'additional-path': 'styles',
    })

    assert config.additional_path == 'styles'
    assert config.content == ['.root {}']


def test_file_config_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        FileConfig.model_validate({'suffix': '.ts', 'extension': 'ts'})


def test_template_config_converts_legacy_suffixes():
    """Bare suffix lists become file entries."""
    config = TemplateConfig.model_validate({
        'label': 'Component',
        'description': 'Component files',
        'suffixes': ['.tsx', '.test.tsx'],
    })

    assert [f.suffix for f in config.files] == ['.tsx', '.test.tsx']
    assert all(f.content is None for f in config.files)


def test_template_config_requires_label():
    with pytest.raises(ValidationError):
        TemplateConfig.model_validate({'description': 'nameless'})


def test_template_item_uses_description_as_detail():
    config = TemplateConfig(label='Service', description='Angular service', files=[FileConfig(suffix='.service.ts')])

    item = TemplateItem.from_config(config)

    assert item.label == 'Service'
    assert item.detail == 'Angular service'
    assert item.description is None
    assert item.files[0].suffix == '.service.ts'


def test_workspace_folder_from_path(tmp_path):
    project = tmp_path / 'project'
    project.mkdir()

    folder = WorkspaceFolder.from_path(project, cwd=tmp_path)

    assert folder.label == 'project'
    assert folder.name == 'project'
    assert folder.detail == 'project'
    assert folder.path == project.resolve()

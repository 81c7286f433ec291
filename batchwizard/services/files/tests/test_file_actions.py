"""Tests for file creation actions"""
from pathlib import Path

import pytest

from batchwizard.engine.errors import FileCreationError
from batchwizard.engine.runner import MockActionRunner, RealActionRunner
from batchwizard.engine.schema import FileConfig, WorkspaceFolder
from batchwizard.services.files.actions import (
    create_files,
    create_folder_structure,
    identify_workspace,
    parse_suffixes,
)

WS = Path('/ws/app')


def workspace_runner():
    """Mock runner whose filesystem already holds the workspace root."""
    runner = MockActionRunner()
    runner.directories.update({Path('/'), Path('/ws'), WS})
    return runner


def test_create_folder_structure_creates_missing_levels():
    runner = workspace_runner()

    created = create_folder_structure(WS / 'src' / 'components', runner, base=WS)

    assert created == [WS / 'src', WS / 'src' / 'components']
    assert [c[0] for c in runner.calls] == ['make_directory', 'make_directory']


def test_create_folder_structure_keeps_existing_directories():
    runner = workspace_runner()
    runner.directories.add(WS / 'src')

    created = create_folder_structure(WS / 'src' / 'components', runner, base=WS)

    assert created == [WS / 'src' / 'components']


def test_create_folder_structure_without_base_walks_from_root():
    runner = workspace_runner()

    created = create_folder_structure(WS / 'lib', runner)

    assert created == [WS / 'lib']


def test_create_folder_structure_fails_on_file_in_path():
    """A regular file where a folder is expected is an error."""
    runner = workspace_runner()
    runner.files[WS / 'src'] = ''

    with pytest.raises(FileCreationError, match="not a directory"):
        create_folder_structure(WS / 'src' / 'components', runner, base=WS)


def test_create_files_writes_prefix_plus_suffix():
    runner = workspace_runner()
    configs = [
        FileConfig(suffix='.tsx', content=['line one', 'line two']),
        FileConfig(suffix='.test.tsx'),
    ]

    written = create_files(configs, WS / 'src', 'Button', runner)

    assert written == [WS / 'src' / 'Button.tsx', WS / 'src' / 'Button.test.tsx']
    assert runner.files[WS / 'src' / 'Button.tsx'] == 'line one\nline two'
    assert runner.files[WS / 'src' / 'Button.test.tsx'] == ''


def test_create_files_uses_additional_path():
    runner = workspace_runner()
    runner.directories.add(WS / 'src')
    configs = [FileConfig.model_validate({'suffix': '.module.css', 'additional-path': 'styles'})]

    written = create_files(configs, WS / 'src', 'Button', runner)

    assert written == [WS / 'src' / 'styles' / 'Button.module.css']
    assert ('make_directory', WS / 'src' / 'styles') in runner.calls


def test_create_files_on_disk(tmp_path):
    """Real runner creates the folder tree and files."""
    runner = RealActionRunner()
    destination = tmp_path / 'src' / 'components'
    create_folder_structure(destination, runner, base=tmp_path)

    create_files([FileConfig(suffix='.ts', content=['export {};'])], destination, 'index', runner)

    assert (destination / 'index.ts').read_text() == 'export {};'


def test_parse_suffixes_trims_and_drops_empty_items():
    files = parse_suffixes(' .ts , ,.spec.ts,')

    assert [f.suffix for f in files] == ['.ts', '.spec.ts']


def test_parse_suffixes_keeps_existing_config_by_index():
    current = [FileConfig(suffix='.tsx', content=['x'], additional_path='ui')]

    files = parse_suffixes('.jsx,.css', current)

    assert files[0].suffix == '.jsx'
    assert files[0].content == ['x']
    assert files[0].additional_path == 'ui'
    assert files[1] == FileConfig(suffix='.css')


def test_parse_suffixes_empty_input():
    assert parse_suffixes('') == []
    assert parse_suffixes(None) == []


def test_identify_workspace_picks_innermost(tmp_path):
    outer = WorkspaceFolder.from_path(tmp_path)
    inner_dir = tmp_path / 'packages' / 'ui'
    inner_dir.mkdir(parents=True)
    inner = WorkspaceFolder.from_path(inner_dir)

    found = identify_workspace(inner_dir / 'src', [outer, inner])

    assert found == inner
    assert identify_workspace(tmp_path, [outer, inner]) == outer


def test_identify_workspace_outside_any_workspace(tmp_path):
    ws_dir = tmp_path / 'ws'
    ws_dir.mkdir()

    assert identify_workspace(tmp_path / 'elsewhere', [WorkspaceFolder.from_path(ws_dir)]) is None

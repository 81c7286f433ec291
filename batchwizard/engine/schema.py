"""Pydantic models for wizard state, steps and prompt configuration."""

from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import UnknownFieldError
from .signals import PromptResult


class FormState(BaseModel):
    """
    Immutable record of the answers collected so far.

    Subclasses declare the fields of one wizard. Every update goes through
    ``with_field`` which returns a new record; the set of fields never
    changes after construction.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def with_field(self, key: str, value: Any) -> "FormState":
        """Return a copy of this record with ``key`` replaced by ``value``."""
        if key not in type(self).model_fields:
            raise UnknownFieldError(f"{type(self).__name__} has no field '{key}'")
        return self.model_copy(update={key: value})

    def as_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in type(self).model_fields}


def _never_skip(state: FormState) -> bool:
    return False


class StepDefinition(BaseModel):
    """
    One numbered step of a wizard.

    - execute: coroutine function performing the interaction; returns a
      PromptResult (or None for success) and updates state as a side effect
    - should_skip: predicate on the current state
    - when_skip: side effect run whenever the step is bypassed
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    execute: Callable[[], Awaitable[Optional[PromptResult]]]
    should_skip: Callable[[Any], bool] = Field(default=_never_skip)
    when_skip: Optional[Callable[[], None]] = None


class StepPosition(BaseModel):
    """Step numbers as shown to the user, skipped steps excluded."""

    model_config = ConfigDict(frozen=True)

    display_step: int
    display_total_steps: int

    @property
    def can_go_back(self) -> bool:
        return self.display_step > 1


class PickItem(BaseModel):
    """An entry of a single selection list."""

    label: str
    description: Optional[str] = None
    detail: Optional[str] = None


class QuickPickParameters(BaseModel):
    title: Optional[str] = None
    placeholder: Optional[str] = None
    items: List[PickItem] = Field(default_factory=list)
    active_item: Optional[PickItem] = None


class InputBoxParameters(BaseModel):
    title: Optional[str] = None
    prompt: Optional[str] = None
    placeholder: Optional[str] = None
    value: Optional[str] = None


class FileConfig(BaseModel):
    """
    One file of a template.

    Created as ``<prefix><suffix>`` inside the destination folder, or inside
    ``additional-path`` relative to it. ``content`` lines are joined with
    newlines.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    suffix: str
    content: Optional[List[str]] = None
    additional_path: Optional[str] = Field(None, alias="additional-path")


class TemplateConfig(BaseModel):
    """A template entry from the settings file."""

    model_config = ConfigDict(extra="allow")

    label: str
    description: str = ""
    files: List[FileConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _convert_legacy_suffixes(cls, data: Any) -> Any:
        # Older settings list bare suffixes instead of file entries
        if isinstance(data, dict) and "suffixes" in data and "files" not in data:
            data = dict(data)
            suffixes = data.pop("suffixes") or []
            data["files"] = [{"suffix": suffix} for suffix in suffixes]
        return data


class TemplateItem(PickItem):
    """A template as offered in the template pick list."""

    files: List[FileConfig] = Field(default_factory=list)

    @classmethod
    def from_config(cls, config: TemplateConfig) -> "TemplateItem":
        # description goes to detail so it renders on its own line
        return cls(label=config.label, detail=config.description, files=list(config.files))


class WorkspaceFolder(PickItem):
    """A workspace root the files can be created in."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path, cwd: Optional[Path] = None) -> "WorkspaceFolder":
        path = Path(path).resolve()
        cwd = Path(cwd or Path.cwd()).resolve()
        try:
            detail = str(path.relative_to(cwd)) or "."
        except ValueError:
            detail = str(path)
        return cls(label=path.name or str(path), name=path.name or str(path), detail=detail, path=path)


class DestinationFolder(BaseModel):
    path: Path
    relative_path: str


class CreateFilesState(FormState):
    """Answers collected by the create-files wizards."""

    workspace: Optional[WorkspaceFolder] = None
    template: Optional[TemplateItem] = None
    folder: Optional[DestinationFolder] = None
    prefix: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return all(
            value is not None and value != ''
            for value in (self.workspace, self.template, self.folder, self.prefix)
        )

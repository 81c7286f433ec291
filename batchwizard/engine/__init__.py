"""Wizard engine - step sequencing, skip bookkeeping and navigation."""

from .engine import WizardEngine, WizardStatus
from .errors import (
    BatchWizardError,
    FileCreationError,
    StepResultError,
    StepTableError,
    TemplateConfigError,
    UnknownFieldError,
    WizardError,
)
from .loader import TemplateLoader
from .runner import ActionRunner, RealActionRunner, MockActionRunner
from .schema import FormState, StepDefinition, StepPosition
from .signals import Outcome, PromptResult

__all__ = [
    'WizardEngine',
    'WizardStatus',
    'TemplateLoader',
    'ActionRunner',
    'RealActionRunner',
    'MockActionRunner',
    'FormState',
    'StepDefinition',
    'StepPosition',
    'Outcome',
    'PromptResult',
    'BatchWizardError',
    'WizardError',
    'StepTableError',
    'StepResultError',
    'UnknownFieldError',
    'TemplateConfigError',
    'FileCreationError',
]

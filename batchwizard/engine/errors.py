"""Exceptions raised by the wizard engine and its collaborators.

Go-back and cancel are not exceptions; prompts return them as
``PromptResult`` values. Everything here is either a defect in step
logic or a problem with the user's configuration.
"""


class BatchWizardError(Exception):
    """Base class for all create-files-batch errors."""


class WizardError(BatchWizardError):
    """A caller precondition does not hold (no workspace, unknown folder)."""


class StepTableError(BatchWizardError):
    """Step table keys are not the contiguous range 1..N."""


class StepResultError(BatchWizardError):
    """A step returned something other than a PromptResult or None."""


class UnknownFieldError(BatchWizardError):
    """with_field was called with a key the form state does not define."""


class TemplateConfigError(BatchWizardError):
    """Template settings file could not be parsed or validated."""


class FileCreationError(BatchWizardError):
    """Destination folder or files could not be created."""

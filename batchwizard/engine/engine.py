"""Core wizard engine - steps through a numbered step table."""

import logging
from enum import Enum
from typing import Dict, Generic, Optional, TypeVar

from .errors import StepResultError, StepTableError
from .schema import FormState, StepDefinition, StepPosition
from .signals import Outcome, PromptResult

logger = logging.getLogger(__name__)

# Steps are 1-indexed
INITIAL_STEP = 1

S = TypeVar("S", bound=FormState)


class WizardStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class WizardEngine(Generic[S]):
    """
    Runs a fixed table of steps to completion or abandonment.

    Key responsibilities:
    - Evaluate each step's skip predicate against the current state
    - Keep the skip table used for display numbering
    - Dispatch on the PromptResult of each executed step
    - Walk backwards over skipped steps on go-back

    One engine instance owns its state, position and skip table. Nothing
    is shared between instances.
    """

    def __init__(self, steps: Dict[int, StepDefinition], initial_state: S):
        """
        Initialize the wizard engine.

        Args:
            steps: Step table keyed 1..N
            initial_state: Form state before any step ran

        Raises:
            StepTableError: If the keys are not exactly 1..N
        """
        self._validate_steps(steps)
        self.steps: Dict[int, StepDefinition] = dict(steps)
        self._state: S = initial_state

        self.current_step = INITIAL_STEP
        self.total_steps = len(self.steps)
        self._skipped_steps: Dict[int, bool] = self._fresh_skip_table()
        self.status = WizardStatus.PENDING

    @staticmethod
    def _validate_steps(steps: Dict[int, StepDefinition]) -> None:
        if not steps:
            raise StepTableError("Step table is empty")

        expected = list(range(INITIAL_STEP, INITIAL_STEP + len(steps)))
        if sorted(steps) != expected:
            raise StepTableError(
                f"Step numbers must be contiguous from {INITIAL_STEP}, got {sorted(steps)}"
            )

        for number, step in steps.items():
            if not isinstance(step, StepDefinition):
                raise StepTableError(f"Step {number} is not a StepDefinition: {step!r}")

    def _fresh_skip_table(self) -> Dict[int, bool]:
        return {number: False for number in self.steps}

    @property
    def state(self) -> S:
        return self._state

    def update_state(self, field_key: str, field_value) -> None:
        """Replace the state with a copy that has one field updated."""
        self._state = self._state.with_field(field_key, field_value)

    @property
    def skipped_steps(self) -> Dict[int, bool]:
        return dict(self._skipped_steps)

    @property
    def skipped_steps_number(self) -> int:
        """Number of steps marked skipped in this run."""
        return sum(1 for is_skipped in self._skipped_steps.values() if is_skipped)

    @property
    def skipped_steps_until_current(self) -> int:
        """Number of steps before the current one that are marked skipped."""
        return sum(
            1 for number, is_skipped in self._skipped_steps.items()
            if is_skipped and number < self.current_step
        )

    @property
    def display_step(self) -> int:
        return self.current_step - self.skipped_steps_until_current

    @property
    def display_total_steps(self) -> int:
        return self.total_steps - self.skipped_steps_number

    @property
    def position(self) -> StepPosition:
        """Display numbers for the prompt about to be shown."""
        return StepPosition(
            display_step=self.display_step,
            display_total_steps=self.display_total_steps,
        )

    def next_step(self) -> None:
        self.current_step += 1

    def skip_step(self) -> None:
        """Mark the current step skipped and move past it."""
        self._skipped_steps[self.current_step] = True
        self.current_step += 1

    def previous_step(self) -> None:
        """
        Move to the closest earlier step that is not marked skipped.

        No-op on the first step, and when every earlier step is skipped
        (the user is already on the first step they can see). The walk stops
        there instead of landing on step 1, so step 1 is not re-evaluated and
        its when_skip does not run a second time.
        """
        target = self.current_step - 1
        while target > INITIAL_STEP and self._skipped_steps.get(target, False):
            target -= 1

        if target < INITIAL_STEP or self._skipped_steps.get(target, False):
            logger.debug("Go back from step %d ignored: no earlier visible step", self.current_step)
            return

        self.current_step = target

    async def run_to_completion(self) -> S:
        """
        Step through the table until it is done or the user cancels.

        Returns:
            The accumulated state, complete or partial. The caller decides
            whether the required fields are populated.
        """
        self.current_step = INITIAL_STEP
        self.total_steps = len(self.steps)
        self._skipped_steps = self._fresh_skip_table()
        self.status = WizardStatus.RUNNING

        while self.current_step <= self.total_steps:
            step = self.steps[self.current_step]

            if step.should_skip(self._state):
                logger.debug("Skipping step %d", self.current_step)
                if step.when_skip is not None:
                    step.when_skip()
                self.skip_step()
                continue

            # Shown again after being skipped earlier in this run
            if self._skipped_steps[self.current_step]:
                self._skipped_steps[self.current_step] = False

            logger.debug(
                "Executing step %d (display %d/%d)",
                self.current_step, self.display_step, self.display_total_steps,
            )
            result = self._as_result(await step.execute())

            if result.outcome is Outcome.OK:
                self.next_step()
            elif result.outcome is Outcome.GO_BACK:
                logger.debug("Go back requested at step %d", self.current_step)
                self.previous_step()
            else:
                logger.debug("Wizard cancelled at step %d", self.current_step)
                self.status = WizardStatus.ABORTED
                return self._state

        self.status = WizardStatus.COMPLETED
        return self._state

    def _as_result(self, result: Optional[PromptResult]) -> PromptResult:
        if result is None:
            return PromptResult.ok()
        if not isinstance(result, PromptResult):
            raise StepResultError(
                f"Step {self.current_step} returned {type(result).__name__}, expected PromptResult or None"
            )
        return result

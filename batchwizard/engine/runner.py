"""ActionRunner interface - prompts and side effects go here."""

import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional

from .schema import InputBoxParameters, PickItem, QuickPickParameters, StepPosition
from .signals import PromptResult

# Scripted answers for MockActionRunner
BACK = "<back>"
CANCEL = "<cancel>"

BACK_COMMANDS = ("<", "back")


class ActionRunner(ABC):
    """Interface for prompting the user and executing side effects."""

    @abstractmethod
    async def pick_one(self, params: QuickPickParameters, position: StepPosition) -> PromptResult:
        """Ask the user to select one item.

        Args:
            params: Title, placeholder, items and pre-selected item
            position: Display step numbers; back is offered when can_go_back

        Returns:
            ok(item), go_back() or cancel()
        """
        pass

    @abstractmethod
    async def input_text(self, params: InputBoxParameters, position: StepPosition) -> PromptResult:
        """Ask the user for free text.

        Args:
            params: Title, prompt text, placeholder and default value
            position: Display step numbers; back is offered when can_go_back

        Returns:
            ok(text), go_back() or cancel()
        """
        pass

    @abstractmethod
    def display(self, message: str) -> None:
        """Display a message to the user."""
        pass

    @abstractmethod
    def make_directory(self, path: Path) -> None:
        """Create a single directory (parent must exist)."""
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        pass

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def write_file(self, path: Path, content: str) -> None:
        """Write content to a file, replacing it if present."""
        pass


class RealActionRunner(ActionRunner):
    """Real implementation - terminal prompts and filesystem writes."""

    def __init__(self, verbose: bool = False):
        """Initialize with optional verbose mode.

        Args:
            verbose: If True, show paths as they are written
        """
        self.verbose = verbose
        # Check for verbose environment variable as well
        if os.environ.get('CREATE_FILES_BATCH_VERBOSE'):
            self.verbose = True

    @contextmanager
    def _prompt_session(self, title: Optional[str], position: StepPosition) -> Iterator[None]:
        """Print the prompt header and always close the prompt block."""
        header = f"Step {position.display_step}/{position.display_total_steps}"
        if title:
            header = f"{header} - {title}"
        print(header)
        if position.can_go_back:
            print("  (type '<' to go back)")
        try:
            yield
        finally:
            print()  # Blank line after every prompt

    async def _read_line(self, prompt: str) -> Optional[str]:
        """Read one line on the main thread; None on EOF or Ctrl-C."""
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    async def pick_one(self, params: QuickPickParameters, position: StepPosition) -> PromptResult:
        with self._prompt_session(params.title, position):
            if params.placeholder:
                print(params.placeholder)
            for i, item in enumerate(params.items, 1):
                marker = '*' if params.active_item is not None and item.label == params.active_item.label else ' '
                line = f" {marker}{i}. {item.label}"
                if item.description:
                    line = f"{line}  {item.description}"
                print(line)
                if item.detail:
                    print(f"      {item.detail}")

            default_index = self._active_index(params)
            while True:
                default_display = f" [{default_index + 1}]" if default_index is not None else ""
                response = await self._read_line(f"Choice{default_display}: ")
                if response is None:
                    return PromptResult.cancel()

                response = response.strip()
                if position.can_go_back and response.lower() in BACK_COMMANDS:
                    return PromptResult.go_back()
                if not response and default_index is not None:
                    return PromptResult.ok(params.items[default_index])

                selected = self._match_item(params.items, response)
                if selected is not None:
                    return PromptResult.ok(selected)
                print(f"Error: Invalid choice: {response or '(empty)'}")

    @staticmethod
    def _active_index(params: QuickPickParameters) -> Optional[int]:
        if params.active_item is None:
            return None
        for i, item in enumerate(params.items):
            if item.label == params.active_item.label:
                return i
        return None

    @staticmethod
    def _match_item(items: List[PickItem], response: str) -> Optional[PickItem]:
        if response.isdigit():
            index = int(response) - 1
            if 0 <= index < len(items):
                return items[index]
            return None
        for item in items:
            if item.label.lower() == response.lower():
                return item
        return None

    async def input_text(self, params: InputBoxParameters, position: StepPosition) -> PromptResult:
        with self._prompt_session(params.title, position):
            if params.prompt:
                print(params.prompt.rstrip())
            label = params.placeholder or "Value"
            if params.value:
                label = f"{label} [{params.value}]"
            response = await self._read_line(f"{label}: ")
            if response is None:
                return PromptResult.cancel()

            stripped = response.strip()
            if position.can_go_back and stripped.lower() in BACK_COMMANDS:
                return PromptResult.go_back()
            if not stripped and params.value:
                return PromptResult.ok(params.value)
            return PromptResult.ok(stripped)

    def display(self, message: str) -> None:
        """Print message to stdout."""
        print(message)

    def make_directory(self, path: Path) -> None:
        if self.verbose:
            print(f"[VERBOSE] Creating directory: {path}")
        Path(path).mkdir()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def path_exists(self, path: Path) -> bool:
        return Path(path).exists()

    def write_file(self, path: Path, content: str) -> None:
        """Write content to a file."""
        if self.verbose:
            print(f"[VERBOSE] Writing file: {path}")
        with open(path, 'w') as f:
            f.write(content)


class MockActionRunner(ActionRunner):
    """Mock for testing - records calls."""

    def __init__(self):
        self.calls = []
        self.input_queue = []  # Pre-scripted user answers for testing
        self.directories = set()
        self.files = {}

    def _next_answer(self) -> Any:
        if self.input_queue:
            return self.input_queue.pop(0)
        # Running out of answers behaves like closing the prompt
        return CANCEL

    async def pick_one(self, params: QuickPickParameters, position: StepPosition) -> PromptResult:
        """Answer with the next scripted value: index, label, BACK or CANCEL."""
        self.calls.append(('pick_one', params, position))
        answer = self._next_answer()

        if answer == CANCEL:
            return PromptResult.cancel()
        if answer == BACK:
            return PromptResult.go_back()
        if answer is None:
            return PromptResult.ok(params.active_item)
        if isinstance(answer, int):
            return PromptResult.ok(params.items[answer])
        for item in params.items:
            if item.label == answer:
                return PromptResult.ok(item)
        raise ValueError(f"Scripted answer {answer!r} matches no item")

    async def input_text(self, params: InputBoxParameters, position: StepPosition) -> PromptResult:
        """Answer with the next scripted text; None accepts the default value."""
        self.calls.append(('input_text', params, position))
        answer = self._next_answer()

        if answer == CANCEL:
            return PromptResult.cancel()
        if answer == BACK:
            return PromptResult.go_back()
        if answer is None:
            return PromptResult.ok(params.value or '')
        return PromptResult.ok(answer)

    def display(self, message: str) -> None:
        """Capture display call for test verification."""
        self.calls.append(('display', message))

    def make_directory(self, path: Path) -> None:
        self.calls.append(('make_directory', Path(path)))
        self.directories.add(Path(path))

    def is_directory(self, path: Path) -> bool:
        return Path(path) in self.directories

    def path_exists(self, path: Path) -> bool:
        return Path(path) in self.directories or Path(path) in self.files

    def write_file(self, path: Path, content: str) -> None:
        """Record write_file call for test verification."""
        self.calls.append(('write_file', Path(path), content))
        self.files[Path(path)] = content

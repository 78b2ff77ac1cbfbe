"""
core/context.py

The pipeline capability handed to the request runner.
Anything that can read inputs, write log lines and outputs, and mark the run
as failed satisfies it (see tools/actions.py for the GitHub Actions one).
"""

from typing import Protocol


class PipelineContext(Protocol):
    @property
    def failed(self) -> bool: ...

    def get_input(self, name: str, required: bool = False) -> str: ...

    def get_multiline_input(self, name: str) -> list[str]: ...

    def get_boolean_input(self, name: str) -> bool: ...

    def debug(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def set_output(self, name: str, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...

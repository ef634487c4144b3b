"""CLI utilities for dual-mode output (human-friendly + machine-readable).

- Human mode (default): one name per line on stdout, errors on stderr
- JSON mode (--json): a single JSON document on stdout

Example:
    out = Output(console=console, err_console=err_console, json_mode=False)
    out.names(["Nora Castillo", "Dean Webb"])
    raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr
from rich.console import Console
from rich.markup import escape

from ..core.models import Family


class ExitCode:
    """Standardized exit codes for the CLI.

        0 = Success
        1 = Argument error (conflicting flags, too many amounts)
        2 = Usage error reported by the argument parser (non-numeric amount)
        3 = Name corpus could not be loaded
        4 = Sampling error
    """

    SUCCESS = 0
    ARGUMENT_ERROR = 1
    USAGE_ERROR = 2
    INITIALIZATION_ERROR = 3
    SAMPLING_ERROR = 4


class Output(BaseModel):
    """Dual-mode output handler for the CLI."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    err_console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {
            "status": "success",
            "errors": [],
        }

    def names(self, names: list[str]) -> None:
        """Output generated names, one per line in human mode."""
        if self.json_mode:
            self._data["names"] = list(names)
        else:
            for name in names:
                self.console.print(name, markup=False, highlight=False)

    def family(self, family: Family) -> None:
        """Output a family: the member names, plus its structure in JSON mode."""
        if self.json_mode:
            self._data["surname"] = family.surname
            self._data["father"] = family.father.first_name
            self._data["mother"] = family.mother.first_name
            self._data["children"] = [child.first_name for child in family.children]
        self.names(family.names())

    def error(
        self,
        message: str,
        *,
        suggestion: str | None = None,
        exit_code: int = ExitCode.ARGUMENT_ERROR,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.err_console.print(f"[red]✗[/red] {escape(message)}")
            if suggestion:
                self.err_console.print(f"  [dim]→ {escape(suggestion)}[/dim]")

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        """
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2))

        return self._exit_code

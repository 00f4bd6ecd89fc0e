"""Python segment: interpreter version and active virtual environment."""

from __future__ import annotations

from pi.prompt.environment import Environment, base

PYTHON_COMMANDS = ("python3", "python")

# Checked in order; the first non-empty value names the environment.
VIRTUAL_ENV_VARS = (
    "VIRTUAL_ENV",
    "CONDA_ENV_PATH",
    "CONDA_DEFAULT_ENV",
    "PYENV_VERSION",
)


class PythonSegment:
    """Shows ``<venv> <version>`` when the working directory holds Python files."""

    def __init__(self, env: Environment, display_virtual_env: bool = True) -> None:
        self.env = env
        self.display_virtual_env = display_virtual_env
        self.version = ""
        self.venv_name = ""

    def enabled(self) -> bool:
        if not self.env.has_files("*.py"):
            return False

        for command in PYTHON_COMMANDS:
            output = self.env.run_command(command, "--version")
            if output:
                self.version = output.removeprefix("Python").strip()
                break
        else:
            return False

        for var in VIRTUAL_ENV_VARS:
            value = self.env.getenv(var)
            if value:
                self.venv_name = base(value)
                break
        return True

    def string(self) -> str:
        if not self.venv_name or not self.display_virtual_env:
            return self.version
        return f"{self.venv_name} {self.version}"

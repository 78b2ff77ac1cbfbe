"""
tools/actions.py

GitHub Actions implementation of the pipeline context.
- Inputs are read from INPUT_<NAME> environment variables
- Log lines and failures are workflow commands on stdout
- Outputs are appended to the file named by GITHUB_OUTPUT
"""

import os
import sys
import uuid

from core.inputs import InputError, parse_bool_input


def _escape_data(value):
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value):
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsContext:
    def __init__(self, env=None, stream=None):
        self.env = os.environ if env is None else env
        self.stream = stream or sys.stdout
        self._failed = False

    @property
    def failed(self):
        return self._failed

    @property
    def exit_code(self):
        return 1 if self._failed else 0

    def _write(self, line):
        self.stream.write(line + "\n")
        self.stream.flush()

    def _command(self, command, message, **properties):
        props = ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items())
        head = f"::{command} {props}" if props else f"::{command}"
        self._write(f"{head}::{_escape_data(message)}")

    def get_input(self, name, required=False):
        key = "INPUT_" + name.replace(" ", "_").upper()
        value = self.env.get(key, "")
        if required and not value:
            raise InputError(f"Input required and not supplied: {name}")
        return value.strip()

    def get_multiline_input(self, name):
        return [line for line in self.get_input(name).split("\n") if line != ""]

    def get_boolean_input(self, name):
        return parse_bool_input(name, self.get_input(name))

    def debug(self, message):
        self._command("debug", message)

    def info(self, message):
        self._write(message)

    def warning(self, message):
        self._command("warning", message)

    def set_output(self, name, value):
        path = self.env.get("GITHUB_OUTPUT", "")
        if not path:
            self._write("")
            self._command("set-output", value, name=name)
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message):
        self._failed = True
        self._command("error", message)

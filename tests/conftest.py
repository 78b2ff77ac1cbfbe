import pytest


class RecordingContext:
    """In-memory pipeline context that records everything the runner does."""

    def __init__(self, inputs=None):
        self.inputs = inputs or {}
        self.logs: list[tuple[str, str]] = []
        self.outputs: dict[str, str] = {}
        self.output_calls = 0
        self.failures: list[str] = []

    @property
    def failed(self):
        return bool(self.failures)

    def get_input(self, name, required=False):
        return self.inputs.get(name, "").strip()

    def get_multiline_input(self, name):
        return [line for line in self.get_input(name).split("\n") if line]

    def get_boolean_input(self, name):
        from core.inputs import parse_bool_input

        return parse_bool_input(name, self.get_input(name))

    def debug(self, message):
        self.logs.append(("debug", message))

    def info(self, message):
        self.logs.append(("info", message))

    def warning(self, message):
        self.logs.append(("warning", message))

    def set_output(self, name, value):
        self.output_calls += 1
        self.outputs[name] = value

    def set_failed(self, message):
        self.failures.append(message)

    def messages(self, level):
        return [m for lvl, m in self.logs if lvl == level]


class FakeResponse:
    def __init__(self, status_code, text="", headers=None):
        self.status_code = status_code
        self._text = text
        self.headers = headers or {"content-type": "text/plain"}
        self.text_reads = 0
        self.closed = False

    @property
    def text(self):
        self.text_reads += 1
        return self._text

    def close(self):
        self.closed = True


class ScriptedSender:
    """Stands in for util.http.send_request, replaying canned responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls: list[dict] = []

    def __call__(self, method, url, headers=None, body=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body})
        item = self.responses[min(len(self.calls), len(self.responses)) - 1]
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def context():
    return RecordingContext()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def fake_sleep(sleeps):
    return sleeps.append


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def sender():
    return ScriptedSender


@pytest.fixture
def make_context():
    return RecordingContext

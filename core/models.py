"""
core/models.py

Records passed through a single request run.
- RequestConfig: what to send and how to retry (built once from action inputs)
- ResponseOutcome: what the last attempt returned (reported once per run)
"""

from dataclasses import asdict, dataclass, field

from util.jsonfmt import to_json


@dataclass(frozen=True)
class RequestConfig:
    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    retry_count: int = 0
    retry_delay: int = 0  # milliseconds
    fail_on_error: bool = False

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ResponseOutcome:
    status: int
    success: bool
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    id: str = ""
    attempts: int = 1

    def outputs(self):
        """Return the named outputs as the strings the pipeline receives."""
        return {
            "status": str(self.status),
            "success": "true" if self.success else "false",
            "headers": to_json(self.headers),
            "body": self.body,
            "id": self.id,
        }

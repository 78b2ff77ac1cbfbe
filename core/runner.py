"""
core/runner.py

The request runner: send, retry failing statuses with a fixed delay, then
report exactly one outcome for the last attempt.

Only responses with status >= 400 are retried. Network errors raised by the
sender are not caught here; the entrypoint turns them into a failed run.
"""

import time

from core.context import PipelineContext
from core.models import RequestConfig, ResponseOutcome
from util.http import send_request
from util.jsonfmt import extract_id, to_json
from util.logs import get_logger


logger = get_logger(__name__)


def is_success(status):
    return bool(status) and status < 400


class RequestRunner:
    def __init__(self, context: PipelineContext, send=send_request, sleep=time.sleep):
        self.context = context
        self.send = send
        self.sleep = sleep

    def run(self, config: RequestConfig) -> ResponseOutcome:
        """Perform up to retry_count + 1 attempts and report the last one."""
        remaining = config.retry_count
        attempts = 0
        while True:
            response = self.send(
                config.method,
                config.url,
                headers=config.headers,
                body=config.body,
            )
            attempts += 1
            status = response.status_code
            success = is_success(status)

            if not success:
                if remaining > 0:
                    self.context.warning(
                        f"Request failed with status code {status}. Retries remaining: {remaining}."
                    )
                    response.close()
                    if config.retry_delay > 0:
                        self.context.info(f"Delaying for {config.retry_delay}ms...")
                        self.sleep(config.retry_delay / 1000)
                    remaining -= 1
                    continue
                message = f"Request failed with status code {status}. No retries remaining."
                if config.fail_on_error:
                    self.context.set_failed(message)
                else:
                    self.context.warning(message)

            body = response.text
            outcome = ResponseOutcome(
                status=status,
                success=success,
                headers=dict(response.headers),
                body=body,
                id=self._extract_id(body),
                attempts=attempts,
            )
            self._report(outcome)
            return outcome

    def _extract_id(self, body):
        try:
            return extract_id(body)
        except (ValueError, RecursionError):
            logger.warning("Failed to parse response body as JSON", body=body[:200])
            self.context.debug("Response body is not JSON; id left empty")
            return ""

    def _report(self, outcome):
        outputs = outcome.outputs()
        self.context.info(
            "Outputs: "
            + to_json(
                {
                    "status": outcome.status,
                    "success": outcome.success,
                    "headers": outcome.headers,
                    "body": outcome.body,
                }
            )
        )
        for name, value in outputs.items():
            self.context.set_output(name, value)


def run_request(config, context, **kwargs):
    return RequestRunner(context, **kwargs).run(config)

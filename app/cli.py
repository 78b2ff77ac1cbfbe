"""
app/cli.py

Process entrypoint for the action.
- Sets up diagnostics logging
- Reads inputs, runs the request, reports outputs
- Routes anything that escapes the run (bad inputs, network errors) to a
  failed run instead of a traceback

Environment:
- LOG_LEVEL, LOG_FORMAT: see util/logs.py
- HTTP_TIMEOUT: see util/http.py
"""

import sys

from core.inputs import read_config
from core.runner import RequestRunner
from tools.actions import ActionsContext
from util.logs import get_logger, setup_logging


logger = get_logger(__name__)


def main(context=None, runner_factory=RequestRunner):
    """Run the action once and return the process exit code."""
    setup_logging()
    if context is None:
        context = ActionsContext()
    try:
        config = read_config(context)
        runner_factory(context).run(config)
    except Exception as exc:  # surfaced as a failed run
        logger.error("Run aborted", error=str(exc), exc_info=True)
        context.set_failed(str(exc))
    return 1 if context.failed else 0


if __name__ == "__main__":
    sys.exit(main())

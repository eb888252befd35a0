"""Demos of how early termination and return interact with try/except/finally."""

import os
import sys

import structlog

logger = structlog.get_logger()


def finally_exit_demo(graceful: bool = False) -> None:
    """Exit the process from inside a try block.

    ``os._exit`` ends the process immediately, so neither the except nor the
    finally clause runs. ``sys.exit`` raises ``SystemExit`` instead: it is not
    an ``Exception`` so the except clause is skipped, but finally still runs
    before the exception leaves this function.

    Args:
        graceful: If True, exit with ``sys.exit`` instead of ``os._exit``.
    """
    logger.debug("Entering guarded block", graceful=graceful)
    try:
        # os._exit skips interpreter shutdown, which would otherwise flush stdout
        print("In try block", flush=True)
        if graceful:
            sys.exit(0)
        else:
            os._exit(0)
    except Exception:
        print("In catch block")
    finally:
        print("In finally block")


def finally_return_demo(fault: bool = False) -> str:
    """Return from a try or except clause with a finally clause pending.

    The finally clause prints before the caller receives the value.

    Args:
        fault: If True, divide by zero inside the try block.

    Returns:
        "Returned from try", or "Returned from catch" when the fault was raised
    """
    logger.debug("Entering guarded block", fault=fault)
    try:
        print("In try block")
        if fault:
            _ = 10 / 0
        return "Returned from try"
    except ZeroDivisionError as e:
        logger.debug("Caught fault", error=str(e))
        print("In catch block")
        return "Returned from catch"
    finally:
        print("In finally block")

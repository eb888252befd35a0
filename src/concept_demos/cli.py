"""CLI for concept-demos."""

import sys
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from concept_demos.config import DEFAULT_LOG_LEVEL, get_config
from concept_demos.config_commands import config_app
from concept_demos.guarded import finally_exit_demo, finally_return_demo
from concept_demos.relationships import aggregation_demo, association_demo, composition_demo

logger = structlog.get_logger()

app = App(
    help="Concept Demos - try/finally control flow and object relationships",
)

app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level, writing to stderr."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def resolve_log_level(log_level: str | None) -> str:
    """Pick the log level from the command line, then config, then the default."""
    if log_level is not None:
        return log_level

    return get_config().get_log_level()


@app.command
def finally_exit(graceful: bool = False) -> None:
    """Exit from inside a try block; finally only runs for a graceful exit."""
    logger.info("Running demo", demo="finally-exit", graceful=graceful)
    finally_exit_demo(graceful=graceful)


@app.command
def finally_return(fault: bool = False) -> None:
    """Return from try or except; finally runs before the value is delivered."""
    logger.info("Running demo", demo="finally-return", fault=fault)
    print(finally_return_demo(fault=fault))


@app.command
def aggregation() -> None:
    """A library referencing books it does not own."""
    logger.info("Running demo", demo="aggregation")
    aggregation_demo()


@app.command
def association() -> None:
    """A teacher associated with independent students."""
    logger.info("Running demo", demo="association")
    association_demo()


@app.command
def composition() -> None:
    """A house that creates and owns its room."""
    logger.info("Running demo", demo="composition")
    composition_demo()


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] | None = None,
) -> None:
    """Main entry point with global options."""
    # Reading config logs, so stderr logging must be in place first
    configure_logging(DEFAULT_LOG_LEVEL)
    try:
        level = resolve_log_level(log_level)
    except ValueError as e:
        logger.critical("Ignoring configured log level", error=str(e))
        level = DEFAULT_LOG_LEVEL
    configure_logging(level)
    app(tokens)


if __name__ == "__main__":
    app.meta()

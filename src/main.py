import logging
import signal
import sys
from typing import Optional

from rich.console import Console

from app_config import AppConfigurationError, LoggingSettings, load_app_config
from glyphs import GlyphAtlas
from runtime import DisplayStyle, SessionLoop
from terminal import (
    ConsoleSurface,
    EventChannel,
    InputEventSource,
    RawMode,
    StdinKeyPoller,
    TerminalIOError,
)


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Configure logging for the application.

    The terminal belongs to the display while a session runs, so records only
    go to a log file when one is configured.
    """
    settings = settings or LoggingSettings()
    handlers: list[logging.Handler] = []
    if settings.file:
        handlers.append(logging.FileHandler(settings.file, encoding="utf-8"))
    else:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=settings.level_number,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("flying_tomato")


def setup_signal_handlers() -> None:
    """Turn SIGTERM into SystemExit so the session cleanup still runs."""

    def signal_handler(signum: int, frame) -> None:
        raise SystemExit(128 + signum)

    signal.signal(signal.SIGTERM, signal_handler)


def main() -> int:
    """Run the countdown display until it completes or the user quits."""
    error_console = Console(stderr=True)

    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        error_console.print(f"Configuration error: {error}", style="bold red", highlight=False)
        return 1

    try:
        logger = setup_logging(app_config.logging)
    except OSError as error:
        error_console.print(f"Could not open log file: {error}", style="bold red", highlight=False)
        return 1

    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)

    setup_signal_handlers()

    display = app_config.display
    style = DisplayStyle(
        title=display.title,
        title_color=display.title_color,
        border_color=display.border_color,
        header_color=display.header_color,
    )

    channel = EventChannel()
    input_source = InputEventSource(
        channel,
        StdinKeyPoller(),
        logger=logging.getLogger("input"),
    )
    session = SessionLoop(
        surface=ConsoleSurface(logger=logging.getLogger("terminal")),
        input_mode=RawMode(logger=logging.getLogger("terminal")),
        channel=channel,
        atlas=GlyphAtlas(),
        style=style,
        logger=logging.getLogger("session"),
    )

    try:
        input_source.start()
        result = session.run()
    except KeyboardInterrupt:
        logger.info("Shutdown requested by keyboard interrupt.")
        return 0
    except TerminalIOError as error:
        logger.error("Terminal error: %s", error)
        error_console.print(f"Terminal error: {error}", style="bold red", highlight=False)
        return 1

    if result.error is not None:
        error_console.print(result.error, style="bold red", highlight=False)
        return 1

    logger.info("Session finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

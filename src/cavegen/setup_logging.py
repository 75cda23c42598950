import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s | %(message)s"

def setup_logging(level: str = "INFO") -> None:
    """
    Console logging (stderr) for the CLI and tools. The library itself only creates
    module loggers and never configures handlers.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # drop earlier handlers so repeated calls don't duplicate lines
    )

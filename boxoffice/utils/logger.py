import logging
import sys

# Per-request connection chatter from requests' transport
QUIET_LOGGERS = ("urllib3",)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure stdout logging for the dashboard process.

    Streamlit installs its own handlers on the "streamlit" logger only, so the
    root configuration here covers the boxoffice modules.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("boxoffice")

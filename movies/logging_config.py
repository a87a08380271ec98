import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    level_value = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        # already set up (repeated CLI invocations in one process)
        for h in list(root.handlers):
            root.removeHandler(h)

    root.setLevel(level_value)
    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(sh)

    logging.getLogger("httpx").setLevel(logging.WARNING)

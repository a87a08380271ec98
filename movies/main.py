from movies.config import get_settings
from movies.logging_config import setup_logging
from movies.server.api import create_app

setup_logging(get_settings().log_level)

app = create_app()

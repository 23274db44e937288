# Quiet period used when none is given, in milliseconds
DEFAULT_WAIT_MS = 400

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

LOG_LEVEL_ENV_VAR = "XMLRPC_PROXYGEN_LOG_LEVEL"
DEFAULT_LOGLEVEL = "WARNING"
VERBOSE_LOGLEVEL = "DEBUG"

LOG_FORMAT = "xmlrpc-proxygen: {level}: {message}"

""" Logging configuration for the focus_window command-line tools.

Passed to logging.config.dictConfig() by each tool's main(). Library code
never configures logging itself; applications that embed FocusBuffer set up
their own handlers for the focus_window loggers.

For a detailed description of the settings, see the Python documentation:
https://docs.python.org/3/library/logging.config.html#logging-config-dictschema
"""

LOGGING = {
    'root': {'handlers': ['console'],
             'level': 'WARNING'},
    'loggers': {
        "__main__": {"level": "INFO"},

        # Set to DEBUG to see every merge, trim and focus change.
        "focus_window": {"level": "INFO"},
    },

    # This lets you call logging.getLogger() before the configuration is done.
    'disable_existing_loggers': False,

    'version': 1,
    'formatters': {'basic': {
        'format': '%(asctime)s[%(levelname)s]%(name)s.%(funcName)s(): %(message)s',
        'datefmt': '%Y-%m-%d %H:%M:%S'}},
    'handlers': {'console': {'class': 'logging.StreamHandler',
                             'level': 'DEBUG',
                             'formatter': 'basic'}},
}

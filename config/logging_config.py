import logging
import logging.config
from config.main_config import LOG_FILE, LOG_LEVEL


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True


def build_logging_config(level: str = LOG_LEVEL, log_file: str = LOG_FILE) -> dict:
    handlers = {
        'console': {
            'level': level,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    }
    # File output is optional, only when a path is configured
    if log_file:
        handlers['file'] = {
            'level': level,
            'class': 'logging.FileHandler',
            'filename': log_file,
            'formatter': 'standard',
            'filters': ['user_filter']
        }
    handler_names = list(handlers)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': handlers,
        'loggers': {
            'use_cases': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            'handlers': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            'storage': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            '': {
                'handlers': handler_names,
                'level': level,
                'propagate': True,
            }
        }
    }


def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE) -> None:
    logging.config.dictConfig(build_logging_config(level, log_file))

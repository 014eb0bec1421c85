import logging
from config.logging_config import UserFilter, build_logging_config


def test_user_filter_sets_default_user():
    record = logging.LogRecord('use_cases', logging.INFO, __file__, 1, 'message', None, None)

    assert UserFilter().filter(record)
    assert record.user == 'SYSTEM'


def test_user_filter_keeps_given_user():
    record = logging.LogRecord('use_cases', logging.INFO, __file__, 1, 'message', None, None)
    record.user = 'admin'

    UserFilter().filter(record)
    assert record.user == 'admin'


def test_file_handler_only_when_path_given(tmp_path):
    assert 'file' not in build_logging_config('INFO', None)['handlers']

    config = build_logging_config('DEBUG', str(tmp_path / 'catalog.log'))
    assert config['handlers']['file']['filename'].endswith('catalog.log')
    assert config['loggers']['storage']['handlers'] == ['console', 'file']
    assert config['loggers']['use_cases']['level'] == 'DEBUG'

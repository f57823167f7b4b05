"""
Support Tests
=============
Config lookup, the event dispatcher and logging configuration.
"""
import json
import logging
import sys

import pytest

from sanicview.logging import JSONFormatter, LoggerConfig, SensitiveDataFilter, getLogger
from sanicview.support import Config, EventDispatcher


@pytest.fixture
def config_package(tmp_path, monkeypatch):
    """A throwaway config/ package importable as `config`."""
    package = tmp_path / 'config'
    package.mkdir()
    (package / '__init__.py').write_text('', encoding='utf-8')
    (package / 'template.py').write_text(
        "TEMPLATE_DIR = 'resources/views'\n"
        "OPTIONS = {'Autoescape': True}\n",
        encoding='utf-8'
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    for name in [m for m in sys.modules if m == 'config' or m.startswith('config.')]:
        monkeypatch.delitem(sys.modules, name)
    yield package
    for name in [m for m in sys.modules if m == 'config' or m.startswith('config.')]:
        sys.modules.pop(name, None)


# ============================================================================
# Config
# ============================================================================

class TestConfig:

    def test_missing_file_returns_default(self):
        assert Config.get('nothere.KEY', 'fallback') == 'fallback'
        assert Config.has('nothere.KEY') is False

    def test_runtime_override_is_case_insensitive(self):
        Config.set('Response.OUTPUT_LATE', False)

        assert Config.get('response.output_late') is False
        assert Config.get('RESPONSE.Output_Late', True) is False

    def test_clear_runtime_overrides(self):
        Config.set('response.OUTPUT_LATE', False)
        Config.clear_runtime_overrides()

        assert Config.get('response.OUTPUT_LATE', True) is True

    def test_reads_module_attributes_and_nested_dicts(self, config_package):
        assert Config.get('template.template_dir') == 'resources/views'
        assert Config.get('template.OPTIONS.autoescape') is True
        assert Config.get('template.OPTIONS.missing', 'x') == 'x'
        assert Config.all('template').TEMPLATE_DIR == 'resources/views'

    def test_reload_picks_up_changes(self, config_package):
        assert Config.get('template.TEMPLATE_DIR') == 'resources/views'
        (config_package / 'template.py').write_text("TEMPLATE_DIR = 'views'\n", encoding='utf-8')

        Config.reload('template')

        assert Config.get('template.TEMPLATE_DIR') == 'views'


# ============================================================================
# Events
# ============================================================================

class TestEventDispatcher:

    def test_listeners_called_in_order_with_subject(self):
        dispatcher = EventDispatcher()
        calls = []
        dispatcher.listen('output', lambda subject: calls.append(('first', subject)))
        dispatcher.listen('output', lambda subject: calls.append(('second', subject)))

        dispatcher.trigger('output', 'composer')

        assert calls == [('first', 'composer'), ('second', 'composer')]

    def test_trigger_without_listeners_is_noop(self):
        EventDispatcher().trigger('output', object())

    def test_forget_removes_listeners(self):
        dispatcher = EventDispatcher()
        dispatcher.listen('output', print)
        assert dispatcher.has_listeners('output')

        dispatcher.forget('output')

        assert not dispatcher.has_listeners('output')

    def test_non_callable_listener_rejected(self):
        with pytest.raises(TypeError):
            EventDispatcher().listen('output', 'nope')

    def test_listener_errors_propagate(self):
        dispatcher = EventDispatcher()

        def fail(subject):
            raise RuntimeError('listener failed')

        dispatcher.listen('output', fail)

        with pytest.raises(RuntimeError):
            dispatcher.trigger('output')


# ============================================================================
# Logging
# ============================================================================

def make_record(msg, *args, **extra):
    record = logging.LogRecord('sanicview.test', logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogging:

    def test_header_values_redacted(self):
        record = make_record('Header queued: %s', 'Authorization: Bearer abc.def')

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == 'Header queued: Authorization: [REDACTED]'

    def test_cookie_headers_and_json_fields_redacted(self):
        cookie = make_record('Header sent: Set-Cookie: session=abc; HttpOnly')
        body = make_record('Body: {"token": "xyz", "name": "ana"}')

        SensitiveDataFilter().filter(cookie)
        SensitiveDataFilter().filter(body)

        assert cookie.msg == 'Header sent: Set-Cookie: [REDACTED]'
        assert body.msg == 'Body: {"token": "[REDACTED]", "name": "ana"}'

    def test_json_formatter_includes_extra_fields(self):
        record = make_record('Rendered %s', 'users/show', template='users/show')

        data = json.loads(JSONFormatter().format(record))

        assert data['message'] == 'Rendered users/show'
        assert data['level'] == 'INFO'
        assert data['template'] == 'users/show'

    def test_setup_logger_with_file(self, tmp_path):
        log_file = tmp_path / 'logs' / 'sanicview.log'
        Config.set('app.APP_ENV', 'development')

        logger = LoggerConfig.setup_logger('sanicview.test.file', format_type='text', log_file=log_file)
        logger.debug('Header queued: %s', 'Cookie: id=1')
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        content = log_file.read_text(encoding='utf-8')
        assert 'Cookie: [REDACTED]' in content
        assert 'id=1' not in content

    def test_setup_logger_without_file_logs_to_console(self):
        logger = LoggerConfig.setup_logger('sanicview.test.console')

        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    @pytest.mark.parametrize('env, level', [
        ('production', logging.WARNING),
        ('Testing', logging.ERROR),
        ('local', logging.INFO),
    ])
    def test_level_by_environment(self, env, level):
        assert LoggerConfig.get_level_by_environment(env) == level

    def test_get_logger(self):
        assert getLogger('sanicview.http') is logging.getLogger('sanicview.http')

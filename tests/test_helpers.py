"""
Template Helper Tests
=====================
Registration and naming rules of HelperRegistry, and the call protocol of
HelperInvoker (raw vs escaped results, silent misses).
"""
import pytest
from markupsafe import escape

from sanicview.exceptions import InvalidHelperError
from sanicview.view.helpers import (
    Helper,
    HelperInvoker,
    HelperRegistry,
    HelperResult,
    canonical_name,
)


class BarFunction(Helper):
    NAME = 'Namespace\\BarFunction'

    def call(self, context, args):
        return 'bar'


class BoldHelper(Helper):
    NAME = 'bold'

    def __init__(self, raw: bool):
        self.RAW_OUTPUT = raw
        self.calls = []

    def call(self, context, args):
        self.calls.append((context, args))
        return '<b>x</b>'


class NamelessHelper(Helper):
    def call(self, context, args):
        return ''


# ============================================================================
# Naming
# ============================================================================

class TestCanonicalName:

    @pytest.mark.parametrize('declared, expected', [
        ('Namespace\\BarFunction', 'bar'),
        ('Namespace\\Sub\\FooFunction', 'foo'),
        ('app.helpers.BarFunction', 'bar'),
        ('UrlFunction', 'url'),
        ('Config', 'config'),
        ('FunctionCaller', 'functioncaller'),
    ])
    def test_declared_names(self, declared, expected):
        assert canonical_name(declared) == expected


# ============================================================================
# Registration
# ============================================================================

class TestHelperRegistry:

    def test_structured_helper_registers_under_declared_name(self):
        registry = HelperRegistry()

        name = registry.register(BarFunction())

        assert name == 'bar'
        assert registry.has('bar')
        assert isinstance(registry.get('bar'), BarFunction)

    def test_explicit_name_is_lowercased_only(self):
        registry = HelperRegistry()

        name = registry.register('Format\\DateFunction', lambda value: value)

        assert name == 'format\\datefunction'

    def test_reregistering_replaces_previous_entry(self):
        registry = HelperRegistry()

        def f():
            return 'f'

        def g():
            return 'g'

        registry.register('Foo', f)
        registry.register('foo', g)

        assert len(registry) == 1
        assert registry.get('foo') is g

    def test_structured_helper_under_explicit_name(self):
        registry = HelperRegistry()
        helper = BarFunction()

        registry.register('Other', helper)

        assert registry.get('other') is helper
        assert not registry.has('bar')

    @pytest.mark.parametrize('unit', [None, 'not callable', 42, object()])
    def test_non_invocable_unit_rejected(self, unit):
        registry = HelperRegistry()

        with pytest.raises(InvalidHelperError):
            registry.register('broken', unit)

        assert not registry.has('broken')

    def test_non_string_name_rejected(self):
        with pytest.raises(InvalidHelperError):
            HelperRegistry().register(42, lambda: None)

    def test_helper_without_name_rejected(self):
        with pytest.raises(InvalidHelperError):
            HelperRegistry().register(NamelessHelper())

    def test_constructor_registers_given_helpers(self):
        registry = HelperRegistry([BarFunction()])

        assert registry.get_registered() == ['bar']


# ============================================================================
# Invocation
# ============================================================================

class TestHelperInvoker:

    def test_missing_helper_returns_empty_string(self):
        invoker = HelperInvoker(HelperRegistry())

        assert invoker.invoke(object(), 'missing', []) == ''

    def test_raw_helper_result_is_not_escaped(self):
        registry = HelperRegistry()
        registry.register(BoldHelper(raw=True))

        result = HelperInvoker(registry).invoke(None, 'bold', [])

        assert result == HelperResult('<b>x</b>', requires_escaping=False)
        assert result.__html__() == '<b>x</b>'

    def test_escaped_helper_result_requires_escaping(self):
        registry = HelperRegistry()
        registry.register(BoldHelper(raw=False))

        result = HelperInvoker(registry).invoke(None, 'bold', [])

        assert isinstance(result, HelperResult)
        assert result.requires_escaping
        assert result.value == '<b>x</b>'
        assert result.__html__() == '&lt;b&gt;x&lt;/b&gt;'
        assert str(result) == '<b>x</b>'

    def test_structured_helper_receives_context_and_arg_list(self):
        helper = BoldHelper(raw=False)
        registry = HelperRegistry()
        registry.register(helper)
        context = object()

        HelperInvoker(registry).invoke(context, 'bold', ('a', 2))

        assert helper.calls == [(context, ['a', 2])]

    def test_plain_callable_gets_spread_args_and_is_always_escaped(self):
        registry = HelperRegistry()
        registry.register('join', lambda a, b: f'<{a}{b}>')

        result = HelperInvoker(registry).invoke(None, 'join', ['x', 'y'])

        assert result.requires_escaping
        assert result.value == '<xy>'
        assert result.__html__() == str(escape('<xy>'))

    def test_lookup_is_case_insensitive(self):
        registry = HelperRegistry()
        registry.register('upper', lambda s: s.upper())

        assert HelperInvoker(registry).invoke(None, 'UPPER', ['a']).value == 'A'

    def test_helper_exceptions_propagate(self):
        def boom():
            raise ValueError('boom')

        registry = HelperRegistry()
        registry.register('boom', boom)

        with pytest.raises(ValueError):
            HelperInvoker(registry).invoke(None, 'boom', [])


def test_none_result_renders_as_empty_text():
    assert str(HelperResult.escaped(None)) == ''
    assert HelperResult.raw(None).__html__() == ''

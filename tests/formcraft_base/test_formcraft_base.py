import pytest
from types import SimpleNamespace

from formcraft.error import BadRequestError, NotFoundError
from formcraft.helper import ClassRegistry, camel_to_lower, move_item, underscore_label


def test_setup_module():
    from formcraft import setupModule

    defaults = SimpleNamespace(TEST_CONFIG_KEY='sample-value')
    config, logger = setupModule('test_setupModule', defaults)
    assert config.TEST_CONFIG_KEY == 'sample-value'
    assert config.LOG_LEVEL == 'info'
    assert logger.name == 'test_setupModule'


def test_subpackage_config():
    from formcraft.form import config

    assert config.DEFAULT_THANK_YOU_MESSAGE == "Thank you for your submission!"
    assert config.CASCADE_DELETE_RESPONSES is True

    with pytest.raises(AttributeError):
        config.UNDEFINED_CONFIG_KEY


def test_exception_content():
    error = NotFoundError("X00.404", "Missing thing", {"id": "1"})
    assert error.status_code == 404
    assert error.content == {"errcode": "X00.404", "message": "Missing thing", "details": {"id": "1"}}
    assert str(error) == "X00.404 [404] >> Missing thing >> {'id': '1'}"


def test_class_registry():
    class Base(object):
        pass

    registry = ClassRegistry(Base)

    @registry.register
    class SampleEntry(Base):
        pass

    @registry.register('custom-key')
    class OtherEntry(Base):
        pass

    assert registry.get('sample-entry') is SampleEntry
    assert registry.get('custom-key') is OtherEntry
    assert registry.keys() == ('sample-entry', 'custom-key')
    assert dict(registry.get_registry()) == {'sample-entry': SampleEntry, 'custom-key': OtherEntry}

    with pytest.raises(BadRequestError):
        registry.register('custom-key')(type('Duplicate', (Base,), {}))

    with pytest.raises(BadRequestError):
        registry.register('not-a-base')(type('Stranger', (object,), {}))

    with pytest.raises(NotFoundError):
        registry.get('missing')


def test_string_helpers():
    assert camel_to_lower('FirstNameField') == 'first-name-field'
    assert underscore_label('Very  Satisfied') == 'very_satisfied'


def test_move_item_keeps_relative_order():
    items = ['a', 'b', 'c', 'd', 'e']

    moved = move_item(items, 1, 3)
    assert moved == ['a', 'c', 'd', 'b', 'e']
    assert sorted(moved) == sorted(items)
    assert move_item(moved, 3, 1) == items
    assert move_item(items, 4, 0) == ['e', 'a', 'b', 'c', 'd']
    assert items == ['a', 'b', 'c', 'd', 'e']


@pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 5), (5, 0), (0, -1)])
def test_move_item_rejects_out_of_range(from_index, to_index):
    with pytest.raises(IndexError):
        move_item(['a', 'b', 'c', 'd', 'e'], from_index, to_index)

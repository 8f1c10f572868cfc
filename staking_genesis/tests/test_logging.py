import inspect
import json
import logging

import pytest
from staking_genesis import slogging


def setup_function(function):
    """ setup any state tied to the execution of the given function.
    Invoked for every test function in the module.
    """
    function.snapshot = slogging.get_configuration()


def teardown_function(function):
    """ teardown any state that was previously setup with a setup_function
    call.
    """
    slogging.configure(**function.snapshot)


@pytest.mark.parametrize('level_name', ['critical', 'error', 'warning', 'info', 'debug', 'trace'])
def test_basic(caplog, level_name):
    slogging.configure(":trace")
    log = slogging.get_logger()
    with caplog.at_level('TRACE'):
        getattr(log, level_name)(level_name)

    assert len(caplog.records) == 1
    assert caplog.records[0].levelname == level_name.upper()
    assert level_name in caplog.records[0].msg


def test_initial_config():
    handlers = slogging.getLogger().handlers
    slogging.getLogger().handlers = []
    try:
        slogging.configure()
        assert len(slogging.getLogger().handlers) == 1
        assert isinstance(slogging.getLogger().handlers[0], logging.StreamHandler)
    finally:
        slogging.getLogger().handlers = handlers


def test_is_active():
    slogging.configure()
    tester = slogging.get_logger('tester')
    assert tester.is_active(level_name='info')
    assert not tester.is_active(level_name='trace')


def test_kwargs(caplog):
    slogging.configure()
    log = slogging.get_logger('staking.predeploy')
    log.info('predeployed', validators=3, balance=0)
    assert caplog.records[0].msg == 'predeployed validators=3 balance=0'
    assert caplog.records[0].kwargs == dict(validators=3, balance=0)


def test_jsonconfig(caplog):
    slogging.configure(log_json=True)
    log = slogging.get_logger('prefix')
    log.warn('abc', a=1)
    assert json.loads(caplog.records[0].msg) == dict(event='prefix.abc', a=1, level='WARNING')


def test_json_repr_of_bytes(caplog):
    slogging.configure(log_json=True)
    log = slogging.get_logger('prefix')
    log.info('key', value=b'\x01')
    assert json.loads(caplog.records[0].msg)['value'] == repr(b'\x01')


def test_bound_logger(caplog):
    slogging.configure()
    log = slogging.get_logger('bound').bind(index=7)
    log.info('staked validator', bls=True)
    assert caplog.records[0].kwargs == dict(index=7, bls=True)


def test_configuration():
    config_string = ':inFO,a:trace,a.b:debug'
    slogging.configure(config_string=config_string)
    log = slogging.get_logger()
    log_a = slogging.get_logger('a')
    log_a_b = slogging.get_logger('a.b')
    assert log.is_active('info')
    assert not log.is_active('debug')
    assert log_a.is_active('trace')
    assert log_a_b.is_active('debug')
    assert not log_a_b.is_active('trace')


def test_get_configuration_roundtrip():
    slogging.configure(config_string=':debug,x:trace', log_json=True)
    snapshot = slogging.get_configuration()
    slogging.configure()
    slogging.configure(**snapshot)
    assert slogging.get_logger('x').is_active('trace')
    assert slogging.getLogger().is_active('debug')
    assert slogging.getLogger().log_json


def test_configuration_covers_configure_arguments():
    params = inspect.signature(slogging.configure).parameters
    assert set(slogging.get_configuration()) == set(params)


def test_tracebacks(caplog):
    slogging.configure()
    log = slogging.get_logger()

    def div(a, b):
        try:
            _ = a / b
            log.error('heres the stack', stack_info=True)
        except Exception as e:
            log.error('an Exception trace should preceed this msg', exc_info=True)
    div(1, 0)
    assert 'an Exception trace' in caplog.text
    assert 'Traceback' in caplog.text


def test_logger_names():
    slogging.get_logger('staking.names')
    assert 'staking.names' in slogging.get_logger_names()

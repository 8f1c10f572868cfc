import pytest

from staking_genesis import slogging


# Connect caplog's handler to slogging's root logger, which lives outside the
# stdlib logger hierarchy
@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item):
    caplog = getattr(item, 'funcargs', {}).get('caplog')
    catchlog_handler = caplog.handler if caplog is not None else None
    if catchlog_handler is not None and catchlog_handler not in slogging.rootLogger.handlers:
        slogging.rootLogger.addHandler(catchlog_handler)

    _ = yield

    if catchlog_handler is not None and catchlog_handler in slogging.rootLogger.handlers:
        slogging.rootLogger.removeHandler(catchlog_handler)

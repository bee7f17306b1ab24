import os
import signal

import pytest

# Per-test timeout in seconds, overridable with the TEST_TIMEOUT env var.
DEFAULT_TIMEOUT = int(os.environ.get('TEST_TIMEOUT', '15'))


def _raise_timeout(signum, frame):
    raise TimeoutError(f"Test exceeded timeout of {DEFAULT_TIMEOUT}s")


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item):
    # signal.alarm is POSIX only
    if hasattr(signal, 'alarm'):
        signal.signal(signal.SIGALRM, _raise_timeout)
        signal.alarm(DEFAULT_TIMEOUT)


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_teardown(item, nextitem):
    if hasattr(signal, 'alarm'):
        signal.alarm(0)

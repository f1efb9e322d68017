import os
import shutil
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    # Keep the test run's log out of the working tree
    os.environ.setdefault('JSBINDGEN_LOG_DIR', tempfile.mkdtemp(prefix='jsbindgen-log-'))


@pytest.fixture
def temp_dir():
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)

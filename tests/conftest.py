import os
import tempfile

import pytest

# Keep the module-level addon instance away from the user's home directory.
_TMP = tempfile.mkdtemp(prefix='feedfilter-tests-')
os.environ['FF_CONFIG_PATH'] = os.path.join(_TMP, 'config.json')
os.environ['FF_LOG_PATH'] = os.path.join(_TMP, 'filtered_responses.log')
for _var in ('FF_MIN_PLAY', 'FF_FILTER_ENABLED', 'FF_FILTER_HOSTS', 'FF_FILTER_PATH', 'FF_DEBUG'):
    os.environ.pop(_var, None)


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / 'config.json')


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / 'audit.log')

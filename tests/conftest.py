import os

# Ensure Qt runs in offscreen mode for headless CI/test environments
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Configure logging for tests so handler/model traces are visible on failure.
import logging
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s')
handler.setFormatter(formatter)
root = logging.getLogger()
if not root.handlers:
	root.addHandler(handler)
root.setLevel(logging.DEBUG)


import pytest

from multiselect.constants import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
	"""Point the settings file at a per-test location so tests never read ~/."""
	path = tmp_path / "multiselect_config.json"
	monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
	yield path

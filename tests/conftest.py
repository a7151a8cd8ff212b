import os
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def isolate_user_config():
    """Point the configuration loader at an empty temporary directory.

    Tests expect no user-level configuration to exist, so the
    ``REVIEW_HELPER_CONFIG`` variable is redirected for the whole session
    and restored afterwards.
    """
    tmp_dir = Path(tempfile.mkdtemp(prefix="review_helper_config_"))
    previous = os.environ.get("REVIEW_HELPER_CONFIG")
    os.environ["REVIEW_HELPER_CONFIG"] = str(tmp_dir / "config.json")
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("REVIEW_HELPER_CONFIG", None)
        else:
            os.environ["REVIEW_HELPER_CONFIG"] = previous
        shutil.rmtree(str(tmp_dir), ignore_errors=True)

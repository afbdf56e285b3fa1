import json

import pytest

from fakes import SCRIPTS


@pytest.fixture
def scripts_json():
    return json.dumps(SCRIPTS)

import json
import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
SNAPSHOT_PATH = os.path.join(DATA_DIR, "snapshot-rev4.json")


@pytest.fixture(scope="session")
def snapshot():
    """Reference table: hex color -> rgb, xyz, luv, lch, hsluv, hpluv."""
    with open(SNAPSHOT_PATH, "r") as f:
        return json.load(f)

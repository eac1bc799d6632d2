import os
import sys

import pytest

# Add the project root to sys.path so the suite runs from a plain checkout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chromaparse import Color  # noqa: E402


@pytest.fixture
def red():
    return Color("#ff0000")


@pytest.fixture
def recorder():
    """Callable that records every (rgba, hsla) notification it receives."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, rgba, hsla):
            self.calls.append((rgba, hsla))

    return Recorder()

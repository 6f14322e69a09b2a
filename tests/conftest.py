import os
import random
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashquiz import StudySet, RecallType


@pytest.fixture
def example_set():
    return StudySet.example(RecallType.MC, RecallType.MC, RecallType.MC)


@pytest.fixture
def rng():
    return random.Random(1234)

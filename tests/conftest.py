import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from engine import EngineOptions, SceneEngine


def fixed_measure(text, font):
    # 8 px per character regardless of font
    return 8.0 * len(text)


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def clear(self, color, size):
        self.calls.append(("clear", color, size))

    def rectangle(self, x0, y0, x1, y1, outline):
        self.calls.append(("rectangle", x0, y0, x1, y1, outline))

    def ellipse(self, x0, y0, x1, y1, outline):
        self.calls.append(("ellipse", x0, y0, x1, y1, outline))

    def text(self, x, y, text, font, color, anchor):
        self.calls.append(("text", x, y, text, font, color, anchor))

    def image(self, handle, x0, y0, x1, y1):
        self.calls.append(("image", handle, x0, y0, x1, y1))

    def of(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def engine():
    return SceneEngine(measure=fixed_measure)


@pytest.fixture
def make_engine():
    def factory(**options):
        return SceneEngine(EngineOptions(**options), measure=fixed_measure)
    return factory


@pytest.fixture
def painter():
    return RecordingPainter()

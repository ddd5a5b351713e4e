from typing import Optional

import pytest

from contrib_canvas.models.activity import ActivityDataset


class RecordingContext:
    """Context double that records every primitive in logical coordinates."""

    def __init__(self):
        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.text_baseline = "alphabetic"
        self.font_size = 10.0
        self.font_face = ""
        self.calls: list[tuple] = []
        self._path: list[list[tuple[float, float]]] = []
        self._stack: list[tuple] = []

    def set_font(self, size, face):
        self.font_size = size
        self.font_face = face

    def scale(self, sx, sy=None):
        self.calls.append(("scale", sx, sx if sy is None else sy))

    def translate(self, tx, ty):
        self.calls.append(("translate", tx, ty))

    def rotate(self, angle):
        self.calls.append(("rotate", angle))

    def save(self):
        self._stack.append((self.fill_style, self.stroke_style, self.text_baseline, self.font_size))

    def restore(self):
        self.fill_style, self.stroke_style, self.text_baseline, self.font_size = self._stack.pop()

    def fill_rect(self, x, y, width, height):
        self.calls.append(("fill_rect", x, y, width, height, self.fill_style))

    def fill_text(self, text, x, y, max_width: Optional[float] = None):
        self.calls.append(("fill_text", str(text), x, y, self.fill_style, self.font_size))

    def measure_text(self, text):
        return len(str(text)) * self.font_size * 0.6

    def begin_path(self):
        self._path = []

    def move_to(self, x, y):
        self._path.append([(x, y)])

    def line_to(self, x, y):
        self._path[-1].append((x, y))

    def stroke(self):
        self.calls.append(("stroke", [list(p) for p in self._path], self.stroke_style))

    def rects(self):
        return [c for c in self.calls if c[0] == "fill_rect"]

    def texts(self):
        return [c for c in self.calls if c[0] == "fill_text"]

    def text_values(self):
        return [c[1] for c in self.texts()]

    def strokes(self):
        return [c for c in self.calls if c[0] == "stroke"]


class RecordingSurface:
    """Surface double handing out a RecordingContext."""

    def __init__(self):
        self.width = 0
        self.height = 0
        self.context: Optional[RecordingContext] = None

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.context = RecordingContext()

    def get_context(self):
        return self.context


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def single_day_payload() -> dict:
    return {
        "years": [
            {"year": "2021", "total": 5, "range": {"start": "2021-01-01", "end": "2021-12-31"}},
        ],
        "contributions": [
            {"date": "2021-01-01", "count": 5, "intensity": 2},
        ],
    }


@pytest.fixture
def single_day_dataset(single_day_payload) -> ActivityDataset:
    return ActivityDataset.from_dict(single_day_payload)


@pytest.fixture
def multi_year_payload() -> dict:
    # Newest year first, as GitHub contribution APIs list them
    return {
        "years": [
            {"year": "2023", "total": 12, "range": {"start": "2023-01-01", "end": "2023-12-31"}},
            {"year": "2022", "total": 7, "range": {"start": "2022-01-01", "end": "2022-12-31"}},
            {"year": "2021", "total": 12, "range": {"start": "2021-01-01", "end": "2021-12-31"}},
        ],
        "contributions": [
            {"date": "2023-03-14", "count": 10, "intensity": 4, "color": "#216e39"},
            {"date": "2023-12-31", "count": 2, "intensity": 1, "color": "#9be9a8"},
            {"date": "2022-01-01", "count": 3, "intensity": 2, "color": "#40c463"},
            {"date": "2022-06-15", "count": 4, "intensity": "3", "color": "#30a14e"},
            {"date": "2022-07-04", "count": 0, "intensity": 0, "color": "#ebedf0"},
            {"date": "2021-01-01", "count": 5, "intensity": 2, "color": "#40c463"},
            {"date": "2021-12-31", "count": 7, "intensity": 3, "color": "#30a14e"},
        ],
    }


@pytest.fixture
def multi_year_dataset(multi_year_payload) -> ActivityDataset:
    return ActivityDataset.from_dict(multi_year_payload)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("CONTRIB_CANVAS_CONFIG", str(path))
    return path

"""Tests for text measurement."""
import threading

import pytest

from signum.errors import ConstructionError, FontLoadError
from signum.fonts import EXTRA_DX, FixedWidthFace, FontMetrics


@pytest.fixture
def metrics():
    return FontMetrics(FixedWidthFace())


@pytest.fixture
def font_bytes():
    """Bytes of the TrueType font Pillow ships as its default."""
    from PIL import ImageFont, features

    if not features.check("freetype2"):
        pytest.skip("Pillow built without FreeType")
    font = ImageFont.load_default(size=11)
    data = getattr(font, "font_bytes", None)
    if not data:
        pytest.skip("default font is not a TrueType font")
    return data


class TestFixedWidthFace:
    def test_default_advance(self):
        assert FixedWidthFace().getlength("abc") == 21.0

    def test_custom_advance(self):
        assert FixedWidthFace(advance=6).getlength("abcd") == 24.0

    def test_negative_advance_rejected(self):
        with pytest.raises(ValueError):
            FixedWidthFace(advance=-1)


class TestMeasure:
    def test_empty_string_is_extra_dx(self, metrics):
        assert metrics.measure("") == EXTRA_DX

    def test_extra_dx_value(self):
        assert EXTRA_DX == 13

    def test_adds_extra_dx(self, metrics):
        assert metrics.measure("build") == 5 * 7 + 13
        assert metrics.measure("passing") == 7 * 7 + 13

    def test_non_ascii(self, metrics):
        assert metrics.measure("héllo ★") == 7 * 7 + 13

    def test_truncates_to_whole_pixels(self):
        class HalfFace:
            def getlength(self, text):
                return len(text) * 6.9

        metrics = FontMetrics(HalfFace())
        assert metrics.measure("ab") == 13 + 13

    def test_prefix_monotonic(self, metrics):
        text = "coverage 97%"
        widths = [metrics.measure(text[:i]) for i in range(len(text) + 1)]
        assert widths == sorted(widths)

    def test_measure_pair(self, metrics):
        assert metrics.measure_pair("x", "yy") == (20.0, 27.0)


class TestLocking:
    def test_pair_measured_under_lock(self):
        seen = []

        class SpyFace:
            def getlength(self, text):
                seen.append(metrics._lock.locked())
                return 0.0

        metrics = FontMetrics(SpyFace())
        metrics.measure_pair("a", "b")
        metrics.measure("c")
        assert seen == [True, True, True]

    def test_concurrent_measurements_do_not_overlap(self):
        active = 0
        overlaps = []
        guard = threading.Lock()

        class SlowFace:
            def getlength(self, text):
                nonlocal active
                with guard:
                    active += 1
                    overlaps.append(active)
                for _ in range(1000):
                    pass
                with guard:
                    active -= 1
                return float(len(text))

        metrics = FontMetrics(SlowFace())
        threads = [
            threading.Thread(target=metrics.measure_pair, args=("subject", "status"))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(overlaps) == 16
        assert max(overlaps) == 1


class TestConstruction:
    def test_none_face_rejected(self):
        with pytest.raises(FontLoadError):
            FontMetrics(None)

    def test_font_errors_are_construction_errors(self):
        assert issubclass(FontLoadError, ConstructionError)

    def test_empty_path(self):
        with pytest.raises(FontLoadError, match="required"):
            FontMetrics.from_path("")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FontLoadError):
            FontMetrics.from_path(tmp_path / "missing.ttf")

    def test_garbage_bytes(self):
        with pytest.raises(FontLoadError):
            FontMetrics.from_bytes(b"definitely not a font")

    def test_empty_bytes(self):
        with pytest.raises(FontLoadError):
            FontMetrics.from_bytes(b"")


class TestTrueTypeFont:
    def test_from_bytes(self, font_bytes):
        metrics = FontMetrics.from_bytes(font_bytes)
        assert metrics.measure("") == EXTRA_DX
        assert metrics.measure("build") > EXTRA_DX

    def test_from_path(self, font_bytes, tmp_path):
        path = tmp_path / "font.ttf"
        path.write_bytes(font_bytes)
        metrics = FontMetrics.from_path(path)
        assert metrics.measure("passing") == FontMetrics.from_bytes(font_bytes).measure("passing")

    def test_whole_pixel_widths(self, font_bytes):
        metrics = FontMetrics.from_bytes(font_bytes)
        assert metrics.measure("coverage").is_integer()

    def test_longer_text_is_wider(self, font_bytes):
        metrics = FontMetrics.from_bytes(font_bytes)
        assert metrics.measure("build passing") >= metrics.measure("build")

    def test_deterministic(self, font_bytes):
        metrics = FontMetrics.from_bytes(font_bytes)
        assert metrics.measure("signum") == metrics.measure("signum")

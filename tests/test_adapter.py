"""
Tests for the adapter: forwarding, transparency and log buffering.
"""
import logging
from unittest.mock import Mock

import numpy as np
import pytest

from matrixadapter.exceptions import InvalidStateError
from matrixadapter.model.adapter import Volume3DAdapter
from matrixadapter.model.contract import Loggable, MatrixOperations
from matrixadapter.model.volume import Volume3D
from matrixadapter.selfcheck import parse_rendered_values


@pytest.fixture
def adapter(fixed_clock):
    return Volume3DAdapter(Volume3D(), clock=fixed_clock)


class TestForwarding:
    def test_implements_contract(self, adapter):
        assert isinstance(adapter, MatrixOperations)
        assert isinstance(adapter, Loggable)

    def test_rejects_non_volume(self):
        with pytest.raises(TypeError):
            Volume3DAdapter([[1.0]])

    def test_each_call_maps_to_one_volume_call(self, fixed_clock):
        volume = Mock(spec=Volume3D)
        volume.get_min_from_volume.return_value = -1.25
        volume.show_layers.return_value = "LAYERS"
        adapter = Volume3DAdapter(volume, clock=fixed_clock)
        rng = object()
        source = Mock()

        adapter.fill_random(rng)
        adapter.fill_manual(source)
        assert adapter.find_min() == -1.25
        assert "LAYERS" in adapter.display()

        volume.fill_volume_random.assert_called_once_with(rng)
        volume.fill_volume_manual.assert_called_once_with(source)
        volume.get_min_from_volume.assert_called_once_with()
        volume.show_layers.assert_called_once_with()

    def test_find_min_before_fill_raises(self, adapter):
        with pytest.raises(InvalidStateError):
            adapter.find_min()


class TestTransparency:
    def test_random_fill_matches_direct_volume(self, adapter, make_rng):
        direct = Volume3D()
        direct.fill_volume_random(make_rng())
        adapter.fill_random(make_rng())

        np.testing.assert_array_equal(adapter.adaptee.cube, direct.cube)
        assert adapter.find_min() == direct.get_min_from_volume()

    def test_manual_fill_matches_direct_volume(self, adapter, scripted):
        lines = [f"{(v * 7) % 11 - 5}.5" for v in range(27)]
        direct = Volume3D()
        direct.fill_volume_manual(scripted(*lines))
        adapter.fill_manual(scripted(*lines))

        np.testing.assert_array_equal(adapter.adaptee.cube, direct.cube)
        assert adapter.find_min() == direct.get_min_from_volume() == -5.5

    def test_display_contains_volume_rendering(self, adapter, rng):
        adapter.fill_random(rng)
        assert adapter.adaptee.show_layers() in adapter.display()
        parsed = parse_rendered_values(adapter.display())
        np.testing.assert_allclose(parsed, adapter.adaptee.cube.ravel())


class TestLogBuffer:
    def test_log_lines_are_buffered_not_emitted(self, adapter, caplog):
        caplog.set_level(logging.DEBUG, logger="matrixadapter")
        adapter.log_info("first")
        assert adapter.log_buffer == ["[LOG 3D BUFFER] 12:34:56: first"]
        assert "first" not in caplog.text

    def test_display_shows_buffer_in_order(self, adapter, rng):
        adapter.fill_random(rng)
        adapter.log_info("second")

        lines = adapter.display().splitlines()

        assert lines[1] == "--- Adapter for 3D Matrix ---"
        assert lines[2] == "(Adapted 3D view)"
        assert lines[-2:] == [
            "[LOG 3D BUFFER] 12:34:56: Filled RANDOM through the adapter.",
            "[LOG 3D BUFFER] 12:34:56: second",
        ]

    def test_display_keeps_buffer(self, adapter):
        adapter.log_info("kept")
        adapter.display()
        assert "[LOG 3D BUFFER] 12:34:56: kept" in adapter.display()

    def test_close_flushes_and_clears(self, adapter, caplog):
        caplog.set_level(logging.DEBUG, logger="matrixadapter")
        adapter.log_info("flushed")

        with adapter:
            pass

        assert adapter.closed
        assert adapter.log_buffer == []
        assert "[LOG 3D BUFFER] 12:34:56: flushed" in caplog.text

import pytest

from fmgrid.scenario import NO_SCALING, Experiment, ScenarioLoader


def _write(tmp_path, text):
    path = tmp_path / "test.scen"
    path.write_text(text)
    return path


def test_version_1_fields(tmp_path):
    path = _write(tmp_path, "version 1\n0\tmaps/a.map\t10\t12\t1\t2\t3\t4\t5.5\n")
    loader = ScenarioLoader(path)
    assert len(loader) == 1
    exp = loader[0]
    assert exp == Experiment(1, 2, 3, 4, 0, 5.5, "maps/a.map", 10, 12)
    assert loader.scenario_name == str(path)


def test_version_0_has_no_scaling(tmp_path):
    path = _write(tmp_path, "3 m.map 1 2 3 4 2.0\n4 m.map 5 6 7 8 1.0\n")
    loader = ScenarioLoader(path)
    assert len(loader) == 2
    assert loader[1].start_x == 5
    assert loader[1].bucket == 4
    assert loader[0].scale_x == NO_SCALING
    assert loader[0].scale_y == NO_SCALING


def test_invalid_version_raises(tmp_path):
    path = _write(tmp_path, "version 2\n0 m.map 1 1 1 1 1 1 1\n")
    with pytest.raises(ValueError):
        ScenarioLoader(path)


def test_truncated_record_is_dropped(tmp_path):
    path = _write(tmp_path, "version 1\n0 m.map 4 4 0 0 1 1 1.5\n1 m.map 4 4 0\n")
    loader = ScenarioLoader(path)
    assert len(loader) == 1


def test_malformed_record_stops_reading(tmp_path):
    path = _write(tmp_path, "version 1\n0 m.map x 4 0 0 1 1 1.5\n1 m.map 4 4 0 0 1 1 1.5\n")
    assert len(ScenarioLoader(path)) == 0


def test_save_round_trip(tmp_path):
    loader = ScenarioLoader()
    first = Experiment(1, 2, 3, 4, 0, 3.5, "a.map", 8, 9)
    second = Experiment(5, 6, 7, 8, 1, 2.25, "a.map")
    loader.add_experiment(first)
    loader.add_experiment(second)
    out = tmp_path / "out.scen"
    loader.save(out)
    assert out.read_text().startswith("version 1\n")
    reloaded = ScenarioLoader(out)
    assert list(reloaded) == [first, second]


def test_empty_loader():
    loader = ScenarioLoader()
    assert len(loader) == 0
    assert loader.scenario_name == ""
    with pytest.raises(IndexError):
        loader[0]
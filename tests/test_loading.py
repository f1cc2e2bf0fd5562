import logging
import pytest
from PIL import Image

from prop_catalog.exceptions import TableLoadError
from prop_catalog.loading.images import format_hint, load_image
from prop_catalog.loading.propeller import PropellerLoader
from prop_catalog.loading.tables import load_table, valid_column_name
from prop_catalog.models import DataFile, PerformanceFile, PropellerRecord
from conftest import GEOM_TABLE, PERF_TABLE


@pytest.mark.parametrize(
    "header,expected",
    [("J", "J"), ("r/R", "r_R"), ("t/c", "t_c"), ("CT", "CT"), ("2nd", "x2nd")],
)
def test_valid_column_name(header, expected):
    assert valid_column_name(header) == expected


def test_load_table_named_columns(tmp_path):
    p = tmp_path / "geom.txt"
    p.write_text(GEOM_TABLE)

    table = load_table(p)
    assert set(table) == {"r_R", "c_R", "beta"}
    assert list(table["r_R"]) == [0.15, 0.50, 1.00]


def test_load_table_missing_file_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert load_table(tmp_path / "nope.txt") is None
    assert "not found" in caplog.text


def test_load_table_rejects_non_numeric(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("J CT\nfoo bar\n")
    with pytest.raises(TableLoadError):
        load_table(p)


@pytest.mark.parametrize(
    "name,expected",
    [("a-front.png", "PNG"), ("a-front.PNG", "PNG"), ("a-side.jpg", "JPEG"), ("a-side.jpeg", "JPEG")],
)
def test_format_hint(name, expected):
    assert format_hint(name) == expected


def test_load_image(tmp_path):
    p = tmp_path / "a-front.png"
    Image.new("RGB", (4, 3)).save(p, format="PNG")

    img = load_image(p)
    assert img.size == (4, 3)
    assert load_image(tmp_path / "missing.png") is None


def test_propeller_loader_reads_all_roles(dataset):
    prop = PropellerRecord(
        identifier="apce_10x5", manufacturer="apce", volume="volume-1",
        performance_files=[
            PerformanceFile(4010, "apce_10x5_rd0986_4010", "volume-1"),
            PerformanceFile(5020, "apce_10x5_rd0987_5020", "volume-1"),
        ],
        static_file=DataFile("apce_10x5_static_rd0988", "volume-1"),
        geometry_file=DataFile("apce_10x5_geom", "volume-1"),
        thickness_file=DataFile("apc_thick", "volume-2"),
        front_image=DataFile("apce_10x5-front.png", "volume-1"),
        side_image=DataFile("apce_10x5-side.jpg", "volume-1"),
    )

    data = PropellerLoader(dataset).load(prop)

    assert data.rpm == [4010, 5020]
    assert len(data.ct) == 2
    assert list(data.j[0]) == [0.1, 0.2, 0.3]
    assert list(data.rpm_static) == [2000, 3000]
    assert list(data.beta) == [30.1, 20.4, 10.2]
    assert list(data.t_c) == [0.20, 0.08]
    assert list(data.r_R_thickness) == [0.15, 1.00]
    assert data.front.size == (4, 3)
    assert data.side.size == (5, 2)


def test_propeller_loader_missing_files_leave_fields_absent(dataset, caplog):
    prop = PropellerRecord(
        identifier="z", manufacturer="z", volume="volume-1",
        performance_files=[PerformanceFile(3000, "z_10x5_r1_3000", "volume-1")],
        geometry_file=DataFile("z_10x5_geom", "volume-1"),
    )

    with caplog.at_level(logging.WARNING):
        data = PropellerLoader(dataset).load(prop)

    assert data.rpm == [3000]
    assert data.ct == [None]
    assert data.r_R is None
    assert data.front is None
    assert "not found" in caplog.text


def test_propeller_loader_missing_column(tmp_path, caplog):
    data_dir = tmp_path / "volume-1" / "data"
    data_dir.mkdir(parents=True)
    (data_dir / "a_geom.txt").write_text(PERF_TABLE)

    prop = PropellerRecord(identifier="a", manufacturer="a", volume="volume-1",
                           geometry_file=DataFile("a_geom", "volume-1"))
    with caplog.at_level(logging.WARNING):
        data = PropellerLoader(tmp_path).load(prop)

    assert data.r_R is None
    assert "no 'r_R' column" in caplog.text


def test_load_image_mislabelled_contents_warns(tmp_path, caplog):
    p = tmp_path / "a_10x5-front.jpg"
    Image.new("RGB", (4, 3)).save(p, format="PNG")

    with caplog.at_level(logging.WARNING):
        assert load_image(p) is None
    assert "Cannot read image" in caplog.text


def test_propeller_loader_keeps_curves_when_photo_unreadable(tmp_path, caplog):
    data_dir = tmp_path / "volume-1" / "data"
    photo_dir = tmp_path / "volume-1" / "prop_photos"
    data_dir.mkdir(parents=True)
    photo_dir.mkdir()
    (data_dir / "a_10x5_geom.txt").write_text(GEOM_TABLE)
    Image.new("RGB", (4, 3)).save(photo_dir / "a_10x5-front.jpg", format="PNG")

    prop = PropellerRecord(
        identifier="a_10x5", manufacturer="a", volume="volume-1",
        geometry_file=DataFile("a_10x5_geom", "volume-1"),
        front_image=DataFile("a_10x5-front.jpg", "volume-1"),
    )
    with caplog.at_level(logging.WARNING):
        data = PropellerLoader(tmp_path).load(prop)

    assert data.front is None
    assert list(data.beta) == [30.1, 20.4, 10.2]

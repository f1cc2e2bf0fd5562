import pytest
from pathlib import Path

PERF_TABLE = "J       CT       CP       eta\n0.1  0.10  0.05  0.20\n0.2  0.09  0.05  0.36\n0.3  0.08  0.04  0.55\n"
STATIC_TABLE = "RPM   CT   CP\n2000 0.11 0.05\n3000 0.12 0.05\n"
GEOM_TABLE = "r/R   c/R   beta\n0.15 0.12 30.1\n0.50 0.15 20.4\n1.00 0.08 10.2\n"
THICK_TABLE = "r/R   t/c\n0.15 0.20\n1.00 0.08\n"


def make_volume(root: Path, name: str, data: dict, photos: dict = None, with_data_dir: bool = True) -> Path:
    """Creates root/name/data/<stem>.txt for each data entry and optional prop_photos."""
    vol = root / name
    vol.mkdir(parents=True)
    if with_data_dir:
        data_dir = vol / "data"
        data_dir.mkdir()
        for stem, text in data.items():
            (data_dir / f"{stem}.txt").write_text(text)
    if photos is not None:
        photo_dir = vol / "prop_photos"
        photo_dir.mkdir()
        for name_, payload in photos.items():
            (photo_dir / name_).write_bytes(payload)
    return vol


@pytest.fixture
def dataset(tmp_path):
    """
    Returns a small two-volume dataset root:
      volume-1: apce 10x5 (two RPMs, static, geom, photos), ancf 125x75 geom
      volume-2: a malformed name and a 12p1 pusher geometry
    """
    from PIL import Image

    root = tmp_path / "UIUC-propDB"
    front = tmp_path / "front.png"
    Image.new("RGB", (4, 3), (255, 0, 0)).save(front, format="PNG")
    side = tmp_path / "side.jpg"
    Image.new("RGB", (5, 2), (0, 255, 0)).save(side, format="JPEG")

    make_volume(root, "volume-1", {
        "apce_10x5_rd0986_4010": PERF_TABLE,
        "apce_10x5_rd0987_5020": PERF_TABLE,
        "apce_10x5_static_rd0988": STATIC_TABLE,
        "apce_10x5_geom": GEOM_TABLE,
        "ancf_125x75_geom": GEOM_TABLE,
    }, photos={
        "apce_10x5-front.png": front.read_bytes(),
        "apce_10x5-side.jpg": side.read_bytes(),
        "nomatch_7x3-front.png": front.read_bytes(),
    })
    make_volume(root, "volume-2", {
        "apc_12p1_geom": GEOM_TABLE,
        "apc_thick": THICK_TABLE,
        "apc_bogus": GEOM_TABLE,
    })
    return root

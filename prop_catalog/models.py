from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, NamedTuple, Optional


class Role(Enum):
    PERFORMANCE = 'performance'   # CT/CP vs. J at one RPM
    STATIC = 'static'             # zero advance ratio, CT/CP vs. RPM
    GEOMETRY = 'geometry'         # chord/twist vs. r/R
    THICKNESS = 'thickness'       # t/c vs. r/R


class ViewDirection(Enum):
    FRONT = 'front'
    SIDE = 'side'


class TractorPusher(Enum):
    TRACTOR = 't'
    PUSHER = 'p'


@dataclass
class VolumeListing:
    """
    File names found in one volume directory.
    Data names have their extension stripped; image names keep it.
    """
    name: str
    number: Optional[int]
    path: Path
    data_names: List[str] = field(default_factory=list)
    image_names: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FlatFileRecord:
    """
    Metadata decoded from one data or image file name.
    Fields that do not apply stay None.
    """
    volume: str
    filename: str
    manufacturer: str
    volume_number: Optional[int] = None

    diameter_in: Optional[float] = None
    pitch_in: Optional[float] = None
    degree: Optional[float] = None
    blade_count: Optional[int] = None
    tractor_pusher: Optional[TractorPusher] = None
    specimen: Optional[int] = None
    model: Optional[str] = None

    # Data files
    role: Optional[Role] = None
    rpm: Optional[float] = None
    test_label: Optional[str] = None

    # Image files
    view_direction: Optional[ViewDirection] = None

    @property
    def is_image(self) -> bool:
        return self.view_direction is not None


@dataclass(frozen=True)
class DroppedFile:
    volume: str
    filename: str
    reason: str


class PerformanceFile(NamedTuple):
    rpm: Optional[float]
    filename: str
    volume: str


class DataFile(NamedTuple):
    filename: str
    volume: str


@dataclass
class PropellerRecord:
    """
    One physical propeller and every file that belongs to it.
    Scalar metadata comes from the first file of the group.
    """
    identifier: str
    manufacturer: str
    volume: str
    volume_number: Optional[int] = None

    diameter_in: Optional[float] = None
    pitch_in: Optional[float] = None
    degree: Optional[float] = None
    blade_count: Optional[int] = None
    tractor_pusher: Optional[TractorPusher] = None
    specimen: Optional[int] = None
    model: Optional[str] = None

    files: List[str] = field(default_factory=list)
    performance_files: List[PerformanceFile] = field(default_factory=list)
    static_file: Optional[DataFile] = None
    geometry_file: Optional[DataFile] = None
    thickness_file: Optional[DataFile] = None
    front_image: Optional[DataFile] = None
    side_image: Optional[DataFile] = None

    @property
    def rpms(self) -> List[Optional[float]]:
        return [pf.rpm for pf in self.performance_files]


@dataclass
class CatalogResult:
    propellers: List[PropellerRecord]
    dropped: List[DroppedFile]
    records: List[FlatFileRecord] = field(default_factory=list)


@dataclass
class PropellerData:
    """
    Curves and photos loaded for one propeller.
    Per-RPM lists line up with `rpm`.
    """
    rpm: List[Optional[float]] = field(default_factory=list)
    ct: List[Any] = field(default_factory=list)
    cp: List[Any] = field(default_factory=list)
    j: List[Any] = field(default_factory=list)

    rpm_static: Optional[Any] = None
    ct_static: Optional[Any] = None
    cp_static: Optional[Any] = None

    r_R: Optional[Any] = None
    c_R: Optional[Any] = None
    beta: Optional[Any] = None

    r_R_thickness: Optional[Any] = None
    t_c: Optional[Any] = None

    front: Optional[Any] = None     # PIL.Image.Image
    side: Optional[Any] = None

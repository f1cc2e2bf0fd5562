import logging
from pathlib import Path
from typing import Dict, Optional

import numpy as np

from .. import config
from ..exceptions import TableLoadError
from ..models import DataFile, PropellerData, PropellerRecord
from .images import load_image
from .tables import load_table


class PropellerLoader:
    """
    Reads the tables and photos referenced by a PropellerRecord.
    Anything missing is logged and left as None on the result.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def data_path(self, volume: str, filename: str) -> Path:
        return self.root / volume / config.DATA_DIR / f"{filename}{config.DATA_EXT}"

    def image_path(self, volume: str, filename: str) -> Path:
        return self.root / volume / config.PHOTO_DIR / filename

    def load(self, prop: PropellerRecord) -> PropellerData:
        data = PropellerData()

        for pf in prop.performance_files:
            table = self._table(self.data_path(pf.volume, pf.filename))
            data.rpm.append(pf.rpm)
            data.j.append(self._column(table, 'J', pf.filename))
            data.ct.append(self._column(table, 'CT', pf.filename))
            data.cp.append(self._column(table, 'CP', pf.filename))

        if prop.static_file:
            table = self._data_table(prop.static_file)
            data.rpm_static = self._column(table, 'RPM', prop.static_file.filename)
            data.ct_static = self._column(table, 'CT', prop.static_file.filename)
            data.cp_static = self._column(table, 'CP', prop.static_file.filename)

        if prop.geometry_file:
            table = self._data_table(prop.geometry_file)
            data.r_R = self._column(table, 'r_R', prop.geometry_file.filename)
            data.c_R = self._column(table, 'c_R', prop.geometry_file.filename)
            data.beta = self._column(table, 'beta', prop.geometry_file.filename)

        if prop.thickness_file:
            table = self._data_table(prop.thickness_file)
            data.r_R_thickness = self._column(table, 'r_R', prop.thickness_file.filename)
            data.t_c = self._column(table, 't_c', prop.thickness_file.filename)

        if prop.front_image:
            data.front = load_image(self.image_path(prop.front_image.volume, prop.front_image.filename))
        if prop.side_image:
            data.side = load_image(self.image_path(prop.side_image.volume, prop.side_image.filename))

        return data

    def _data_table(self, df: DataFile) -> Optional[Dict[str, np.ndarray]]:
        return self._table(self.data_path(df.volume, df.filename))

    def _table(self, path: Path) -> Optional[Dict[str, np.ndarray]]:
        try:
            return load_table(path)
        except TableLoadError as e:
            logging.warning(str(e))
            return None

    @staticmethod
    def _column(table: Optional[Dict[str, np.ndarray]], name: str, filename: str) -> Optional[np.ndarray]:
        if table is None:
            return None
        if name not in table:
            logging.warning(f"{filename}: no '{name}' column (have {sorted(table)})")
            return None
        return table[name]

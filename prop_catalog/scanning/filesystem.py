import os
import logging
from pathlib import Path
from typing import List, Optional, Set
from concurrent.futures import ThreadPoolExecutor

from .. import config
from ..exceptions import CatalogScanError
from ..models import VolumeListing


class VolumeScanner:
    """
    Lists the data and photo file names of every volume under a dataset root.

    Layout:
        root/volume-1/data/*.txt
        root/volume-1/prop_photos/*.jpg|*.png   (optional)
    """

    def scan(self, root: Path, max_workers: int = 1) -> List[VolumeListing]:
        """
        Returns one VolumeListing per volume, in volume-name order.

        Raises:
            CatalogScanError: root is missing or contains no volumes.
        """
        root = Path(root)
        if not root.is_dir():
            raise CatalogScanError(f"Dataset root {root} does not exist.")

        volumes = self._find_volumes(root)
        if not volumes:
            raise CatalogScanError(f"No '{config.VOLUME_GLOB}' directories found in {root}.")

        logging.info(f"Found {len(volumes)} volumes in {root}")

        if max_workers <= 1:
            return [self.scan_volume(v) for v in volumes]

        # Volumes are independent; map() keeps the sorted order
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.scan_volume, volumes))

    def scan_volume(self, volume_dir: Path) -> VolumeListing:
        listing = VolumeListing(
            name=volume_dir.name,
            number=self.volume_number(volume_dir.name),
            path=volume_dir,
        )

        data_dir = volume_dir / config.DATA_DIR
        if data_dir.is_dir():
            listing.data_names = [
                Path(name).stem for name in self._list_files(data_dir, config.DATA_EXTS)
            ]
        else:
            logging.warning(f"Volume {volume_dir.name} has no '{config.DATA_DIR}' directory; skipping its data.")

        # Photos are optional
        photo_dir = volume_dir / config.PHOTO_DIR
        if photo_dir.is_dir():
            listing.image_names = self._list_files(photo_dir, config.IMAGE_EXTS)

        logging.debug(f"{listing.name}: {len(listing.data_names)} data files, "
                      f"{len(listing.image_names)} images")
        return listing

    @staticmethod
    def volume_number(name: str) -> Optional[int]:
        """'volume-3' -> 3. None when the suffix is not an integer."""
        parts = name.split(config.VOLUME_NUMBER_SEP)
        if len(parts) < 2:
            return None
        try:
            return int(parts[1])
        except ValueError:
            return None

    def _find_volumes(self, root: Path) -> List[Path]:
        return sorted(p for p in root.glob(config.VOLUME_GLOB) if p.is_dir())

    def _list_files(self, directory: Path, exts: Set[str]) -> List[str]:
        """Sorted names of regular files in directory with a matching extension."""
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError:
            logging.warning(f"Cannot read directory: {directory}")
            return []

        names = []
        for e in entries:
            if not e.is_file(follow_symlinks=True):
                continue
            if e.name.startswith("._"):
                continue
            if os.path.splitext(e.name)[1].lower() in exts:
                names.append(e.name)

        names.sort()
        return names

import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .exceptions import FilenameParseError
from .loading.propeller import PropellerLoader
from .metadata.extract import FieldExtractor
from .metadata.linking import PropellerLinker
from .models import CatalogResult, DroppedFile, FlatFileRecord, PropellerData, PropellerRecord, VolumeListing
from .scanning.filesystem import VolumeScanner


class PropCatalogApp:
    def __init__(self, root: Path, max_workers: int = 1):
        self.root = Path(root)
        self.max_workers = max_workers
        self.extractor = FieldExtractor()

    def build(self) -> CatalogResult:
        """
        Executes the cataloging pipeline.
        1. Scan (list volume data/photo file names)
        2. Extract (decode each file name)
        3. Link (group by identifier into propellers)

        Raises:
            CatalogScanError: the root is missing or has no volumes.
        """
        logging.info(f"Scanning {self.root}...")
        volumes = VolumeScanner().scan(self.root, max_workers=self.max_workers)

        records, dropped = self.extract(volumes)
        logging.info(f"Extracted {len(records)} file records ({len(dropped)} unparseable).")

        propellers, duplicates = PropellerLinker().assemble(records)
        dropped.extend(duplicates)

        logging.info(f"Catalog complete: {len(propellers)} propellers.")
        return CatalogResult(propellers=propellers, dropped=dropped, records=records)

    def extract(self, volumes: List[VolumeListing]):
        records: List[FlatFileRecord] = []
        dropped: List[DroppedFile] = []

        jobs = []
        for vol in volumes:
            jobs.extend((vol, name, False) for name in vol.data_names)
            jobs.extend((vol, name, True) for name in vol.image_names)

        for vol, name, is_image in tqdm(jobs, desc="Parsing file names"):
            try:
                if is_image:
                    rec = self.extractor.parse_image_name(vol.name, vol.number, name)
                else:
                    rec = self.extractor.parse_data_name(vol.name, vol.number, name)
            except FilenameParseError as e:
                logging.warning(f"Skipping {vol.name}/{name}: {e.reason}")
                dropped.append(DroppedFile(vol.name, name, e.reason))
                continue
            records.append(rec)

        return records, dropped

    @staticmethod
    def find(result: CatalogResult, identifier: str) -> Optional[PropellerRecord]:
        for prop in result.propellers:
            if prop.identifier == identifier:
                return prop
        return None

    def load(self, prop: PropellerRecord) -> PropellerData:
        return PropellerLoader(self.root).load(prop)

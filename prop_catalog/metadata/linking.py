import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from ..models import (
    DataFile,
    DroppedFile,
    FlatFileRecord,
    PerformanceFile,
    PropellerRecord,
    Role,
    ViewDirection,
)
from .identifier import build_identifier

_SINGLETON_SLOTS = {
    Role.STATIC: 'static_file',
    Role.GEOMETRY: 'geometry_file',
    Role.THICKNESS: 'thickness_file',
}

_IMAGE_SLOTS = {
    ViewDirection.FRONT: 'front_image',
    ViewDirection.SIDE: 'side_image',
}


class PropellerLinker:
    """
    Groups flat file records into one PropellerRecord per canonical identifier.

    Data files define the propellers. Images are keyed independently and only
    attached when their identifier matches an existing propeller.

    Duplicate static/geometry/thickness files (or images of the same view)
    in one group: the first one encountered is kept and the rest are
    reported as dropped.
    """

    def assemble(self, records: Iterable[FlatFileRecord]) -> Tuple[List[PropellerRecord], List[DroppedFile]]:
        data_groups: Dict[str, List[FlatFileRecord]] = defaultdict(list)
        image_groups: Dict[str, List[FlatFileRecord]] = defaultdict(list)

        for rec in records:
            key = build_identifier(rec)
            if rec.is_image:
                image_groups[key].append(rec)
            else:
                data_groups[key].append(rec)

        logging.info(f"Linking {len(data_groups)} propellers...")

        dropped: List[DroppedFile] = []
        propellers = []
        for ident in tqdm(sorted(data_groups), desc="Linking propellers"):
            prop = self._new_propeller(ident, data_groups[ident][0])
            for rec in data_groups[ident]:
                self._add_data_file(prop, rec, dropped)
            for rec in image_groups.pop(ident, []):
                self._add_image(prop, rec, dropped)
            propellers.append(prop)

        unmatched = sum(len(v) for v in image_groups.values())
        if unmatched:
            logging.debug(f"{unmatched} images matched no propeller: {sorted(image_groups)}")

        logging.info(f"Linked {len(propellers)} propellers ({len(dropped)} duplicate files dropped).")
        return propellers, dropped

    def _new_propeller(self, ident: str, first: FlatFileRecord) -> PropellerRecord:
        return PropellerRecord(
            identifier=ident,
            manufacturer=first.manufacturer,
            volume=first.volume,
            volume_number=first.volume_number,
            diameter_in=first.diameter_in,
            pitch_in=first.pitch_in,
            degree=first.degree,
            blade_count=first.blade_count,
            tractor_pusher=first.tractor_pusher,
            specimen=first.specimen,
            model=first.model,
        )

    def _add_data_file(self, prop: PropellerRecord, rec: FlatFileRecord, dropped: List[DroppedFile]):
        prop.files.append(rec.filename)

        if rec.role == Role.PERFORMANCE:
            prop.performance_files.append(PerformanceFile(rec.rpm, rec.filename, rec.volume))
            return

        slot = _SINGLETON_SLOTS[rec.role]
        self._fill_slot(prop, slot, rec, dropped)

    def _add_image(self, prop: PropellerRecord, rec: FlatFileRecord, dropped: List[DroppedFile]):
        self._fill_slot(prop, _IMAGE_SLOTS[rec.view_direction], rec, dropped)

    def _fill_slot(self, prop: PropellerRecord, slot: str, rec: FlatFileRecord, dropped: List[DroppedFile]):
        current = getattr(prop, slot)
        if current is None:
            setattr(prop, slot, DataFile(rec.filename, rec.volume))
            return

        reason = f"duplicate {slot} for {prop.identifier} (kept {current.filename})"
        logging.warning(f"{rec.volume}/{rec.filename}: {reason}")
        dropped.append(DroppedFile(rec.volume, rec.filename, reason))

import csv
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .metadata.identifier import format_number
from .models import CatalogResult, DataFile, DroppedFile, PropellerRecord


def _num(value) -> str:
    return "" if value is None else format_number(value)


def _name(df: Optional[DataFile]) -> str:
    return df.filename if df else ""


class ReportGenerator:
    CATALOG_HEADERS = [
        "Identifier",
        "Manufacturer",
        "Volume",
        "Diameter (in)",
        "Pitch (in)",
        "Degree",
        "Blades",
        "Tractor/Pusher",
        "Specimen",
        "Model",
        "RPMs",
        "Static File",
        "Geometry File",
        "Thickness File",
        "Front Image",
        "Side Image",
    ]

    DROPPED_HEADERS = ["Volume", "File", "Reason"]

    def write_catalog(self, propellers: Iterable[PropellerRecord], output_csv: Path):
        """One row per propeller."""
        count = 0
        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.CATALOG_HEADERS)
            for prop in propellers:
                writer.writerow(self._catalog_row(prop))
                count += 1
        logging.info(f"Wrote {count} propellers to {output_csv}")

    def write_dropped(self, dropped: Iterable[DroppedFile], output_csv: Path):
        count = 0
        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.DROPPED_HEADERS)
            for d in dropped:
                writer.writerow([d.volume, d.filename, d.reason])
                count += 1
        logging.info(f"Wrote {count} dropped files to {output_csv}")

    def summarize(self, result: CatalogResult) -> Dict[str, int]:
        """Counts of propellers, files per role/view and dropped files."""
        counts: Counter = Counter()
        for rec in result.records:
            if rec.is_image:
                counts[f"image:{rec.view_direction.value}"] += 1
            else:
                counts[f"data:{rec.role.value}"] += 1
        counts["propellers"] = len(result.propellers)
        counts["dropped"] = len(result.dropped)
        return dict(counts)

    def _catalog_row(self, prop: PropellerRecord) -> List[str]:
        return [
            prop.identifier,
            prop.manufacturer,
            prop.volume,
            _num(prop.diameter_in),
            _num(prop.pitch_in),
            _num(prop.degree),
            _num(prop.blade_count),
            prop.tractor_pusher.name.lower() if prop.tractor_pusher else "",
            _num(prop.specimen),
            prop.model or "",
            " ".join(_num(rpm) for rpm in prop.rpms),
            _name(prop.static_file),
            _name(prop.geometry_file),
            _name(prop.thickness_file),
            _name(prop.front_image),
            _name(prop.side_image),
        ]

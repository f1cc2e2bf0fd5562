import argparse
import logging
import sys
from pathlib import Path

from . import config
from .core import PropCatalogApp
from .exceptions import CatalogScanError
from .reporting import ReportGenerator


def setup_logging(out_dir: Path, verbose: bool):
    """Sets up logging to both console and a file in the output directory."""
    log_level = logging.DEBUG if verbose else logging.INFO

    out_dir.mkdir(parents=True, exist_ok=True)
    log_file = out_dir / config.LOG_FILE

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Silence chatty libraries
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Propeller Catalog: index the UIUC propeller database by file name")

    p.add_argument("root", type=Path, help="Dataset root containing volume-* directories")
    p.add_argument("--out", type=Path, default=Path("."), help="Directory for reports and log (default: .)")
    p.add_argument("--workers", type=int, default=1, help="Volumes listed in parallel")
    p.add_argument("--show", type=str, default=None, help="Load one propeller by identifier and summarize its data")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def show_propeller(app: PropCatalogApp, result, identifier: str) -> bool:
    prop = app.find(result, identifier)
    if prop is None:
        logging.error(f"No propeller with identifier '{identifier}'.")
        return False

    data = app.load(prop)
    logging.info(f"{prop.identifier} ({prop.volume}): {len(prop.files)} data files")
    for rpm, ct in zip(data.rpm, data.ct):
        points = 0 if ct is None else len(ct)
        logging.info(f"  RPM {rpm}: {points} points")
    if data.rpm_static is not None:
        logging.info(f"  static: {len(data.rpm_static)} RPM points")
    if data.r_R is not None:
        logging.info(f"  geometry: {len(data.r_R)} stations")
    if data.t_c is not None:
        logging.info(f"  thickness: {len(data.t_c)} stations")
    logging.info(f"  front image: {'yes' if data.front is not None else 'no'}, "
                 f"side image: {'yes' if data.side is not None else 'no'}")
    return True


def main(argv=None):
    args = parse_args(argv)

    out_dir = args.out.resolve()
    root = args.root.resolve()

    setup_logging(out_dir, args.verbose)

    logging.info("=== Propeller Catalog Started ===")
    logging.info(f"Root: {root}")
    logging.info(f"Out:  {out_dir}")

    app = PropCatalogApp(root, max_workers=args.workers)

    try:
        result = app.build()
    except CatalogScanError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error while building catalog.")
        sys.exit(1)

    reporter = ReportGenerator()
    reporter.write_catalog(result.propellers, out_dir / config.CATALOG_CSV)
    reporter.write_dropped(result.dropped, out_dir / config.DROPPED_CSV)

    for key, count in sorted(reporter.summarize(result).items()):
        logging.info(f"{key}: {count}")

    if args.show and not show_propeller(app, result, args.show):
        sys.exit(1)


if __name__ == "__main__":
    main()

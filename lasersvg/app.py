# flake8: noqa: E402
import argparse
import gettext
import logging
import sys
from pathlib import Path

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# --------------------------------------------------------
# Gettext MUST be initialized before importing app modules
# --------------------------------------------------------
locale_dir = Path(__file__).parent / 'locale'
gettext.install("lasersvg", locale_dir)

import yaml
from lasersvg.config import CONFIG_FILE, ConfigManager, getflag
from lasersvg.core.job import Job
from lasersvg.driver.driver import IllegalJobError


logger = logging.getLogger(__name__)


def load_job(path: Path) -> Job:
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return Job.from_dict(data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Converts a laser job into an SVG for debugging."
    )
    parser.add_argument(
        "jobfile",
        type=Path,
        help="Job description in YAML format",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the SVG to this file ('-' for stdout) instead of "
             "sending the job to the dummy driver",
    )
    parser.add_argument(
        "--outdir",
        help="Directory for the SVG and XHTML viewer when sending the job",
    )
    parser.add_argument("--bed-width", type=float, help="Bed width in mm")
    parser.add_argument("--bed-height", type=float, help="Bed height in mm")
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_FILE,
        help="Path of the config file",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Store the given driver settings in the config file",
    )
    parser.add_argument(
        "--loglevel",
        default="DEBUG" if getflag("LASERSVG_DEBUG") else "INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    logging.getLogger().setLevel(getattr(logging, args.loglevel))

    config_mgr = ConfigManager(args.config)
    driver = config_mgr.driver
    if args.bed_width is not None:
        driver.bed_width = args.bed_width
    if args.bed_height is not None:
        driver.bed_height = args.bed_height
    if args.outdir is not None:
        driver.apply_settings({"svg_outdir": args.outdir})
    if args.save_config:
        config_mgr.save()

    job = load_job(args.jobfile)
    try:
        if args.output == "-":
            driver.save_job(sys.stdout, job)
        elif args.output:
            with open(args.output, "wb") as f:
                driver.save_job(f, job)
        else:
            driver.send_job(job)
    except IllegalJobError as e:
        logger.error(f"Job rejected: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

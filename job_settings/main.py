#!/usr/bin/env python3
"""Command line checker for processing job settings.

Runs the same initialization the scheduler performs when a processing job
fires, so a job configuration can be verified before it is scheduled.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TypeVar, cast

import yaml

from job_settings import constants
from job_settings.data_map import JobDataMap
from job_settings.errors import ConfigError
from job_settings.settings import ProcessingJobSettings


class Args(argparse.Namespace):
    config: Path | None
    activity_id: str | None
    upload_success_dir: str | None
    processing_success_dir: str | None
    processing_errors_dir: str | None
    status_file_extension: str | None
    status_check_interval: str | None
    log_level: str
    rich_logs: bool
    print_settings: bool


logger = logging.getLogger(__name__)


def parse_args() -> Args:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Check the settings of a processing job",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML file holding the job data map",
    )

    # Configuration overrides (optional when using config file)
    parser.add_argument(
        "--activity-id",
        help="Activity identifier (GUID) of the recurring job",
    )

    parser.add_argument(
        "--upload-success-dir",
        help="Directory for successfully uploaded files",
    )

    parser.add_argument(
        "--processing-success-dir",
        help="Directory for successfully processed files",
    )

    parser.add_argument(
        "--processing-errors-dir",
        help="Directory for files that failed processing",
    )

    parser.add_argument(
        "--status-file-extension",
        help="Extension of status files",
    )

    # Kept as a string, parsing is left to the settings initialization
    parser.add_argument(
        "--status-check-interval",
        help="Delay between status checks",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )

    parser.add_argument(
        "--rich-logs",
        action="store_true",
        help="Enable rich colored logging output",
    )

    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print the validated settings as JSON",
    )

    return cast(Args, parser.parse_args())


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        use_rich: Whether to use rich colored logging
    """
    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(
                    console=Console(stderr=True),
                    show_path=True,
                    show_time=True,
                    show_level=True,
                    markup=True,
                    rich_tracebacks=True,
                )
            ],
        )
    else:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s [%(name)s:%(filename)s:%(lineno)d] %(levelname)s: %(message)s",
        )


T = TypeVar("T")


def first_not_none(*values: T | None) -> T | None:
    for v in values:
        if v is not None:
            return v
    return None


def build_data_map(args: Args, config_dict: JobDataMap) -> JobDataMap:
    """Merge command line overrides into the job data map read from file."""
    overrides = {
        constants.ACTIVITY_ID: args.activity_id,
        constants.UPLOAD_SUCCESS_DIR: args.upload_success_dir,
        constants.PROCESSING_SUCCESS_DIR: args.processing_success_dir,
        constants.PROCESSING_ERRORS_DIR: args.processing_errors_dir,
        constants.STATUS_FILE_EXTENSION: args.status_file_extension,
        constants.STATUS_CHECK_INTERVAL: args.status_check_interval,
    }

    values = dict(config_dict)
    for key, value in overrides.items():
        merged = first_not_none(value, config_dict.get(key))
        if merged is not None:
            values[key] = merged
    return JobDataMap(values)


def main() -> int:
    """Main function."""
    args = parse_args()

    configure_logging(args.log_level, args.rich_logs)

    try:
        config_dict = JobDataMap()
        if args.config:
            logger.info("Loading job configuration from %s", args.config)
            config_dict = JobDataMap.from_yaml(args.config)

        settings = ProcessingJobSettings.initialize(build_data_map(args, config_dict))

        if args.print_settings:
            print(json.dumps(settings.to_data_map(), indent=2, sort_keys=True))

        logger.info("Processing job settings are valid")

    except ConfigError as e:
        logger.error("Invalid job configuration: %s", e)
        return 1
    except (OSError, yaml.YAMLError) as e:
        logger.error("Cannot read job configuration: %s", e)
        return 1
    except Exception as e:
        logger.error("Error checking job settings: %s", e, exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

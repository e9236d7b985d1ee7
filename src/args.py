"""Argument parsing functionality for sbt-releases."""

import argparse
from constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="sbt-releases",
        description=(
            "Discover published versions, homepage and source URL of sbt packages"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--package",
                        dest="PACKAGE",
                        help="Package coordinate, i.e: org.typelevel:cats-core_2.13",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-r", "--registry",
                        dest="REGISTRIES",
                        help=("Repository base URL; repeat to try several in order "
                              f"(default: {Constants.REGISTRY_URL_MAVEN_REPO})"),
                        action="append",
                        type=str)
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to JSON output file (default: stdout)",
                        action="store",
                        type=str)
    parser.add_argument("--no-fallback",
                        dest="NO_FALLBACK",
                        help="Do not fall back to maven-metadata.xml when the crawl finds nothing.",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)

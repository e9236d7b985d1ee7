"""sbt-releases - look up the releases of an sbt-published package.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import Constants, ExitCodes
from common.logging_utils import configure_logging, extra_context
from args import parse_args
from registry.models import PackageCoordinate
from registry.sbt.client import SbtPackageResolver

logger = logging.getLogger(__name__)


def write_output(result, path=None):
    """Write the result as JSON to ``path`` or stdout."""
    payload = json.dumps(result.to_dict(), indent=2)
    if not path:
        print(payload)
        return
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(payload + "\n")
        logger.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logger.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.INPUT_ERROR.value)


def run(args):
    """Resolve the requested package; return an exit code."""
    try:
        coordinate = PackageCoordinate.parse(args.PACKAGE)
    except ValueError as e:
        logger.error("%s", e)
        return ExitCodes.INPUT_ERROR.value

    registries = args.REGISTRIES or [Constants.REGISTRY_URL_MAVEN_REPO]
    resolver = SbtPackageResolver(no_fallback=args.NO_FALLBACK)
    result = resolver.get_releases_from_registries(coordinate, registries)
    if result is None:
        logger.warning(
            "No versions found for %s",
            coordinate.package_name,
            extra=extra_context(event="complete", outcome="not_found", package_manager="sbt"),
        )
        return ExitCodes.NOT_FOUND.value

    write_output(result, args.OUTPUT)
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    logger.info("Arguments parsed.")
    sys.exit(run(args))


if __name__ == "__main__":
    main()

"""Convert a TypeORM entity file into request and response DTO files."""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dtogen.converter.exceptions import EntityParseError
from dtogen.converter.generator import generate_dto_files
from dtogen.core.config import settings
from dtogen.core.engine import default_options
from dtogen.core.logging import configure_logging

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate DTOs from a TypeORM entity file")
    parser.add_argument("entity", type=Path, help="Path to the entity .ts file")
    parser.add_argument("--out", type=Path, default=None, help="Output directory (prints to stdout when omitted)")
    parser.add_argument("--no-force-optional", action="store_true", help="Keep required fields required")
    parser.add_argument("--keep-audit", action="store_true", help="Clear the strip-audit option")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    options = default_options(
        force_optional=False if args.no_force_optional else None,
        strip_audit=False if args.keep_audit else None,
    )

    try:
        files = generate_dto_files(args.entity, args.out, options)
    except FileNotFoundError:
        log.error("Entity file not found: %s", args.entity)
        return 2
    except EntityParseError as e:
        log.error("%s", e)
        return 1

    if args.out is None:
        for file in files:
            print(f"// {file.path}")
            print(file.content)
            print()
    else:
        for file in files:
            print(f"  {args.out / file.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

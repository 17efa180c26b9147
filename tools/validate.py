import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from service.cases import list_cases, resolve_case_path, validate_case_data
from service.config import get_settings


def validate_file(path: Path, settings) -> list:
    data = json.load(open(path, "r", encoding="utf-8"))
    return validate_case_data(data, settings)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate case files against the case schema and map rules")
    parser.add_argument("paths", nargs="*", help="Case files to check (default: every file in cases/)")
    args = parser.parse_args(argv)

    settings = get_settings()
    paths = [Path(p) for p in args.paths] or [resolve_case_path(name, settings) for name in list_cases(settings)]
    if not paths:
        print(f"No case files found in {settings.cases_path}")
        return 1

    for path in paths:
        errors = validate_file(path, settings)
        if errors:
            print(f"{path}: invalid")
            for error in errors:
                print(f"  - {error}")
            return 1
        print(f"{path}: ok")
    return 0


if __name__ == "__main__":
    sys.exit(main())

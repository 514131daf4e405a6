from __future__ import annotations

import sys
from pathlib import Path
from types import ModuleType

# Names the package exposes on top of the API module.
PACKAGE_ONLY = ("__version__", "logger")


def _api_problems(api: ModuleType) -> list[str]:
    names = list(getattr(api, "__all__", ()))
    if not names:
        return ["xmlvalue.api.__all__ is missing or empty"]
    problems = [f"xmlvalue.api.__all__ lists {n!r} more than once" for n in sorted(set(names)) if names.count(n) > 1]
    if names != sorted(names):
        problems.append("xmlvalue.api.__all__ is not sorted")
    problems.extend(f"xmlvalue.api has no attribute {n!r}" for n in names if not hasattr(api, n))
    return problems


def _package_problems(pkg: ModuleType, api: ModuleType) -> list[str]:
    expected = [*PACKAGE_ONLY, *api.__all__]
    if list(getattr(pkg, "__all__", ())) != expected:
        return ["xmlvalue.__all__ must be the metadata names followed by xmlvalue.api.__all__"]
    return [
        f"xmlvalue.{n} is not the object exported by xmlvalue.api"
        for n in api.__all__
        if getattr(pkg, n, None) is not getattr(api, n, None)
    ]


def _error_problems(errors: ModuleType, api: ModuleType) -> list[str]:
    public = set(api.__all__)
    return [f"exception {n} is not part of the public API" for n in errors.__all__ if n not in public]


def main() -> int:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
    try:
        import xmlvalue
        from xmlvalue import api, errors
    except ImportError as exc:
        print(f"[public-api] cannot import xmlvalue: {exc}")
        return 1

    problems = [*_api_problems(api), *_package_problems(xmlvalue, api), *_error_problems(errors, api)]
    for problem in problems:
        print(f"[public-api] ERROR: {problem}")
    if problems:
        return 1
    print(f"[public-api] OK: {len(api.__all__)} public names")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

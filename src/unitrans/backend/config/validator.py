"""Utilities for validating the language catalog and surfacing issues."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path
from typing import Sequence

from .language_catalog import (
    AUTO_LANGUAGE,
    CATALOG_FILE,
    ConfigurationError,
    LanguageCatalogConfig,
    _load_yaml,
    load_language_catalog,
    parse_language_catalog,
)

# ISO 639-1/639-2 codes with an optional region or script suffix (``zh-tw``).
_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(-[a-z]{2,4})?$")


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def validate_language_catalog(catalog: LanguageCatalogConfig) -> list[str]:
    """Return human readable issues detected in ``catalog``."""

    errors: list[str] = []
    codes = [entry.code for entry in catalog.languages]

    if AUTO_LANGUAGE not in codes:
        errors.append(_format_scope("languages", f"missing the '{AUTO_LANGUAGE}' entry"))
    elif codes[0] != AUTO_LANGUAGE:
        errors.append(
            _format_scope("languages", f"'{AUTO_LANGUAGE}' must be the first entry")
        )

    for index, entry in enumerate(catalog.languages):
        if entry.code == AUTO_LANGUAGE:
            continue
        if not _CODE_PATTERN.match(entry.code):
            errors.append(
                _format_scope(f"languages[{index}]", f"invalid language code '{entry.code}'")
            )
        if entry.name != entry.name.strip():
            errors.append(
                _format_scope(f"languages[{index}]", "name has surrounding whitespace")
            )

    names = Counter(entry.name.casefold() for entry in catalog.languages)
    duplicates = sorted(name for name, count in names.items() if count > 1)
    if duplicates:
        errors.append(
            _format_scope("languages", f"duplicate display names: {', '.join(duplicates)}")
        )

    return errors


def validate_catalog_file(path: Path | None = None) -> list[str]:
    """Load ``path`` (defaults to the packaged catalog) and validate it."""

    try:
        if path is None:
            catalog = load_language_catalog()
        else:
            catalog = parse_language_catalog(_load_yaml(path))
    except (ConfigurationError, FileNotFoundError, OSError) as error:
        return [str(error)]
    return validate_language_catalog(catalog)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate the language catalog")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help=f"Catalog file to validate (defaults to {CATALOG_FILE.name})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    errors = validate_catalog_file(args.path)

    if errors:
        for error in errors:
            print(f"ERROR {error}")
        return 1

    print("Language catalog is valid")
    return 0


__all__ = ["main", "validate_catalog_file", "validate_language_catalog"]

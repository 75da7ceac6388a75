from pathlib import Path

from unitrans.backend.config.language_catalog import parse_language_catalog
from unitrans.backend.config.validator import (
    main,
    validate_catalog_file,
    validate_language_catalog,
)


def test_packaged_catalog_is_valid() -> None:
    assert validate_catalog_file() == []


def test_validator_requires_auto_first() -> None:
    catalog = parse_language_catalog(
        {
            "languages": [
                {"code": "en", "name": "English"},
                {"code": "auto", "name": "Auto Detect"},
            ]
        }
    )

    errors = validate_language_catalog(catalog)

    assert errors == ["languages: 'auto' must be the first entry"]


def test_validator_flags_missing_auto_and_bad_codes() -> None:
    catalog = parse_language_catalog(
        {
            "languages": [
                {"code": "english", "name": "English"},
                {"code": "es", "name": "Spanish "},
            ]
        }
    )

    errors = validate_language_catalog(catalog)

    assert any("missing the 'auto' entry" in error for error in errors)
    assert any("invalid language code 'english'" in error for error in errors)
    assert any("languages[1]" in error and "whitespace" in error for error in errors)


def test_validator_flags_duplicate_names() -> None:
    catalog = parse_language_catalog(
        {
            "languages": [
                {"code": "auto", "name": "Auto Detect"},
                {"code": "zh", "name": "Chinese"},
                {"code": "zh-tw", "name": "chinese"},
            ]
        }
    )

    assert validate_language_catalog(catalog) == [
        "languages: duplicate display names: chinese"
    ]


def test_main_reports_errors_for_broken_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "languages.yaml"
    path.write_text("languages:\n  - {code: en, name: English}\n  - {code: en, name: Again}\n")

    assert main([str(path)]) == 1
    assert "Duplicate language codes" in capsys.readouterr().out


def test_main_accepts_packaged_catalog(capsys) -> None:
    assert main([]) == 0
    assert "valid" in capsys.readouterr().out

#!/usr/bin/env python3
"""Verify the bundled ISO 3166-1 dataset against Babel CLDR data.

Runs the package's own consistency checks on the embedded table, then
compares it with the territory and currency data shipped in Babel.

This script is informational beyond the structural checks: CLDR tracks
common usage and may legitimately differ from the curated table (e.g. the
table keeps retired currencies such as BYR for transitional use).

Checks:
    1. Structural: check_records() findings (shape, duplicates).
    2. Unknown territories: alpha-2 codes CLDR has no English name for.
    3. Unknown currencies: codes Babel does not recognize at all.
    4. Tender divergences: CLDR lists a current legal tender for a
       territory that the table does not carry. Shown only with --verbose.

Exit codes:
    0: All checks passed (divergences are warnings, not failures).
    1: Structural errors (check_records findings, import failures).

Usage:
    verify_iso3166.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isocountries.record import CountryRecord


def _check_territories(
    records: tuple[CountryRecord, ...],
    cldr_territories: dict[str, str],
) -> list[str]:
    """Alpha-2 codes without a CLDR territory name."""
    return [
        f"  {record.alpha2}: {record.name} has no CLDR territory entry"
        for record in records
        if record.alpha2 not in cldr_territories
    ]


def _check_currencies(
    records: tuple[CountryRecord, ...],
    babel_currencies: set[str],
) -> list[str]:
    """Currency codes Babel does not recognize."""
    result: list[str] = []
    for record in records:
        result.extend(
            f"  {record.alpha2}: {code} not recognized by Babel"
            for code in record.currencies
            if code not in babel_currencies
        )
    return result


def _check_tender(records: tuple[CountryRecord, ...]) -> list[str]:
    """CLDR current legal tender missing from the table."""
    from babel.core import get_global  # noqa: PLC0415

    # Data format: list of (code, start_date, end_date, tender)
    territory_currencies = get_global("territory_currencies")

    result: list[str] = []
    for record in records:
        active = [
            entry[0]
            for entry in territory_currencies.get(record.alpha2, [])
            if entry[2] is None and entry[3]
        ]
        missing = [code for code in active if code not in record.currencies]
        if missing:
            result.append(
                f"  {record.alpha2}: table={list(record.currencies)}, CLDR tender adds {missing}"
            )
    return result


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    territories: list[str],
    currencies: list[str],
    tender: list[str],
    record_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("ISO 3166-1 Dataset Verification")
    print("=" * 50)
    print(f"Bundled records: {record_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Bundled table violates its own shape or uniqueness rules",
        errors,
    )
    _print_section(
        "[WARN] Territories unknown to CLDR",
        "Code may be newly assigned or withdrawn",
        territories,
    )
    _print_section(
        "[WARN] Currencies unknown to Babel",
        "Code may be misspelled or not ISO 4217",
        currencies,
    )

    if tender:
        if verbose:
            _print_section(
                "[INFO] CLDR tender divergences",
                "CLDR lists current legal tender the table omits",
                tender,
            )
        else:
            print(
                f"[INFO] {len(tender)} territory(ies) where CLDR tender differs."
                " Use --verbose to list."
            )
            print()

    if not (errors or territories or currencies or tender):
        print("[OK] All checks passed. No discrepancies found.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the bundled ISO 3166-1 dataset against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show territories where CLDR legal tender differs from the table.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run ISO 3166-1 verification checks."""
    args = _parse_args(argv)

    try:
        from babel import Locale  # noqa: PLC0415
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from isocountries import default_records  # noqa: PLC0415
    from isocountries.validation import check_records  # noqa: PLC0415

    records = default_records()

    errors = [f"  {issue.format()}" for issue in check_records(records)]
    territories = _check_territories(records, Locale.parse("en").territories)
    currencies = _check_currencies(records, list_currencies())
    tender = _check_tender(records)

    _print_report(
        errors=errors,
        territories=territories,
        currencies=currencies,
        tender=tender,
        record_count=len(records),
        verbose=args.verbose,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(
        f"[PASS] {len(territories)} unknown territory(ies),"
        f" {len(currencies)} unknown currency(ies),"
        f" {len(tender)} tender divergence(s)."
    )
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())

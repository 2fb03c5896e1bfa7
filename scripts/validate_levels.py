from __future__ import annotations
import argparse
from typing import List, Tuple

from tqdm import tqdm

from sokoban_engine.levels.catalog import LEVELS
from sokoban_engine.parser import LevelFormatError, parse_rows


def check_catalog() -> Tuple[int, List[str]]:
    """Strict-parses every catalog entry. Returns (number ok, problem messages)."""
    ok = 0
    problems: List[str] = []
    for idx, rows in enumerate(tqdm(LEVELS, desc="Checking levels", unit="level")):
        try:
            parse_rows(rows, idx, strict=True)
        except LevelFormatError as e:
            problems.append(str(e))
            continue
        ok += 1
    return ok, problems


def main():
    p = argparse.ArgumentParser(description="Strict-parse all catalog levels")
    p.parse_args()

    ok, problems = check_catalog()
    for msg in problems:
        print(f"[skip] {msg}")
    print(f"valid: {ok}, broken: {len(problems)}")
    if problems:
        raise SystemExit(1)

if __name__ == "__main__":
    main()

"""Generate, re-read, edit and rewrite a roster file.

Usage:
    python scripts/roster_demo.py --data data.csv --out newData.csv --count 5 --seed 42
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional

from rollcall.core.config import AppSettings
from rollcall.core.exceptions import StreamIOError, StreamOpenError
from rollcall.core.logging import configure_logging
from rollcall.core.protocols import IDiagnostics
from rollcall.generate import random_roster
from rollcall.io.files import load_roster, save_roster
from rollcall.models.student import Gender, Student
from rollcall.reporting import create_diagnostics

SAMPLE_STUDENTS: list[Student] = [
    Student(name="Lera", form=10, gender=Gender.GIRL),
    Student(name="Vasea", form=12, gender=Gender.BOY),
]
NEW_STUDENT = Student(name="Vasilisk", form=5, gender=Gender.BOY)

EXIT_OK = 0
EXIT_OPEN_FAILED = 1
EXIT_IO_FAILED = 2


def write_initial_roster(path: Path, count: int, rng: random.Random, name_length: int = 19,
                         encoding: str = "utf-8", diagnostics: Optional[IDiagnostics] = None) -> int:
    """Write ``count`` random students followed by the sample students."""
    students = random_roster(count, rng=rng, name_length=name_length) + SAMPLE_STUDENTS
    written = save_roster(path, students, encoding=encoding, diagnostics=diagnostics)
    print(f"  Wrote {written} students to {path}")
    return written


def edit_roster(students: list[Student]) -> list[Student]:
    """Move the first student to form 1 and enrol the new student."""
    if not students:
        return students
    edited = [students[0].model_copy(update={"form": 1}), *students[1:]]
    edited.append(NEW_STUDENT)
    return edited


def rewrite_roster(src: Path, dst: Path, strict_gender: bool = False, encoding: str = "utf-8",
                   diagnostics: Optional[IDiagnostics] = None) -> list[Student]:
    students = load_roster(src, strict_gender=strict_gender, encoding=encoding,
                           diagnostics=diagnostics)
    print(f"  Read {len(students)} students from {src}")
    edited = edit_roster(students)
    save_roster(dst, edited, encoding=encoding, diagnostics=diagnostics)
    print(f"  Wrote {len(edited)} students to {dst}")
    return edited


def main(argv: Optional[list[str]] = None) -> int:
    settings = AppSettings()
    parser = argparse.ArgumentParser(description="Write, re-read and rewrite a student roster")
    parser.add_argument("--data", default=settings.demo.data_path, help="Initial roster file")
    parser.add_argument("--out", default=settings.demo.updated_path, help="Edited roster file")
    parser.add_argument("--count", type=int, default=settings.demo.record_count,
                        help="Number of random students")
    parser.add_argument("--seed", type=int, default=settings.demo.seed, help="Random seed")
    parser.add_argument("--strict-gender", action="store_true", default=settings.codec.strict_gender,
                        help="Reject lines whose gender tag is not B or G")
    args = parser.parse_args(argv)

    configure_logging(settings)
    rng = random.Random(args.seed)
    encoding = settings.codec.encoding
    diagnostics = create_diagnostics(settings)

    try:
        print("Generating roster...")
        write_initial_roster(Path(args.data), args.count, rng,
                             name_length=settings.demo.name_length, encoding=encoding,
                             diagnostics=diagnostics)

        print("Editing roster...")
        rewrite_roster(Path(args.data), Path(args.out), strict_gender=args.strict_gender,
                       encoding=encoding, diagnostics=diagnostics)
    except StreamOpenError as exc:
        print(f"error: {exc}")
        return EXIT_OPEN_FAILED
    except StreamIOError as exc:
        print(f"error: {exc}")
        return EXIT_IO_FAILED

    print("Done!")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

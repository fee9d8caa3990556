"""Random roster generation for demos and fixtures.

The random source is always passed in (or built from an explicit seed);
nothing here touches the module-level ``random`` state.
"""

from __future__ import annotations

import random
import string
from typing import Optional

from rollcall.models.student import Gender, Student

NAME_ALPHABET = string.ascii_uppercase + string.ascii_lowercase
DEFAULT_NAME_LENGTH = 19
FORMS = range(1, 13)


def random_student(rng: random.Random, *, name_length: int = DEFAULT_NAME_LENGTH) -> Student:
    """One student with a random letter name, form 1-12, and gender."""
    name = "".join(rng.choice(NAME_ALPHABET) for _ in range(name_length))
    return Student(
        name=name,
        form=rng.choice(FORMS),
        gender=rng.choice([Gender.BOY, Gender.GIRL]),
    )


def random_roster(
    count: int,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    name_length: int = DEFAULT_NAME_LENGTH,
) -> list[Student]:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if rng is None:
        rng = random.Random(seed)
    return [random_student(rng, name_length=name_length) for _ in range(count)]

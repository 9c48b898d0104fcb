# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Seedable generation of mini-game stimuli.

Every random choice goes through one random.Random instance, so a fixed
seed reproduces the same word lists, letter streams, task schedules and
rotation tasks.

Example:
    >>> generator = TaskGenerator(seed=42)
    >>> words = generator.memory_words()
    >>> schedule = generator.processing_schedule()
"""

import random
from dataclasses import dataclass

from cogniscreen.core.screening.scorers.processing import ProcessingTaskType

WORD_LISTS: tuple[tuple[str, ...], ...] = (
    ("apple", "chair", "phone", "book", "water"),
    ("house", "flower", "music", "happy", "dog"),
    ("tree", "pencil", "smile", "car", "sun"),
    ("bird", "table", "green", "friend", "walk"),
    ("cat", "window", "blue", "laugh", "food"),
)

ATTENTION_LETTERS = "ABCDEFGHIJKLMNOPQRST"
TARGET_LETTER = "A"
TARGET_PROBABILITY = 0.3
ATTENTION_DURATION_S = 60

PROCESSING_TASK_COUNT = 75
SWITCH_PROBABILITY = 0.3
MAX_COMPLEXITY = 3

Shape = tuple[tuple[int, ...], ...]

ROTATION_SHAPES: tuple[Shape, ...] = (
    ((1, 0, 0), (1, 0, 0), (1, 1, 0)),
    ((1, 1, 0), (1, 0, 0), (1, 0, 0)),
    ((1, 1, 1), (0, 1, 0), (0, 1, 0)),
    ((0, 1, 0), (1, 1, 1), (0, 1, 0)),
    ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
    ((0, 1, 1), (1, 1, 0), (0, 0, 0)),
    ((1, 0, 1), (1, 1, 1), (0, 1, 0)),
    ((0, 1, 0), (1, 1, 0), (1, 0, 1)),
    ((1, 0, 0), (1, 1, 0), (0, 1, 1)),
    ((1, 1, 1), (0, 0, 1), (0, 0, 1)),
)
ROTATION_ANGLES = (60, 90, 120, 180, 240, 270, 300)
ROTATION_TASK_COUNT = 20
MIRROR_TASK_EVERY = 4
MAX_ROTATION_COMPLEXITY = 5


@dataclass(frozen=True)
class ScheduledTask:
    """One slot of the processing speed schedule."""

    task_type: ProcessingTaskType
    complexity: int
    is_switch: bool


@dataclass(frozen=True)
class RotationTask:
    """One mental rotation task."""

    shape: Shape
    rotation_deg: int
    mirror_task: bool
    complexity: int


class TaskGenerator:
    """Generates game stimuli from an optional seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def memory_words(self) -> list[str]:
        """Pick one of the fixed study lists."""
        return list(self._rng.choice(WORD_LISTS))

    def attention_letters(self, count: int) -> list[str]:
        """Letter stream in which roughly 30% of letters are the target."""
        non_targets = [c for c in ATTENTION_LETTERS if c != TARGET_LETTER]
        return [
            TARGET_LETTER
            if self._rng.random() < TARGET_PROBABILITY
            else self._rng.choice(non_targets)
            for _ in range(count)
        ]

    def processing_schedule(self, count: int = PROCESSING_TASK_COUNT) -> list[ScheduledTask]:
        """Task schedule with forced switches.

        With SWITCH_PROBABILITY a slot is forced to differ from the
        previous task type; otherwise any type may be drawn, which can
        still produce a switch.
        """
        task_types = list(ProcessingTaskType)
        schedule: list[ScheduledTask] = []
        last_type: ProcessingTaskType | None = None

        for i in range(count):
            if i > 0 and self._rng.random() < SWITCH_PROBABILITY:
                task_type = self._rng.choice([t for t in task_types if t != last_type])
            else:
                task_type = self._rng.choice(task_types)

            schedule.append(
                ScheduledTask(
                    task_type=task_type,
                    complexity=self._rng.randint(1, MAX_COMPLEXITY),
                    is_switch=i > 0 and task_type != last_type,
                )
            )
            last_type = task_type

        return schedule

    def rotation_schedule(self, count: int = ROTATION_TASK_COUNT) -> list[RotationTask]:
        """Mental rotation tasks; every fourth one offers a mirror distractor."""
        tasks: list[RotationTask] = []
        for i in range(count):
            shape = self._rng.choice(ROTATION_SHAPES)
            rotation = self._rng.choice(ROTATION_ANGLES)
            # Symmetric shapes have no distinct mirror image to offer
            mirror_task = i % MIRROR_TASK_EVERY == 0 and _mirror(shape) != shape
            complexity = (
                _shape_complexity(shape)
                + (1 if rotation % 90 else 0)
                + (1 if mirror_task else 0)
            )
            tasks.append(
                RotationTask(
                    shape=shape,
                    rotation_deg=rotation,
                    mirror_task=mirror_task,
                    complexity=min(MAX_ROTATION_COMPLEXITY, complexity),
                )
            )
        return tasks


def _mirror(shape: Shape) -> Shape:
    return tuple(tuple(reversed(row)) for row in shape)


def _shape_complexity(shape: Shape) -> int:
    filled = sum(sum(row) for row in shape)
    if filled <= 4:
        return 1
    if filled <= 7:
        return 2
    return 3 + (1 if _mirror(shape) != shape else 0)

"""Weekly split patterns: which muscle groups are trained on which cycle day.

Static table keyed by goal then days per week. Each pattern is a tuple of
training days; each day is a tuple of muscle-group tags in allocation order.
"""

from __future__ import annotations

from app.core.enums import Goal, MuscleGroup as M

SplitDay = tuple[M, ...]
SplitStrategy = tuple[SplitDay, ...]

FALLBACK_DAYS_PER_WEEK = 3
FALLBACK_GOAL = Goal.MAINTAIN

SPLIT_STRATEGIES: dict[Goal, dict[int, SplitStrategy]] = {
    Goal.GAIN_MUSCLE: {
        3: ((M.CHEST, M.SHOULDERS, M.TRICEPS), (M.BACK, M.BICEPS), (M.LEGS, M.CORE)),
        4: ((M.CHEST, M.SHOULDERS), (M.BACK, M.BICEPS), (M.LEGS,), (M.CORE, M.ARMS)),
        5: ((M.CHEST, M.TRICEPS), (M.BACK, M.BICEPS), (M.SHOULDERS, M.ARMS), (M.LEGS,), (M.CORE,)),
    },
    Goal.LOSE_WEIGHT: {
        3: ((M.CHEST, M.BACK, M.CORE), (M.LEGS, M.SHOULDERS), (M.CARDIO, M.CORE)),
        4: ((M.FULL_BODY,), (M.FULL_BODY,), (M.CARDIO, M.CORE), (M.FULL_BODY,)),
        5: ((M.FULL_BODY,), (M.CARDIO,), (M.FULL_BODY,), (M.CARDIO,), (M.CORE,)),
    },
    Goal.ENDURANCE: {
        3: ((M.CARDIO, M.CORE), (M.FULL_BODY,), (M.CARDIO, M.FLEXIBILITY)),
        4: ((M.CARDIO,), (M.FULL_BODY, M.CORE), (M.CARDIO,), (M.FLEXIBILITY, M.BALANCE)),
        5: ((M.CARDIO,), (M.FULL_BODY,), (M.CARDIO,), (M.FULL_BODY,), (M.FLEXIBILITY,)),
    },
    Goal.MAINTAIN: {
        3: ((M.CHEST, M.BACK, M.CORE), (M.LEGS, M.SHOULDERS), (M.ARMS, M.FLEXIBILITY)),
        4: ((M.FULL_BODY,), (M.FULL_BODY,), (M.CARDIO, M.CORE), (M.FLEXIBILITY,)),
        5: ((M.FULL_BODY,), (M.CARDIO,), (M.FULL_BODY,), (M.CORE,), (M.FLEXIBILITY,)),
    },
    Goal.DEFINITION: {
        3: ((M.CHEST, M.CORE), (M.BACK, M.LEGS), (M.SHOULDERS, M.ARMS)),
        4: ((M.CHEST, M.SHOULDERS), (M.BACK, M.BICEPS), (M.LEGS,), (M.CORE, M.TRICEPS)),
        5: ((M.CHEST,), (M.BACK,), (M.LEGS,), (M.SHOULDERS,), (M.CORE, M.ARMS)),
    },
}


def select_split_strategy(goal: Goal | str, days_per_week: int) -> SplitStrategy:
    """
    Look up the split for (goal, days_per_week).
    Unknown goal -> maintain's table; missing day count -> that goal's 3-day split.
    """
    try:
        by_days = SPLIT_STRATEGIES[Goal(goal)]
    except ValueError:
        by_days = SPLIT_STRATEGIES[FALLBACK_GOAL]
    return by_days.get(days_per_week, by_days[FALLBACK_DAYS_PER_WEEK])

from __future__ import annotations


DIE_SIDES = 20

FAILURE_XP_DIVISOR = 3

TEAM_BONUS_PER_TEAMMATE = 2
TEAM_BONUS_MAX_TEAMMATES = 4
TEAM_XP_BONUS_PER_TEAMMATE = 5

PROMOTION_SUCCESS_XP = 100
PROMOTION_FAILURE_XP = 50
PROMOTION_UNQUALIFIED_XP = 25
PROMOTION_SKILL_BONUS = 1


def failure_xp(xp_reward: int) -> int:
    return max(0, int(xp_reward)) // FAILURE_XP_DIVISOR


def team_bonus(participant_count: int) -> int:
    teammates = max(0, int(participant_count) - 1)
    return TEAM_BONUS_PER_TEAMMATE * min(TEAM_BONUS_MAX_TEAMMATES, teammates)


def team_xp_bonus(participant_count: int) -> int:
    teammates = max(0, int(participant_count) - 1)
    return TEAM_XP_BONUS_PER_TEAMMATE * teammates


def is_success(roll: int, skill: int, bonus: int, difficulty: int) -> bool:
    return int(roll) + int(skill) + int(bonus) >= int(difficulty)

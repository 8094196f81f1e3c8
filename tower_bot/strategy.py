"""
Kingdom Wars tower strategy

Core philosophy:
1. Armor up against whoever hit us, but never spend more than 40% on it.
2. Rush upgrades early or while still low level.
3. Take every cheap kill on the board.
4. Dump what's left on the most valuable target.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from tower_bot.models import (
    CombatActionEntry,
    CombatRequest,
    EnemyTower,
    NegotiateRequest,
    PlayerTower,
)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants & helpers
# ---------------------------------------------------------------------------

MAX_LEVEL = 5
# Upgrades stay on the table until this turn, or forever below LOW_LEVEL + 1
EARLY_GAME_TURNS = 20
LOW_LEVEL = 2

ARMOR_SHARE = 0.4
FINISHER_SHARE = 0.7
PRESSURE_MIN_RESOURCES = 10
PRESSURE_SHARE = 0.6


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def upgrade_cost(level: int) -> int:
    """Cost to go from `level` to `level + 1`."""
    return _round_half_up(50 * (1.75 ** (level - 1)))


def resource_gen(level: int) -> int:
    """Resources generated per turn at `level`."""
    return _round_half_up(20 * (1.5 ** (level - 1)))


def effective_hp(t: EnemyTower | PlayerTower) -> int:
    return t.hp + t.armor


# ---------------------------------------------------------------------------
# Target scoring
# ---------------------------------------------------------------------------

def _threat(enemy: EnemyTower) -> float:
    """Higher = better target: high level, already worn down."""
    return enemy.level * 2 - enemy.hp * 0.01


def sort_by_threat(enemies: Iterable[EnemyTower]) -> list[EnemyTower]:
    """Most threatening first. Equal scores keep input order."""
    return sorted(enemies, key=_threat, reverse=True)


def sort_by_weakness(enemies: Iterable[EnemyTower]) -> list[EnemyTower]:
    """Cheapest kill first."""
    return sorted(enemies, key=effective_hp)


def incoming_damage(
    previous_attacks: Sequence[CombatActionEntry] | None,
    my_id: int,
) -> int:
    """Total troops sent at `my_id` last turn."""
    total = 0
    for pa in previous_attacks or []:
        if pa.action is None or pa.action.targetId != my_id:
            continue
        total += pa.action.troopCount or 0
    return total


# ---------------------------------------------------------------------------
# Negotiation strategy
# ---------------------------------------------------------------------------

def decide_negotiation(req: NegotiateRequest) -> list[dict]:
    """Ally with the strongest enemy and point it at the weakest one."""
    enemies = req.enemyTowers or []

    if not enemies:
        return []

    strongest = max(enemies, key=lambda e: e.level)
    weakest = sort_by_weakness(enemies)[0]

    proposal: dict = {"allyId": strongest.playerId}
    if weakest.playerId != strongest.playerId:
        proposal["attackTargetId"] = weakest.playerId

    log.debug("turn %s: proposing %s", req.turn, proposal)
    return [proposal]


# ---------------------------------------------------------------------------
# Combat strategy
# ---------------------------------------------------------------------------

def decide_combat(req: CombatRequest) -> list[dict]:
    """Return list of combat actions."""
    me = req.playerTower
    if me is None:
        return []

    enemies = req.enemyTowers or []
    actions: list[dict] = []
    budget = me.resources

    # --- 1. ARMOR decision ---
    budget = _maybe_armor(actions, me, budget, req.previousAttacks)

    # --- 2. UPGRADE decision ---
    budget = _maybe_upgrade(actions, me, req.turn, budget)

    # --- 3. ATTACK decisions ---
    if enemies and budget > 0:
        budget = _finishing_blows(actions, enemies, budget)
        budget = _pressure_strike(actions, enemies, budget)

    log.debug(
        "turn %s: player %s level %s (+%s/turn) -> %s, %s left",
        req.turn, me.playerId, me.level, resource_gen(me.level), actions, budget,
    )
    return actions


# ---------------------------------------------------------------------------
# Combat sub-decisions
# ---------------------------------------------------------------------------

def _maybe_armor(
    actions: list[dict],
    me: PlayerTower,
    budget: int,
    previous_attacks: Sequence[CombatActionEntry] | None,
) -> int:
    incoming = incoming_damage(previous_attacks, me.playerId)
    if incoming <= 0:
        return budget

    armor_amount = min(incoming, math.floor(budget * ARMOR_SHARE))
    if armor_amount > 0:
        actions.append({"type": "armor", "amount": armor_amount})
        budget -= armor_amount

    return budget


def _maybe_upgrade(
    actions: list[dict],
    me: PlayerTower,
    turn: int,
    budget: int,
) -> int:
    if me.level >= MAX_LEVEL:
        return budget

    cost = upgrade_cost(me.level)
    if budget < cost:
        return budget

    if turn <= EARLY_GAME_TURNS or me.level <= LOW_LEVEL:
        actions.append({"type": "upgrade"})
        budget -= cost

    return budget


def _finishing_blows(
    actions: list[dict],
    enemies: list[EnemyTower],
    budget: int,
) -> int:
    for target in sort_by_weakness(enemies):
        if budget <= 0:
            break

        ehp = effective_hp(target)
        # Only commit to a kill that leaves 30% of the pool
        if budget >= ehp and ehp <= budget * FINISHER_SHARE:
            actions.append({
                "type": "attack",
                "targetId": target.playerId,
                "troopCount": ehp,
            })
            budget -= ehp

    return budget


def _pressure_strike(
    actions: list[dict],
    enemies: list[EnemyTower],
    budget: int,
) -> int:
    if budget <= PRESSURE_MIN_RESOURCES:
        return budget

    threats = sort_by_threat(enemies)
    strike = math.floor(budget * PRESSURE_SHARE)
    if threats and strike > 0:
        actions.append({
            "type": "attack",
            "targetId": threats[0].playerId,
            "troopCount": strike,
        })
        budget -= strike

    return budget

from __future__ import annotations

from pydantic import BaseModel


# --- Shared ---

class PlayerTower(BaseModel):
    playerId: int
    hp: int
    armor: int
    resources: int
    level: int


class EnemyTower(BaseModel):
    playerId: int
    hp: int
    armor: int
    level: int


class AttackAction(BaseModel):
    targetId: int | None = None
    troopCount: int | None = None


class CombatActionEntry(BaseModel):
    """One attack seen last turn. Missing fields contribute no damage."""

    playerId: int | None = None
    action: AttackAction | None = None


# --- Negotiate ---

class NegotiateRequest(BaseModel):
    gameId: int | None = None
    turn: int = 0
    playerTower: PlayerTower | None = None
    enemyTowers: list[EnemyTower] | None = None
    combatActions: list[CombatActionEntry] = []


# --- Combat ---

class DiplomacyAction(BaseModel):
    allyId: int
    attackTargetId: int | None = None


class DiplomacyEntry(BaseModel):
    playerId: int
    action: DiplomacyAction


class CombatRequest(BaseModel):
    gameId: int | None = None
    turn: int
    playerTower: PlayerTower | None = None
    enemyTowers: list[EnemyTower] | None = None
    diplomacy: list[DiplomacyEntry] = []
    previousAttacks: list[CombatActionEntry] | None = None

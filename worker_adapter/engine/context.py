"""Execution context describing who triggered an action and where."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Action:
    name: str
    id: Optional[int] = None


@dataclass(frozen=True)
class App:
    anonymous: bool = True
    id: int = 0
    name: str = ""


@dataclass(frozen=True)
class User:
    anonymous: bool = True
    id: int = 0
    plan_id: int = 0
    name: str = ""
    email: Optional[str] = None
    points: int = 0


@dataclass
class ExecutionContext:
    base_url: str = ""
    operation_id: Optional[str] = None
    tenant_id: Optional[str] = None
    action: Optional[Action] = None
    app: App = field(default_factory=App)
    user: User = field(default_factory=User)

    @property
    def action_name(self) -> Optional[str]:
        return self.action.name if self.action else None

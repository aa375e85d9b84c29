# backend/app/planner/schema.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .parsers import clean_code, safe_amount, safe_int


class Horizon(str, Enum):
    SHORT = "Short term (0-2 years)"
    MEDIUM = "Medium term (2-7 years)"
    LONG = "Long term (7+ years)"

    @classmethod
    def parse(cls, raw: Any) -> "Horizon":
        """Accepts a member, its name ("LONG") or its label; anything else is SHORT."""
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip()
        for member in cls:
            if text.upper() == member.name or text == member.value:
                return member
        lowered = text.lower()
        if lowered.startswith("long"):
            return cls.LONG
        if lowered.startswith("medium"):
            return cls.MEDIUM
        return cls.SHORT


class AssetClass(str, Enum):
    STOCKS = "Stocks (Domestic & International)"
    BONDS = "Bonds (Fixed Income)"
    REAL_ESTATE = "Real Estate (REITs)"
    CASH = "Cash / Money Market"


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class UserProfile:
    age: int
    salary: float
    country: str
    state: str
    savings: float
    monthly_investable: float
    debt_payments: float
    emergency_fund: float

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserProfile":
        # Stored rows may be camelCase (API) or snake_case (older exports).
        data = data or {}
        return cls(
            age=safe_int(_pick(data, "age")),
            salary=safe_amount(_pick(data, "salary")),
            country=clean_code(_pick(data, "country")),
            state=clean_code(_pick(data, "state")),
            savings=safe_amount(_pick(data, "savings")),
            monthly_investable=safe_amount(_pick(data, "monthlyInvestable", "monthly_investable")),
            debt_payments=safe_amount(_pick(data, "debtPayments", "debt_payments")),
            emergency_fund=safe_amount(_pick(data, "emergencyFund", "emergency_fund")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "age": self.age,
            "salary": self.salary,
            "country": self.country,
            "state": self.state,
            "savings": self.savings,
            "monthlyInvestable": self.monthly_investable,
            "debtPayments": self.debt_payments,
            "emergencyFund": self.emergency_fund,
        }


@dataclass(frozen=True)
class Goal:
    id: str
    name: str
    target_amount: float
    horizon: Horizon
    # 1-5, displayed only; the engine does not weight by priority.
    priority: int = 3

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Goal":
        return cls(
            id=str(_pick(data, "id") or ""),
            name=str(_pick(data, "name") or ""),
            target_amount=safe_amount(_pick(data, "targetAmount", "target_amount")),
            horizon=Horizon.parse(_pick(data, "horizon")),
            priority=safe_int(_pick(data, "priority"), default=3),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "targetAmount": self.target_amount,
            "horizon": self.horizon.name,
            "priority": self.priority,
        }


@dataclass
class Allocation:
    asset_class: AssetClass
    percentage: float
    amount: float
    suggested_instruments: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "assetClass": self.asset_class.value,
            "percentage": self.percentage,
            "amount": self.amount,
            "suggestedInstruments": list(self.suggested_instruments),
        }


@dataclass
class PlanResult:
    risk_score: int
    allocations: List[Allocation]
    total_investable: float
    warnings: List[str]
    tax_estimate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "riskScore": self.risk_score,
            "allocations": [a.to_dict() for a in self.allocations],
            "totalInvestable": self.total_investable,
            "warnings": list(self.warnings),
            "taxEstimate": self.tax_estimate,
        }

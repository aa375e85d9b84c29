from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

HorizonName = Literal["SHORT", "MEDIUM", "LONG"]
PERCENT_SUM_TOLERANCE = 0.5


class ProfileIn(BaseModel):
    age: int = Field(gt=0)
    salary: float = Field(ge=0)
    country: str = "USA"
    state: str = ""
    savings: float = 0.0
    monthlyInvestable: float = 0.0
    debtPayments: float = Field(default=0.0, ge=0)
    emergencyFund: float = Field(default=0.0, ge=0)


class GoalIn(BaseModel):
    name: str
    targetAmount: float = Field(ge=0)
    horizon: HorizonName = "MEDIUM"
    priority: int = Field(default=3, ge=1, le=5)


class GoalOut(GoalIn):
    id: str


class PlanRequest(BaseModel):
    # Omitted parts are loaded from the caller's stored profile/goals.
    profile: Optional[ProfileIn] = None
    goals: Optional[List[GoalIn]] = None
    includeAdvice: bool = False


class AllocationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    assetClass: str
    percentage: float = Field(ge=0, le=100)
    amount: float
    suggestedInstruments: List[str]


class PlanResultModel(BaseModel):
    """Shape shared by the deterministic engine and the AI producer."""

    model_config = ConfigDict(extra="forbid")

    riskScore: int = Field(ge=0, le=100)
    allocations: List[AllocationModel]
    totalInvestable: float
    warnings: List[str]
    taxEstimate: float

    @model_validator(mode="after")
    def validate_total_percentage(self):
        total = sum(a.percentage for a in self.allocations)
        if abs(total - 100.0) > PERCENT_SUM_TOLERANCE:
            raise ValueError(f"Allocation percentages must sum to 100, got {total}")
        return self


class PlanResponse(PlanResultModel):
    model_config = ConfigDict(extra="forbid")

    source: Literal["deterministic", "ai"] = "deterministic"
    advice: Optional[str] = None


class ExportRequest(PlanRequest):
    # A plan already shown to the user (e.g. the AI one); computed if omitted.
    plan: Optional[PlanResultModel] = None


class TaxBreakdownOut(BaseModel):
    federal: float
    state: float
    total: float
    effectiveRate: float


class DashboardOut(BaseModel):
    profileCompletion: int
    monthlyInvestable: float
    numGoals: int
    totalTargetCapital: float
    savingsProgress: int
    taxBreakdown: Optional[TaxBreakdownOut] = None

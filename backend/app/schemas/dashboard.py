"""
Pydantic schemas for dashboard API responses
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Union

Number = Union[int, float]


class Summary(BaseModel):
    """Quarter-to-date revenue against target"""

    qtdRevenue: Number = Field(
        ...,
        ge=0,
        description="Won revenue closed inside the reference quarter",
        examples=[1000],
    )

    target: Number = Field(
        ...,
        ge=0,
        description="Sum of the quarter's monthly targets",
        examples=[1500],
    )

    gap: Number = Field(
        ...,
        description="qtdRevenue minus target",
        examples=[-500],
    )

    gapPercentage: int = Field(
        ...,
        description="Gap as a rounded percentage of target (0 when target is 0)",
        examples=[-33],
    )


class Driver(BaseModel):
    """One pipeline driver card"""

    name: str = Field(..., description="Driver name", examples=["Pipeline Value"])
    value: Union[str, Number] = Field(..., description="Display value", examples=["$4.8M"])
    change: str = Field(
        ...,
        pattern=r"^[+-]",
        description="Signed change vs. the previous month",
        examples=["+12%"],
    )
    trend: List[Number] = Field(
        ...,
        min_length=6,
        max_length=6,
        description="Six monthly samples, oldest first",
    )


class RiskFactor(BaseModel):
    """A detected pipeline risk"""

    type: str = Field(..., description="Risk type", examples=["stale_deals"])
    description: str = Field(..., description="Human-readable risk summary")
    count: Optional[int] = Field(None, ge=0, description="Number of affected records")


class Recommendation(BaseModel):
    """An action derived from a risk factor"""

    priority: Literal["high", "medium", "low"] = Field(..., description="Action priority")
    action: str = Field(..., description="Recommended action")


class RevenueTrendPoint(BaseModel):
    """Won revenue and target for one month"""

    month: str = Field(..., description="Three-letter month label", examples=["Jan"])
    revenue: Number = Field(..., ge=0, description="Won revenue closed in the month")
    target: Number = Field(..., ge=0, description="Monthly target (0 if none)")


class RepPerformance(BaseModel):
    """Closed-deal record and win rate for one rep"""

    repId: str = Field(..., description="Rep identifier")
    name: str = Field(..., description="Rep name")
    won: int = Field(..., ge=0, description="Won deal count")
    lost: int = Field(..., ge=0, description="Lost deal count")
    winRate: int = Field(..., ge=0, le=100, description="Rounded win rate percentage")


class HealthStatus(BaseModel):
    """Health check response"""

    status: str = Field("ok", description="Service status")

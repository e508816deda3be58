"""
Recommendations — Map each risk factor to a prioritized action.
"""

from __future__ import annotations

import re

from ..config import RECOMMENDATION_RULES

REP_DESCRIPTION = re.compile(r"^Rep (?P<rep>.+?) - Win Rate:")


def _rep_name(risk: dict) -> str | None:
    """The rep a risk names: its "rep" key, else parsed from the description."""
    if risk.get("rep"):
        return risk["rep"]
    match = REP_DESCRIPTION.match(risk.get("description") or "")
    return match.group("rep") if match else None


def build_recommendations(risks: list[dict]) -> list[dict]:
    """
    One recommendation per risk, same order, via RECOMMENDATION_RULES.

    Risk types without a rule are skipped, as are rep rules whose rep
    cannot be named.
    """
    recommendations: list[dict] = []

    for risk in risks:
        rule = RECOMMENDATION_RULES.get(risk.get("type"))
        if rule is None:
            continue

        action = rule["action"]
        if "{rep}" in action:
            rep = _rep_name(risk)
            if rep is None:
                continue
            action = action.format(rep=rep)

        recommendations.append({"priority": rule["priority"], "action": action})

    return recommendations

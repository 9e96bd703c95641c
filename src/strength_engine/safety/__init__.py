"""Safety rule engine: hard exclusions and ordered soft clamps."""

from strength_engine.safety.engine import ClampOutcome, SafetyRuleEngine

__all__ = ["ClampOutcome", "SafetyRuleEngine"]

"""
DOMAIN MODELS — REGULATOR

Reference type: every name bound to a SEBI instance sees the same rule.
"""


class SEBI:
    """Securities and Exchange Board of India."""

    def __init__(self, rule: str = "Regulate"):
        self.rule = rule

    def describe(self, label: str) -> str:
        return f"{label} Rule: {self.rule}"

"""MatchResult — the outcome of evaluating one matcher against one value.

INVARIANT: Every matcher evaluation returns a fresh MatchResult.
The assertion helper, the CLI, and any reporting adapter consume this type.
"""

from __future__ import annotations

from pydantic import BaseModel


class MatchResult(BaseModel):
    """Pass/fail outcome plus the text needed to explain it.

    Attributes:
        passed: Whether the actual value satisfied the matcher.
        expectation: What the matcher expects (``"the date is before ..."``).
        mismatch_description: Why the actual value failed; None on success.
        actual: Diagnostic rendering of the actual value, when it was a date.
    """

    model_config = {"frozen": True}

    passed: bool
    expectation: str
    mismatch_description: str | None = None
    actual: str | None = None

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def success(cls, expectation: str, *, actual: str | None = None) -> MatchResult:
        return cls(passed=True, expectation=expectation, actual=actual)

    @classmethod
    def failure(
        cls,
        expectation: str,
        mismatch_description: str,
        *,
        actual: str | None = None,
    ) -> MatchResult:
        return cls(
            passed=False,
            expectation=expectation,
            mismatch_description=mismatch_description,
            actual=actual,
        )

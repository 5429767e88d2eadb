from dataclasses import dataclass
from typing import List

from pydantic import BaseModel

################################################################################
# Audit trail
################################################################################


@dataclass(frozen=True)
class Check:
    """One evaluated assertion; failed checks are also the node's errors."""

    passed: bool
    message: str


################################################################################
# Parsed rule expressions - between the parser and the interpreter
################################################################################


class RuleStep(BaseModel):
    name: str
    args: List[str] = []

    @property
    def is_noop(self) -> bool:
        return not self.name


class RuleGroup(BaseModel):
    steps: List[RuleStep]


class RuleExpression(BaseModel):
    source: str
    groups: List[RuleGroup]

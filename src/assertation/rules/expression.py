"""
Rule-expression parser and interpreter.

Grammar, lowest precedence first:

    expression := group ("|" group)*      OR-alternatives, left to right
    group      := step (";" step)*        AND-steps, applied in order
    step       := name ("," arg)*         rule name and string arguments

There is no escaping: "|", ";" and "," cannot appear inside arguments.
"""

from typing import TYPE_CHECKING

from loguru import logger

from assertation.domain.model import RuleExpression, RuleGroup, RuleStep
from assertation.utils.constants import RuleSyntax

if TYPE_CHECKING:
    from assertation.chain import RuleChain


def parse_step(source: str) -> RuleStep:
    name, *args = source.split(RuleSyntax.ARG)
    return RuleStep(name=name.strip(), args=args)


def parse_rules(source: str) -> RuleExpression:
    """
    Parse a rule expression into OR-groups of AND-steps.

    Empty OR-groups ("req||int", trailing "|") are dropped. Empty steps
    are kept and later applied as no-ops.
    """
    groups = [
        RuleGroup(steps=[parse_step(step) for step in group.split(RuleSyntax.AND)])
        for group in source.split(RuleSyntax.OR)
        if group.strip()
    ]
    return RuleExpression(source=source, groups=groups)


def apply_step(node: "RuleChain", step: RuleStep) -> "RuleChain":
    """
    Apply one step. Arguments beyond what the rule accepts are dropped,
    so stray delimiters ("req,,") do not break an expression.
    """
    if step.is_noop:
        return node

    args = step.args
    limit = node.context.registry.max_arguments(step.name)
    if limit is not None and len(args) > limit:
        logger.debug(f"Ignoring {len(args) - limit} extra argument(s) for '{step.name}'")
        args = args[:limit]

    return node.apply(step.name, *args)


def apply_rules(node: "RuleChain", source: str) -> "RuleChain":
    """
    Run a rule expression against a node.

    The first OR-group runs against node itself, every further group
    against or_() of the chain built so far. The returned node belongs to
    the last group that ran, which is not necessarily a passing one:
    callers must ask valid() / errors() on the result.
    """
    expression = parse_rules(source)

    for index, group in enumerate(expression.groups):
        if index > 0:
            node = node.or_()

        for step in group.steps:
            node = apply_step(node, step)

    logger.debug(
        f"Applied '{source}' to {node.attribute or 'value'}: "
        f"{len(expression.groups)} alternative(s), valid={node.valid()}"
    )
    return node

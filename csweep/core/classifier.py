"""Turn aggregated function sites into findings."""

from csweep.core.models import Category, Finding
from csweep.core.registry import FunctionRegistry

# Never reported: the entry point has no caller and a single definition.
EXCLUDED_FUNCTIONS = frozenset({"main"})

# Fewer declaration sites than this means no separate prototype was seen.
MIN_DECLARATIONS = 2


def classify(registry: FunctionRegistry) -> list[Finding]:
    """
    Classify every registered function.

    - unused: no call sites; lists all declaration sites
    - undeclared: fewer than two declaration sites; lists those sites (0 or 1)

    A function can land in both categories. Output is sorted by name, with
    ``unused`` before ``undeclared`` for the same name.
    """
    findings: list[Finding] = []

    for name in sorted(registry):
        if name in EXCLUDED_FUNCTIONS:
            continue
        record = registry[name]

        if not record.calls:
            findings.append(
                Finding(
                    name=name,
                    category=Category.UNUSED,
                    positions=list(record.declarations),
                )
            )

        if len(record.declarations) < MIN_DECLARATIONS:
            findings.append(
                Finding(
                    name=name,
                    category=Category.UNDECLARED,
                    positions=list(record.declarations),
                )
            )

    return findings

"""Race planning wizard flow."""

from raceplan.wizard.flow import (
    STAGE_ORDER,
    PlanningWizard,
    SessionContext,
    WizardStage,
)

__all__ = [
    "STAGE_ORDER",
    "PlanningWizard",
    "SessionContext",
    "WizardStage",
]

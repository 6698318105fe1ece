"""Custom exceptions for race planning."""


class RacePlanError(Exception):
    """Base exception for race planning errors."""


class InvalidInputError(RacePlanError):
    """Numeric input outside the domain the calculation accepts."""


class WizardStateError(RacePlanError):
    """Wizard operation attempted from the wrong stage."""

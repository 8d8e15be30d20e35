"""Filing validators, one per filing kind."""

from .appointment import AppointmentValidator
from .termination import TerminationValidator
from .update import UpdateValidator

__all__ = ["AppointmentValidator", "TerminationValidator", "UpdateValidator"]

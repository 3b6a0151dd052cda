"""Controllers turning decoded requests into response envelopes."""

from src.api.controllers.signup import SignupController

__all__ = ["SignupController"]

# Orchestrator

from .probe_session import ProbeSession

__all__ = ['ProbeSession']

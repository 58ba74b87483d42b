"""
Console user interface.

Provides the interactive review session that prints the batch summary
and shows differences on request.
"""

from checker.ui.session import ReviewSession, SessionState, build_runner

__all__ = [
    'ReviewSession',
    'SessionState',
    'build_runner',
]

"""DC dimming settings page package.

Public API:
- DcDimmingPanel: Settings page binding controls to the dimming service

Internal structure:
- panel: Page controller
- components/: Reusable widgets (main switch bar)
- logic/: UI builder and pure percentage/label helpers
"""

from .panel import DcDimmingPanel

__all__ = ["DcDimmingPanel"]

"""i3 Split Indicator

Status-bar helper for i3/sway: listens to window and binding events,
picks the split orientation for the focused container, and prints a
one-character status token per decision.
"""

__version__ = "0.1.0"
__author__ = "NixOS i3 Project System"

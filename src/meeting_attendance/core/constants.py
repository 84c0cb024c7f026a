"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Unjustified absences at which a member enters each risk tier.
ATTENTION_ABSENCES = 3
OUT_ABSENCES = 4

MEMBER_NAME_MIN_LENGTH = 2
MEMBER_NAME_MAX_LENGTH = 100
EVENT_TITLE_MAX_LENGTH = 100
EVENT_DESCRIPTION_MAX_LENGTH = 500
JUSTIFICATION_MAX_LENGTH = 1000

"""
ViewState Theme - Centralized color palette for the console screens.

Color Philosophy:
- Counter panels keep the red/green pairing of the original widgets
- Lifecycle states map onto accent colors (loading cyan, success teal, error red)
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Loading, highlights
TEAL_PRIMARY = "#4ECDC4"       # Success
RED_PRIMARY = "#FF6B6B"        # Errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"
TEXT_MUTED = "#8A9BA8"

# =============================================================================
# COUNTER PANELS
# =============================================================================
NUMBER1_BG = "red"
NUMBER2_BG = "green"

# =============================================================================
# NOTICES
# =============================================================================
NOTICE_SUCCESS = "green"
NOTICE_ERROR = "red"

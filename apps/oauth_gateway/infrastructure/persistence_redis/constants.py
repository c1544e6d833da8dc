"""Redis Key Constants."""

STATE_KEY_PREFIX = "oauth:state:"

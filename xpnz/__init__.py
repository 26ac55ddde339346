"""XPNZ save-to-spend display core."""

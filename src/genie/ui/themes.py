"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Mint-and-lagoon palette of the genie lamp
GENIE_LAMP = Theme(
    name="genie-lamp",
    primary="#38A3A5",      # Lagoon - main accent
    secondary="#80ED99",    # Mint - new chat, sidebar highlights
    accent="#57CC99",       # Green - cards and hover
    foreground="#E8F6EF",   # Light text
    background="#0F1F1C",   # Deep lamp shadow
    success="#80ED99",
    warning="#F4D35E",
    error="#EE6C4D",
    surface="#163832",
    panel="#122B27",
    dark=True,
    variables={
        "block-cursor-foreground": "#0F1F1C",
        "block-cursor-background": "#C7F9CC",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#C7F9CC",
        "input-cursor-foreground": "#0F1F1C",
        "input-selection-background": "#38A3A5 30%",
        "border": "#22577A",
        "border-blurred": "#1B4542",
        "scrollbar": "#1B4542",
        "scrollbar-hover": "#22577A",
        "scrollbar-active": "#38A3A5",
        "scrollbar-background": "#122B27",
        "footer-foreground": "#C7F9CC",
        "footer-background": "#0F1F1C",
        "footer-key-foreground": "#80ED99",
        "footer-key-background": "#163832",
        "footer-description-foreground": "#A7D7C5",
    },
)

"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.

Layout: a sidebar on the left (collapsed to an icon strip unless extended),
the main column on the right, and the log panel under the main panel.
"""

APP_CSS = """
Screen {
    layout: horizontal;
    background: $background;
}

/* ============================================
   Sidebar - New Chat, Recent, bottom menu
   ============================================ */
Sidebar {
    width: 9;
    height: 100%;
    background: $panel;
    border-right: tall $border;
    padding: 1 1;

    &.-extended {
        width: 34;
    }

    Button {
        width: 100%;
        min-width: 5;
        height: 3;
        margin-bottom: 1;
    }

    #new-chat-btn {
        background: $secondary 60%;
        color: $background;
        text-style: bold;
    }

    #recent {
        height: 1fr;
        display: none;
    }

    &.-extended #recent {
        display: block;
    }

    #recent-title {
        text-style: bold;
        color: $secondary;
        margin-bottom: 1;
    }

    .recent-entry {
        height: 1;
        min-width: 5;
        border: none;
        background: transparent;
        content-align: left middle;
        margin-bottom: 0;

        &:hover {
            background: $accent 20%;
        }
    }

    #sidebar-bottom {
        height: auto;
        dock: bottom;
    }

    .bottom-item {
        height: 1;
        margin-top: 1;
        color: $text-muted;
    }
}

/* ============================================
   Main Column
   ============================================ */
#main-column {
    width: 1fr;
    height: 100%;
}

MainPanel {
    height: 1fr;
    padding: 0 2;

    #nav {
        height: 3;
        content-align: left middle;
        text-style: bold;
        color: $primary;
    }

    #main-container {
        height: 1fr;
    }

    #greet {
        height: auto;
        margin: 1 0;
    }

    #greet-title {
        text-style: bold;
        color: $secondary;
    }

    #greet-subtitle {
        color: $text-muted;
    }

    #cards {
        height: auto;
        margin-top: 1;
    }

    .card {
        width: 1fr;
        height: 7;
        margin-right: 1;
        padding: 1;
        background: $surface;
        border: round $accent 60%;

        &:hover {
            border: round $accent;
        }
    }

    #result {
        height: auto;
        display: none;
    }

    &.-showing-result #result {
        display: block;
    }

    &.-showing-result #greet {
        display: none;
    }

    #result-title {
        height: auto;
        margin: 1 0;
        color: $secondary;
        text-style: bold;
    }

    #loader {
        height: 3;
        display: none;
    }

    &.-loading #loader {
        display: block;
    }

    &.-loading #result-data {
        display: none;
    }

    #result-data {
        height: auto;
    }

    #search-box {
        height: 3;
        border: round $primary 60%;
        background: $panel;

        &:focus-within {
            border: round $primary;
        }
    }

    #prompt-input {
        width: 1fr;
        border: none;
        background: transparent;
    }

    #send-btn {
        min-width: 8;
        height: 1;
        border: none;
        display: none;
    }

    &.-has-input #send-btn {
        display: block;
    }

    #bottom-info {
        height: auto;
        margin: 1 0;
        text-align: center;
        color: $text-muted;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}
"""

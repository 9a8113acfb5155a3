"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Conversation Transcript
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary-lighten-1;
    }
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    border-left: thick $secondary;
    background: $secondary 8%;
}

.model-message {
    border-left: thick $primary;
    background: $surface;
}

.message-header {
    color: $text-muted;
    text-style: italic;
}

.message-content {
    padding: 0 0 0 1;
}

/* ============================================
   Rendered UI Surfaces
   ============================================ */
.ui-surface, .ui-surface Vertical, .ui-surface Horizontal {
    height: auto;
}

.ui-surface Horizontal {
    width: 100%;
}

.ui-container.gap-sm > * { margin: 0 1 0 0; }
.ui-container.gap-md > * { margin: 0 1 1 0; }
.ui-container.gap-lg > * { margin: 1 2 1 0; }

.ui-card {
    border: round $border;
    padding: 0 1;
    border-title-color: $accent;

    &.card-filled {
        background: $boost;
    }
}

.ui-text.text-lg, .ui-text.text-xl {
    text-style: bold;
    color: $accent;
}

.ui-text.text-sm {
    color: $text-muted;
}

.ui-divider {
    height: auto;
    color: $border;
}

.divider-label {
    color: $text-muted;
    text-style: bold;
}

.ui-badge {
    padding: 0 1;
    text-style: bold;
    background: $primary 30%;

    &.badge-success { background: $success 30%; color: $success; }
    &.badge-warning { background: $warning 30%; color: $warning; }
    &.badge-error { background: $error 30%; color: $error; }
}

.field-label {
    color: $text-muted;
}

.ui-input, .ui-select, .ui-checkbox {
    width: 100%;
}

.ui-textarea {
    height: 6;
}

.ui-image {
    color: $text-muted;
}

.ui-unknown {
    color: $warning 70%;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Prompt Line
   ============================================ */
ChatInputBar {
    height: 3;
    padding: 0 1;
    background: $surface;
}

#chat-input {
    width: 1fr;
    border: tall $border;

    &:focus {
        border: tall $primary;
    }
}

#send-btn {
    width: 10;
    margin-left: 1;

    &:disabled {
        opacity: 60%;
    }
}
"""

"""Qt application layer: store, corrections, announcer and the window."""

"""Effects performed after a wizard completes."""

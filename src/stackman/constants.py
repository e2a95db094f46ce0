"""Shared names for the workspace and its durable store."""

APP_NAME = "stackman"

DB_FILENAME = "stackman.db"
PREFERENCES_FILENAME = "preferences.yaml"
HOME_ENV = "STACKMAN_HOME"

# Workspace keys that are mirrored to the store, in load order
COLLECTIONS = ("tasks", "stacks", "history", "archived_tasks")

BACKGROUND_IMAGE = "background_image"

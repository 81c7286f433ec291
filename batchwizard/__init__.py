"""create-files-batch - step wizard for creating batches of files from templates."""

__version__ = "0.1.0"

"""Environment-backed defaults for orchdocs."""

import os


class Config:
    SOURCE_ROOT = os.environ.get("ORCHDOCS_SOURCE_ROOT", "src/main/resources")
    EXTENSION = os.environ.get("ORCHDOCS_EXTENSION", ".js")
    CODE_LANGUAGE = os.environ.get("ORCHDOCS_CODE_LANGUAGE", "javascript")
    LOG_LEVEL = os.environ.get("ORCHDOCS_LOG_LEVEL", "INFO").upper()

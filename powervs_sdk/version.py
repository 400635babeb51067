"""Version metadata for the PowerVS SDK."""

__version__ = "0.1.0"

# Empty for a final release, e.g. "dev" or "rc1" otherwise.
VERSION_PRERELEASE = ""

# Filled in by release builds.
GIT_COMMIT = ""

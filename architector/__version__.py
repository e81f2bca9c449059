"""Version information for Architector."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the on-disk document layout
# MINOR: New tools or operations, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

"""Grouped Release Notes - Publish GitHub releases with notes grouped by commit type."""

# Public API exports for library usage
from .api import ReleaseNotesBuilder, ReleaseNotesClient
from .assembler import assemble
from .classifier import ClassificationRule, classify, classify_all
from .core.config import GitHubConfig, GroupingConfig, ReleaseNotesConfig
from .core.errors import ConfigurationError, ConnectionFailedError, NotFoundError, ReleaseNotesError, RemoteError
from .core.interfaces import (
	CompositeProgressReporter,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)
from .tag_range import select_range
from .window import resolve_window

__version__ = "1.0.0"

__all__ = [
	# Client classes
	"ReleaseNotesBuilder",
	"ReleaseNotesClient",
	# Pipeline
	"select_range",
	"resolve_window",
	"ClassificationRule",
	"classify",
	"classify_all",
	"assemble",
	# Configuration
	"ReleaseNotesConfig",
	"GitHubConfig",
	"GroupingConfig",
	# Errors
	"ReleaseNotesError",
	"ConfigurationError",
	"NotFoundError",
	"RemoteError",
	"ConnectionFailedError",
	# Progress reporting
	"ProgressReporter",
	"ProgressEvent",
	"NullProgressReporter",
	"CompositeProgressReporter",
]

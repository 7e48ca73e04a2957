"""Domain initialization and configuration.

Identity, catalogue and ordering share one Protean domain: placing an
order reads the caller's profile and the cake synchronously inside the
same unit of work.
"""

from protean.domain import Domain

from bakeandtaste.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
bakeandtaste = Domain(name="bakeandtaste")

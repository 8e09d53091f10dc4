"""ownerfmt - Ownership string formatting for UIs and notifications."""

from typing import Dict, Any
from .ingest.description_loader import load_description_json
from .config import load_email_resolver
from .presentation.ownership_formatter import format_ownership_summary
from .utils.logging import setup_logging, get_logger
from .utils.errors import OwnerFmtError

__version__ = "0.1.0"

__all__ = ["describe_ownership"]

setup_logging()
logger = get_logger("core")


def describe_ownership(description_path: str, config_path: str = None, format_human: bool = False) -> Dict[str, Any]:
    """Load an ownership description and return its formatted owner strings."""
    try:
        description = load_description_json(description_path)
        resolver = load_email_resolver(config_path)
        
        summary = format_ownership_summary(description, resolver)
        logger.info(f"Formatted ownership: owners={summary.co_owner_ids}")
        
        if format_human:
            from .presentation.human_formatter import format_human_friendly
            return {"formatted": format_human_friendly(summary), "structured": summary.model_dump()}
        
        return summary.model_dump()
        
    except OwnerFmtError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while formatting ownership: {e}", exc_info=True)
        raise OwnerFmtError(f"Formatting failed: {e}") from e

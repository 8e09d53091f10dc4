"""Load and validate ownership description JSON."""

import json
from pathlib import Path
from pydantic import ValidationError
from ..contracts.ownership import OwnershipDescription
from ..utils.errors import DescriptionLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.description_loader")


def load_description_json(description_path: str) -> OwnershipDescription:
    """
    Load ownership description from a JSON file.
    
    Args:
        description_path: Path to description JSON file
        
    Returns:
        Validated ownership description
        
    Raises:
        DescriptionLoadError: If file cannot be loaded or is invalid
    """
    path = Path(description_path)
    
    if not path.exists():
        raise DescriptionLoadError(
            f"Description file not found: {description_path}. "
            "Please check the file path and ensure the file exists."
        )
    
    if not path.is_file():
        raise DescriptionLoadError(
            f"Path is not a file: {description_path}. "
            "Please provide a valid ownership description JSON file."
        )
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DescriptionLoadError(f"Invalid JSON in description file: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptionLoadError(
            f"Error reading description file: {e}. "
            "Please check file permissions and try again."
        )
    
    if not isinstance(data, dict):
        raise DescriptionLoadError("Description JSON must be an object")
    
    try:
        description = OwnershipDescription(**data)
    except ValidationError as e:
        raise DescriptionLoadError(f"Invalid ownership description: {e}")
    
    logger.info(
        f"Loaded ownership description from {description_path} "
        f"(primary: {description.primary_owner_id}, "
        f"co-owners: {len(description.co_owner_ids)})"
    )
    return description

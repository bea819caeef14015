"""Seed document loading."""

import logging
from pathlib import Path

from spotrate.rates.models import IncomingRates

logger = logging.getLogger(__name__)


def load_seed_rates(path: Path | str) -> IncomingRates:
    """Load the seed rates JSON document.

    Args:
        path: Path to a ``{"rates": [...]}`` JSON file

    Returns:
        Parsed batch of rates, ready for ``RateTable.ingest``

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the document is not valid rates JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed rates file not found: {path}")

    batch = IncomingRates.model_validate_json(path.read_text())
    logger.info("Loaded %d seed rates from %s", len(batch.rates), path)
    return batch

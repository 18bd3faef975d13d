"""Persistent slot holding the last saved budget as a JSON file."""

import os
from pathlib import Path
from typing import Optional

from logger import get_logger
from models.budget_state import BudgetState
from services.state_codec import deserialize, dumps

logger = get_logger()


class StateStore:
    """File-backed storage for a single budget.

    Args:
        path: Location of the JSON file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[BudgetState]:
        """Read the saved budget.

        Returns:
            The saved state, or None if nothing is saved or the file can't be
            read back as a budget. Never raises.
        """
        if not self.path.exists():
            return None

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read saved budget {self.path}: {e}")
            return None

        state = deserialize(raw)
        if state is None:
            logger.warning(f"Ignoring unreadable saved budget: {self.path}")
        return state

    def save(self, state: BudgetState) -> None:
        """Write the budget atomically via a .tmp file and os.replace().

        Raises:
            OSError: If the file can't be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        try:
            tmp.write_text(dumps(state), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug(f"Saved budget to {self.path}")

    def clear(self) -> bool:
        """Delete the saved budget.

        Returns:
            True if a saved budget was deleted, False if there was none.
        """
        if not self.path.exists():
            return False
        self.path.unlink()
        return True

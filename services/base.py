"""Base services container for dependency injection."""

from datetime import date
from pathlib import Path
from typing import Optional

from config import Config
from logger import get_logger
from services.allocation import AllocationService
from services.forecast import ForecastService
from services.state_codec import deserialize, dumps
from services.storage import StateStore

logger = get_logger()

IMPORT_INVALID_MESSAGE = "Import failed. The selected file is not a valid budget export."
IMPORT_READ_FAILED_MESSAGE = "Import failed. Please try a different file."


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different storage slot for testing.

    Args:
        config: Application configuration object.
        store: Optional state store for testing. If None, creates a
            StateStore at config.state_path.
    """

    def __init__(self, config: Config, store=None):
        self.config = config
        self.store = store or StateStore(config.state_path)
        self.budget = AllocationService()
        self.forecast = ForecastService(self.budget)
        self.import_error: Optional[str] = None

    def load_persisted(self) -> bool:
        """Replace the current budget with the saved one, if any.

        Returns:
            True if a saved budget was loaded.
        """
        state = self.store.load()
        if state is None:
            return False
        self.budget.apply_state(state)
        return True

    def persist(self) -> None:
        """Save the current budget to the storage slot."""
        self.store.save(self.budget.snapshot())

    def import_file(self, path: Path) -> Optional[str]:
        """Load a budget export, replacing the current budget on success.

        Args:
            path: File to read.

        Returns:
            None on success, otherwise the message to show the user. The
            current budget is left untouched on failure.
        """
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            logger.error(f"Could not read import file {path}: {e}")
            self.import_error = IMPORT_READ_FAILED_MESSAGE
            return self.import_error

        state = deserialize(raw)
        if state is None:
            self.import_error = IMPORT_INVALID_MESSAGE
            return self.import_error

        self.budget.apply_state(state)
        self.import_error = None
        logger.info(f"Imported {len(state.categories)} categories from {path}")
        return None

    def export_file(self, path: Optional[Path] = None) -> Path:
        """Write the current budget as JSON.

        Args:
            path: Destination file. Defaults to a dated file in export_dir.

        Returns:
            The path written.
        """
        if path is None:
            path = self.config.export_dir / f"budget-{date.today().isoformat()}.json"
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps(self.budget.snapshot()), encoding="utf-8")
        logger.info(f"Exported budget to {path}")
        return path

import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from hostkit.config import HostConfig, configure_logging
from hostkit.sequencer import DialogueCatalog, load_catalog


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(HostConfig())
    logger = logging.getLogger("CatalogVerification")

    try:
        if argv:
            catalog = load_catalog(Path(argv[0]))
        else:
            logger.info("No path given, checking the built-in catalog...")
            catalog = DialogueCatalog.default()

        assert len(catalog) > 0, "Catalog is empty"

        for key, sequence in catalog.items():
            assert len(sequence) > 0, f"Sequence {key!r} has no entries"
            for index, entry in enumerate(sequence.entries):
                assert entry.text.strip(), f"Sequence {key!r} entry {index} has no text"
            logger.info(f"{key}: {len(sequence)} entries")

        logger.info("VERIFICATION SUCCESSFUL: All dialogue sequences loaded and validated.")
        return 0

    except Exception as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
